from pydantic import Field
from typing import Optional
from datetime import datetime
from .common import CamelModel

class CategoryBase(CamelModel):
    nombre: str = Field(..., min_length=1, max_length=50)
    descripcion: Optional[str] = Field(None, max_length=200)
    activo: bool = True

class CategoryCreate(CategoryBase):
    pass

class CategoryUpdate(CamelModel):
    nombre: Optional[str] = Field(None, min_length=1, max_length=50)
    descripcion: Optional[str] = Field(None, max_length=200)
    activo: Optional[bool] = None

class CategoryRef(CamelModel):
    id: int
    nombre: str
    descripcion: Optional[str] = None

class CategoryResponse(CategoryBase):
    id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
