from pydantic import AliasChoices, Field, field_validator
from typing import Optional
from datetime import datetime
from .common import CamelModel
from .category import CategoryRef

# El cliente envía la categoría como "categoria" o "categoriaId"
_CATEGORIA_ALIASES = AliasChoices("categoriaId", "categoria", "categoria_id")

class ProductBase(CamelModel):
    nombre: str = Field(..., min_length=1, max_length=100)
    descripcion: str = Field(..., min_length=1, max_length=500)
    categoria_id: int = Field(..., validation_alias=_CATEGORIA_ALIASES)
    precio: float = Field(..., ge=0)
    stock_minimo: int = Field(..., ge=0)
    codigo_barras: Optional[str] = Field(None, max_length=100)
    proveedor: Optional[str] = Field(None, max_length=100)
    activo: bool = True

    @field_validator("codigo_barras")
    @classmethod
    def blank_barcode_is_none(cls, value):
        return value or None

class ProductCreate(ProductBase):
    stock: int = Field(0, ge=0)

class ProductUpdate(CamelModel):
    """Campos editables. El stock solo cambia mediante movimientos."""
    nombre: Optional[str] = Field(None, min_length=1, max_length=100)
    descripcion: Optional[str] = Field(None, min_length=1, max_length=500)
    categoria_id: Optional[int] = Field(None, validation_alias=_CATEGORIA_ALIASES)
    precio: Optional[float] = Field(None, ge=0)
    stock_minimo: Optional[int] = Field(None, ge=0)
    codigo_barras: Optional[str] = Field(None, max_length=100)
    proveedor: Optional[str] = Field(None, max_length=100)
    activo: Optional[bool] = None

    @field_validator("codigo_barras")
    @classmethod
    def blank_barcode_is_none(cls, value):
        return value or None

class ProductRef(CamelModel):
    id: int
    nombre: str
    descripcion: Optional[str] = None
    stock: int

class ProductResponse(CamelModel):
    id: int
    nombre: str
    descripcion: str
    categoria_id: Optional[int] = None
    categoria: Optional[CategoryRef] = None
    precio: float
    stock: int
    stock_minimo: int
    codigo_barras: Optional[str] = None
    proveedor: Optional[str] = None
    activo: bool
    is_low_stock: bool
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
