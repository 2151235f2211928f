from pydantic import EmailStr, Field, field_validator
from typing import Optional
from datetime import datetime
from gestor_inventario.models.user import UserRole
from .common import CamelModel

class UserBase(CamelModel):
    nombre: str = Field(..., min_length=1, max_length=50)
    email: EmailStr
    rol: UserRole = UserRole.USUARIO
    activo: bool = True

    @field_validator("email")
    @classmethod
    def normalize_email(cls, value):
        return value.strip().lower()

class UserCreate(UserBase):
    # La longitud mínima se valida en el servicio para devolver su mensaje propio
    password: str

class UserUpdate(CamelModel):
    nombre: Optional[str] = Field(None, min_length=1, max_length=50)
    email: Optional[EmailStr] = None
    password: Optional[str] = None
    rol: Optional[UserRole] = None
    activo: Optional[bool] = None

    @field_validator("email")
    @classmethod
    def normalize_email(cls, value):
        return value.strip().lower() if value else value

class UserResponse(CamelModel):
    id: int
    nombre: str
    email: str
    rol: UserRole
    activo: bool
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
