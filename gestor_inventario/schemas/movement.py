from pydantic import AliasChoices, Field
from typing import Optional
from datetime import datetime
from gestor_inventario.models.movement import MovementType
from .common import CamelModel
from .product import ProductRef

_PRODUCTO_ALIASES = AliasChoices("productoId", "producto", "producto_id")
_USUARIO_ALIASES = AliasChoices("usuario", "responsable")

class MovementCreate(CamelModel):
    producto_id: int = Field(..., validation_alias=_PRODUCTO_ALIASES)
    tipo: MovementType
    cantidad: int = Field(..., ge=1)
    motivo: Optional[str] = Field(None, max_length=100)
    usuario: Optional[str] = Field(None, max_length=50, validation_alias=_USUARIO_ALIASES)
    notas: Optional[str] = Field(None, max_length=500)

class MovementUpdate(CamelModel):
    producto_id: Optional[int] = Field(None, validation_alias=_PRODUCTO_ALIASES)
    tipo: Optional[MovementType] = None
    cantidad: Optional[int] = Field(None, ge=1)
    motivo: Optional[str] = Field(None, max_length=100)
    usuario: Optional[str] = Field(None, max_length=50, validation_alias=_USUARIO_ALIASES)
    notas: Optional[str] = Field(None, max_length=500)

class MovementResponse(CamelModel):
    id: int
    producto_id: Optional[int] = None
    producto: Optional[ProductRef] = None
    tipo: MovementType
    cantidad: int
    motivo: str
    usuario: str
    fecha: datetime
    notas: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
