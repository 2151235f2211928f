import math
from pydantic import BaseModel
from pydantic.alias_generators import to_camel
from typing import Generic, Optional, TypeVar

T = TypeVar("T")

class CamelModel(BaseModel):
    """Modelo base: campos en snake_case, JSON en camelCase como espera el cliente."""

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True
        str_strip_whitespace = True

class Pagination(BaseModel):
    page: int
    limit: int
    total: int
    pages: int

    @classmethod
    def build(cls, page: int, limit: int, total: int) -> "Pagination":
        return cls(page=page, limit=limit, total=total, pages=math.ceil(total / limit) if limit else 0)

class ApiResponse(BaseModel, Generic[T]):
    success: bool = True
    data: Optional[T] = None
    message: str = ""
    pagination: Optional[Pagination] = None
