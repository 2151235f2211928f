from .common import ApiResponse, Pagination
from .category import CategoryCreate, CategoryUpdate, CategoryResponse, CategoryRef
from .product import ProductCreate, ProductUpdate, ProductResponse, ProductRef
from .movement import MovementCreate, MovementUpdate, MovementResponse
from .user import UserCreate, UserUpdate, UserResponse
from .auth import LoginRequest, RegisterRequest, AuthData
from .report import InventorySummary, CategoryValue

__all__ = [
    "ApiResponse",
    "Pagination",
    "CategoryCreate",
    "CategoryUpdate",
    "CategoryResponse",
    "CategoryRef",
    "ProductCreate",
    "ProductUpdate",
    "ProductResponse",
    "ProductRef",
    "MovementCreate",
    "MovementUpdate",
    "MovementResponse",
    "UserCreate",
    "UserUpdate",
    "UserResponse",
    "LoginRequest",
    "RegisterRequest",
    "AuthData",
    "InventorySummary",
    "CategoryValue",
]
