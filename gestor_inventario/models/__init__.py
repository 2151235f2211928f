from gestor_inventario.db import Base
from .category import Category
from .product import Product
from .movement import Movement, MovementType
from .user import User, UserRole

__all__ = ["Base", "Category", "Product", "Movement", "MovementType", "User", "UserRole"]
