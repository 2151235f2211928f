from sqlalchemy.orm import Session
from gestor_inventario.core.exceptions import NotFoundError, ValidationError
from gestor_inventario.core.logging import get_logger
from gestor_inventario.models.category import Category
from gestor_inventario.models.product import Product
from gestor_inventario.schemas.category import CategoryCreate, CategoryUpdate
from .base import commit_or_raise

logger = get_logger(__name__)

DUPLICATE_NAME = "Ya existe una categoría con ese nombre"
IN_USE = "No se puede eliminar la categoría: tiene productos asociados"

class CategoryService:
    def __init__(self, db: Session):
        self.db = db

    def get_all_categories(self):
        """Obtener todas las categorías ordenadas por nombre"""
        return self.db.query(Category).order_by(Category.nombre).all()

    def get_category(self, category_id: int) -> Category:
        category = self.db.get(Category, category_id)
        if not category:
            raise NotFoundError("Categoría no encontrada")
        return category

    def create_category(self, category_data: CategoryCreate) -> Category:
        category = Category(**category_data.model_dump())
        self.db.add(category)
        commit_or_raise(self.db, DUPLICATE_NAME)
        self.db.refresh(category)
        logger.info("Categoría creada: %s (id=%s)", category.nombre, category.id)
        return category

    def update_category(self, category_id: int, category_data: CategoryUpdate) -> Category:
        category = self.get_category(category_id)

        update_data = category_data.model_dump(exclude_unset=True)
        for field, value in update_data.items():
            if value is not None:
                setattr(category, field, value)

        commit_or_raise(self.db, DUPLICATE_NAME)
        self.db.refresh(category)
        return category

    def delete_category(self, category_id: int) -> None:
        """Eliminar permanentemente; no se permite si hay productos que la usan"""
        category = self.get_category(category_id)

        in_use = self._count_products(category_id)
        if in_use:
            raise ValidationError(
                f"No se puede eliminar la categoría: tiene {in_use} producto(s) asociado(s)"
            )

        nombre = category.nombre
        self.db.delete(category)
        # Un producto creado tras la comprobación provoca un error de integridad
        commit_or_raise(self.db, DUPLICATE_NAME, IN_USE)
        logger.info("Categoría eliminada: %s (id=%s)", nombre, category_id)

    def _count_products(self, category_id: int) -> int:
        return self.db.query(Product).filter(Product.categoria_id == category_id).count()
