from typing import Optional
from sqlalchemy import String, func, or_
from sqlalchemy.orm import Session, joinedload
from gestor_inventario.core.exceptions import ProductNotFoundError, ValidationError
from gestor_inventario.core.locks import product_locks
from gestor_inventario.core.logging import get_logger
from gestor_inventario.db import UNICODE_LOWER
from gestor_inventario.models.category import Category
from gestor_inventario.models.product import Product
from gestor_inventario.schemas.product import ProductCreate, ProductUpdate
from .base import commit_or_raise, paginate

logger = get_logger(__name__)

DUPLICATE_BARCODE = "Ya existe un producto con ese código de barras"

class ProductService:
    def __init__(self, db: Session):
        self.db = db

    def get_products(self, page: int = 1, limit: int = 10, search: Optional[str] = None):
        """Listado paginado, más recientes primero, con búsqueda por nombre o descripción"""
        query = self.db.query(Product).options(joinedload(Product.categoria))

        if search:
            term = search.lower()
            query = query.filter(
                or_(
                    self._lower(Product.nombre).contains(term, autoescape=True),
                    self._lower(Product.descripcion).contains(term, autoescape=True),
                )
            )

        query = query.order_by(Product.created_at.desc(), Product.id.desc())
        return paginate(query, page, limit)

    def get_product(self, product_id: int) -> Product:
        product = self.db.get(Product, product_id)
        if not product:
            raise ProductNotFoundError()
        return product

    def create_product(self, product_data: ProductCreate) -> Product:
        self._check_category(product_data.categoria_id)

        product = Product(**product_data.model_dump())
        self.db.add(product)
        commit_or_raise(self.db, DUPLICATE_BARCODE)
        self.db.refresh(product)
        logger.info("Producto creado: %s (id=%s, stock=%s)", product.nombre, product.id, product.stock)
        return product

    def update_product(self, product_id: int, product_data: ProductUpdate) -> Product:
        product = self.get_product(product_id)

        update_data = product_data.model_dump(exclude_unset=True)
        if update_data.get("categoria_id") is not None:
            self._check_category(update_data["categoria_id"])

        for field, value in update_data.items():
            # codigo_barras puede vaciarse explícitamente
            if value is not None or field == "codigo_barras":
                setattr(product, field, value)

        commit_or_raise(self.db, DUPLICATE_BARCODE)
        self.db.refresh(product)
        return product

    def delete_product(self, product_id: int) -> None:
        """Eliminar permanentemente; sus movimientos quedan sin producto asociado"""
        with product_locks.hold(product_id):
            product = self.get_product(product_id)
            nombre = product.nombre
            self.db.delete(product)
            self.db.commit()
        logger.info("Producto eliminado: %s (id=%s)", nombre, product_id)

    def _check_category(self, category_id: int) -> None:
        if not self.db.get(Category, category_id):
            raise ValidationError("La categoría especificada no existe")

    def _lower(self, column):
        """Minúsculas Unicode en la base; en SQLite con la función registrada en db.py"""
        if self.db.get_bind().dialect.name == "sqlite":
            return getattr(func, UNICODE_LOWER)(column, type_=String)
        return func.lower(column, type_=String)
