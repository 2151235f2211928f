from typing import List
from sqlalchemy.orm import Session, joinedload
from gestor_inventario.models.product import Product
from gestor_inventario.schemas.report import CategoryValue, InventorySummary

class ReportService:
    """Reportes calculados sobre los productos activos"""

    def __init__(self, db: Session):
        self.db = db

    def _active_products(self) -> List[Product]:
        return (
            self.db.query(Product)
            .options(joinedload(Product.categoria))
            .filter(Product.activo.is_(True))
            .order_by(Product.nombre)
            .all()
        )

    def low_stock_products(self) -> List[Product]:
        return [p for p in self._active_products() if p.is_low_stock]

    def inventory_summary(self) -> InventorySummary:
        products = self._active_products()
        return InventorySummary(
            productos_activos=len(products),
            valor_total_inventario=round(sum(p.precio * p.stock for p in products), 2),
            unidades_totales=sum(p.stock for p in products),
            categorias_unicas=len({p.categoria_id for p in products}),
            productos_stock_bajo=sum(1 for p in products if p.is_low_stock),
        )

    def value_by_category(self) -> List[CategoryValue]:
        totals = {}
        for product in self._active_products():
            entry = totals.setdefault(product.categoria.nombre, {"count": 0, "value": 0.0})
            entry["count"] += 1
            entry["value"] += product.precio * product.stock

        rows = [
            CategoryValue(categoria=name, numero_de_productos=t["count"], valor_total=round(t["value"], 2))
            for name, t in totals.items()
        ]
        return sorted(rows, key=lambda row: row.valor_total, reverse=True)
