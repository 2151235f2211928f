from .common import CamelModel

class InventorySummary(CamelModel):
    productos_activos: int
    valor_total_inventario: float
    unidades_totales: int
    categorias_unicas: int
    productos_stock_bajo: int

class CategoryValue(CamelModel):
    categoria: str
    numero_de_productos: int
    valor_total: float
