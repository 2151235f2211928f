"""Gestor de inventario: productos, categorías, movimientos de stock y usuarios."""

__version__ = "1.0.0"
