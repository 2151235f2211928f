"""Errores de dominio del gestor de inventario.

Cada error lleva el código HTTP y el mensaje (en español) que el manejador
de excepciones de la aplicación devuelve dentro del sobre JSON estándar.
"""
from typing import Any, Optional


class InventoryError(Exception):
    status_code = 500
    default_message = "Error interno del servidor"

    def __init__(self, message: Optional[str] = None, details: Any = None):
        self.message = message or self.default_message
        self.details = details
        super().__init__(self.message)


class ValidationError(InventoryError):
    status_code = 400
    default_message = "Datos de entrada inválidos"


class DuplicateKeyError(InventoryError):
    status_code = 400
    default_message = "Recurso ya existe"


class InsufficientStockError(InventoryError):
    status_code = 400
    default_message = "Stock insuficiente para realizar la salida"


class UnauthorizedError(InventoryError):
    status_code = 401
    default_message = "No autorizado"


class ForbiddenError(InventoryError):
    status_code = 403
    default_message = "Acceso denegado"


class NotFoundError(InventoryError):
    status_code = 404
    default_message = "Recurso no encontrado"


class ProductNotFoundError(NotFoundError):
    default_message = "Producto no encontrado"


class MovementNotFoundError(NotFoundError):
    default_message = "Movimiento no encontrado"
