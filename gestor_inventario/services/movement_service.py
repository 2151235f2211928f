"""Motor de movimientos de stock.

Cada movimiento (entrada o salida) ajusta el contador de stock de su producto.
Las tres operaciones de escritura siguen el mismo esquema:

1. Se toma el candado del producto (o productos) afectados, de modo que dos
   peticiones sobre el mismo producto nunca leen y escriben a la vez.
2. Se relee el producto dentro del candado y se valida que el stock
   resultante no sea negativo.
3. El stock se escribe con un UPDATE condicional (``stock + delta >= 0``) y
   el movimiento se inserta, modifica o borra en la misma transacción.

Si cualquier paso falla se hace rollback y ni el producto ni el movimiento
cambian.
"""
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Iterator, Optional

from sqlalchemy import update
from sqlalchemy.orm import Session, joinedload

from gestor_inventario.core.exceptions import (
    InsufficientStockError,
    MovementNotFoundError,
    ProductNotFoundError,
    ValidationError,
)
from gestor_inventario.core.locks import KeyedLock, product_locks
from gestor_inventario.core.logging import get_logger
from gestor_inventario.models.movement import Movement, MovementType
from gestor_inventario.models.product import Product
from .base import paginate

logger = get_logger(__name__)

DEFAULT_MOTIVO = "Movimiento de inventario"
DEFAULT_USUARIO = "Admin"

REVERSAL_FAILED = "Stock insuficiente para revertir el movimiento"


def stock_effect(tipo, cantidad: int) -> int:
    """Cambio que un movimiento produce en el stock: +cantidad o -cantidad."""
    return cantidad if MovementType(tipo) == MovementType.ENTRADA else -cantidad


def _check_quantity(cantidad: int) -> None:
    if cantidad < 1:
        raise ValidationError("La cantidad debe ser mayor a 0")


class MovementService:
    def __init__(self, db: Session, locks: KeyedLock = product_locks):
        self.db = db
        self.locks = locks

    def get_movements(self, page: int = 1, limit: int = 10):
        """Listado paginado, más recientes primero"""
        query = (
            self.db.query(Movement)
            .options(joinedload(Movement.producto))
            .order_by(Movement.created_at.desc(), Movement.id.desc())
        )
        return paginate(query, page, limit)

    def get_movement(self, movement_id: int) -> Movement:
        movement = self.db.get(Movement, movement_id)
        if not movement:
            raise MovementNotFoundError()
        return movement

    def apply_new_movement(
        self,
        product_id: int,
        tipo,
        cantidad: int,
        motivo: Optional[str] = None,
        usuario: Optional[str] = None,
        notas: Optional[str] = None,
    ) -> Movement:
        """Registrar un movimiento y aplicar su efecto sobre el stock"""
        tipo = MovementType(tipo)
        _check_quantity(cantidad)

        with self.locks.hold(product_id):
            try:
                product = self._load_product(product_id)
                delta = stock_effect(tipo, cantidad)
                if product.stock + delta < 0:
                    raise InsufficientStockError()

                self._write_stock(product, delta)
                movement = Movement(
                    producto_id=product.id,
                    tipo=tipo.value,
                    cantidad=cantidad,
                    motivo=motivo or DEFAULT_MOTIVO,
                    usuario=usuario or DEFAULT_USUARIO,
                    fecha=datetime.now(timezone.utc),
                    notas=notas,
                )
                self.db.add(movement)
                self.db.commit()
            except Exception:
                self.db.rollback()
                raise

        self.db.refresh(movement)
        logger.info("Movimiento %s registrado: %s de %s uds. del producto %s",
                    movement.id, tipo.value, cantidad, product_id)
        return movement

    def revise_movement(
        self,
        movement_id: int,
        tipo=None,
        cantidad: Optional[int] = None,
        product_id: Optional[int] = None,
        motivo: Optional[str] = None,
        usuario: Optional[str] = None,
        notas: Optional[str] = None,
    ) -> Movement:
        """Editar un movimiento: revertir su efecto original y aplicar el nuevo.

        Si ``product_id`` cambia, el producto original recibe la reversión y el
        nuevo producto el efecto del movimiento editado.
        """
        if cantidad is not None:
            _check_quantity(cantidad)

        with self._hold_movement(movement_id, product_id) as movement:
            try:
                if movement.producto_id is None:
                    raise ProductNotFoundError()
                original = self._load_product(movement.producto_id)

                new_tipo = MovementType(tipo) if tipo is not None else MovementType(movement.tipo)
                new_cantidad = cantidad if cantidad is not None else movement.cantidad
                target_id = product_id if product_id is not None else original.id

                reversal = -stock_effect(movement.tipo, movement.cantidad)
                effect = stock_effect(new_tipo, new_cantidad)

                if target_id == original.id:
                    # Se valida contra la base ya revertida
                    if original.stock + reversal + effect < 0:
                        raise InsufficientStockError()
                    self._write_stock(original, reversal + effect)
                else:
                    target = self._load_product(target_id)
                    if original.stock + reversal < 0:
                        raise InsufficientStockError(REVERSAL_FAILED)
                    if target.stock + effect < 0:
                        raise InsufficientStockError()
                    self._write_stock(original, reversal)
                    self._write_stock(target, effect)

                movement.producto_id = target_id
                movement.tipo = new_tipo.value
                movement.cantidad = new_cantidad
                if motivo is not None:
                    movement.motivo = motivo
                if usuario is not None:
                    movement.usuario = usuario
                if notas is not None:
                    movement.notas = notas
                self.db.commit()
            except Exception:
                self.db.rollback()
                raise

        self.db.refresh(movement)
        logger.info("Movimiento %s actualizado: %s de %s uds. del producto %s",
                    movement_id, movement.tipo, movement.cantidad, movement.producto_id)
        return movement

    def retract_movement(self, movement_id: int) -> None:
        """Eliminar un movimiento permanentemente revirtiendo su efecto.

        Si el producto ya no existe, el movimiento se elimina sin tocar stock.
        """
        with self._hold_movement(movement_id) as movement:
            try:
                product = None
                if movement.producto_id is not None:
                    product = self.db.get(Product, movement.producto_id,
                                          populate_existing=True, with_for_update=True)

                if product is None:
                    logger.warning("Movimiento %s sin producto asociado: se elimina sin revertir stock",
                                   movement_id)
                else:
                    reversal = -stock_effect(movement.tipo, movement.cantidad)
                    if product.stock + reversal < 0:
                        raise InsufficientStockError(REVERSAL_FAILED)
                    self._write_stock(product, reversal)

                self.db.delete(movement)
                self.db.commit()
            except Exception:
                self.db.rollback()
                raise

        logger.info("Movimiento %s eliminado", movement_id)

    @contextmanager
    def _hold_movement(self, movement_id: int, new_product_id: Optional[int] = None) -> Iterator[Movement]:
        """Cede el movimiento con los candados de sus productos ya tomados."""
        while True:
            product_id = self.get_movement(movement_id).producto_id
            with self.locks.hold(product_id, new_product_id):
                movement = self.db.get(Movement, movement_id, populate_existing=True)
                if movement is None:
                    raise MovementNotFoundError()
                if movement.producto_id == product_id:
                    yield movement
                    return
            # Otro proceso cambió el producto del movimiento; reintentar con el nuevo candado

    def _load_product(self, product_id: int) -> Product:
        # Releer siempre: la copia en la sesión puede ser anterior al candado
        product = self.db.get(Product, product_id, populate_existing=True, with_for_update=True)
        if not product:
            raise ProductNotFoundError()
        return product

    def _write_stock(self, product: Product, delta: int) -> None:
        if delta == 0:
            return

        old_stock = product.stock
        result = self.db.execute(
            update(Product)
            .where(Product.id == product.id, Product.stock + delta >= 0)
            .values(stock=Product.stock + delta)
            .execution_options(synchronize_session=False)
        )
        if result.rowcount != 1:
            raise InsufficientStockError()

        self.db.expire(product, ["stock"])
        logger.info("Stock del producto %s actualizado: %s -> %s", product.id, old_stock, old_stock + delta)
