from typing import List, Optional, Tuple
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, Query
from gestor_inventario.core.exceptions import DuplicateKeyError, ValidationError


def paginate(query: Query, page: int, limit: int) -> Tuple[List, int]:
    """Devuelve la página solicitada y el total de registros de la consulta."""
    total = query.order_by(None).count()
    items = query.offset((page - 1) * limit).limit(limit).all()
    return items, total


def commit_or_raise(db: Session, duplicate_message: str, invalid_message: Optional[str] = None) -> None:
    """Confirma la transacción traduciendo violaciones de restricciones.

    Las violaciones de unicidad se reportan con ``duplicate_message``; el resto
    de errores de integridad como datos inválidos (``invalid_message``).
    """
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        if _is_unique_violation(e):
            raise DuplicateKeyError(duplicate_message)
        raise ValidationError(invalid_message)


def _is_unique_violation(error: IntegrityError) -> bool:
    text = str(error.orig).lower()
    return "unique" in text or "duplicate" in text
