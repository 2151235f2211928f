from enum import Enum
from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, CheckConstraint
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from gestor_inventario.db import Base

class MovementType(str, Enum):
    ENTRADA = "entrada"
    SALIDA = "salida"

class Movement(Base):
    __tablename__ = "movements"
    __table_args__ = (
        CheckConstraint("cantidad >= 1", name="ck_movements_cantidad_positive"),
    )

    id = Column(Integer, primary_key=True, index=True)
    # Queda en NULL si el producto se elimina después
    producto_id = Column(Integer, ForeignKey("products.id", ondelete="SET NULL"), nullable=True, index=True)
    tipo = Column(String(10), nullable=False)
    cantidad = Column(Integer, nullable=False)
    motivo = Column(String(100), nullable=False)
    usuario = Column(String(50), nullable=False)
    fecha = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    notas = Column(String(500))
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    producto = relationship("Product", back_populates="movimientos")

    def __repr__(self):
        return f"<Movement(tipo='{self.tipo}', cantidad={self.cantidad}, producto_id={self.producto_id})>"
