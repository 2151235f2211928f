from sqlalchemy import Column, Integer, String, Float, Boolean, DateTime, ForeignKey, CheckConstraint
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from gestor_inventario.db import Base

class Product(Base):
    __tablename__ = "products"
    __table_args__ = (
        CheckConstraint("stock >= 0", name="ck_products_stock_non_negative"),
        CheckConstraint("stock_minimo >= 0", name="ck_products_stock_minimo_non_negative"),
        CheckConstraint("precio >= 0", name="ck_products_precio_non_negative"),
    )

    id = Column(Integer, primary_key=True, index=True)
    nombre = Column(String(100), nullable=False, index=True)
    descripcion = Column(String(500), nullable=False)
    categoria_id = Column(Integer, ForeignKey("categories.id"), nullable=False, index=True)
    precio = Column(Float, nullable=False)
    # Solo el motor de movimientos modifica este contador
    stock = Column(Integer, nullable=False, default=0)
    stock_minimo = Column(Integer, nullable=False, default=0)
    codigo_barras = Column(String(100), unique=True, nullable=True)
    proveedor = Column(String(100))
    activo = Column(Boolean, default=True, nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    categoria = relationship("Category", back_populates="productos")
    movimientos = relationship("Movement", back_populates="producto")

    @property
    def is_low_stock(self) -> bool:
        return self.stock < self.stock_minimo

    def __repr__(self):
        return f"<Product(nombre='{self.nombre}', stock={self.stock})>"
