from enum import Enum
from sqlalchemy import Column, Integer, String, Boolean, DateTime
from sqlalchemy.sql import func
from gestor_inventario.db import Base

class UserRole(str, Enum):
    ADMIN = "admin"
    USUARIO = "usuario"

class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    nombre = Column(String(50), nullable=False)
    email = Column(String(255), unique=True, index=True, nullable=False)
    password = Column(String(255), nullable=False)  # hash, nunca se devuelve
    rol = Column(String(20), default=UserRole.USUARIO.value, nullable=False)
    activo = Column(Boolean, default=True, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    @property
    def is_admin(self) -> bool:
        return self.rol == UserRole.ADMIN.value

    def __repr__(self):
        return f"<User(email='{self.email}', rol='{self.rol}')>"
