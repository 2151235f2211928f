from typing import Optional
from sqlalchemy.orm import Session
from gestor_inventario.core.config import settings
from gestor_inventario.core.exceptions import ForbiddenError, NotFoundError, ValidationError
from gestor_inventario.core.logging import get_logger
from gestor_inventario.core.security import MIN_PASSWORD_LENGTH, hash_password
from gestor_inventario.models.user import User, UserRole
from gestor_inventario.schemas.user import UserCreate, UserUpdate
from .base import commit_or_raise, paginate

logger = get_logger(__name__)

DUPLICATE_EMAIL = "Ya existe un usuario con ese email"


def check_password(password: Optional[str]) -> None:
    if not password or len(password) < MIN_PASSWORD_LENGTH:
        raise ValidationError(
            f"La contraseña debe tener al menos {MIN_PASSWORD_LENGTH} caracteres"
        )


def _check_root_admin_update(user: User, update_data: dict) -> None:
    """El administrador principal no puede cambiar de email, desactivarse ni perder el rol"""
    email = update_data.get("email")
    if email is not None and email != user.email:
        raise ForbiddenError("No se puede cambiar el email del administrador principal del sistema")
    if update_data.get("activo") is False:
        raise ForbiddenError("No se puede desactivar el administrador principal del sistema")
    rol = update_data.get("rol")
    if rol is not None and UserRole(rol) != UserRole.ADMIN:
        raise ForbiddenError("No se puede quitar el rol de administrador al administrador principal del sistema")


class UserService:
    def __init__(self, db: Session):
        self.db = db

    def get_users(self, page: int = 1, limit: int = 10):
        """Listado paginado ordenado por nombre"""
        query = self.db.query(User).order_by(User.nombre, User.id)
        return paginate(query, page, limit)

    def get_user(self, user_id: int) -> User:
        user = self.db.get(User, user_id)
        if not user:
            raise NotFoundError("Usuario no encontrado")
        return user

    def get_user_by_email(self, email: str) -> Optional[User]:
        return self.db.query(User).filter(User.email == email.strip().lower()).first()

    def create_user(self, user_data: UserCreate) -> User:
        check_password(user_data.password)

        data = user_data.model_dump()
        data["password"] = hash_password(data["password"])
        data["rol"] = UserRole(data["rol"]).value

        user = User(**data)
        self.db.add(user)
        commit_or_raise(self.db, DUPLICATE_EMAIL)
        self.db.refresh(user)
        logger.info("Usuario creado: %s (rol=%s)", user.email, user.rol)
        return user

    def update_user(self, user_id: int, user_data: UserUpdate) -> User:
        user = self.get_user(user_id)

        update_data = user_data.model_dump(exclude_unset=True)
        if self.is_root_admin(user):
            _check_root_admin_update(user, update_data)
        if update_data.get("password"):
            check_password(update_data["password"])
            update_data["password"] = hash_password(update_data["password"])
        else:
            update_data.pop("password", None)
        if update_data.get("rol") is not None:
            update_data["rol"] = UserRole(update_data["rol"]).value

        for field, value in update_data.items():
            if value is not None:
                setattr(user, field, value)

        commit_or_raise(self.db, DUPLICATE_EMAIL)
        self.db.refresh(user)
        return user

    def delete_user(self, user_id: int) -> None:
        """Eliminar permanentemente; el administrador principal está protegido"""
        user = self.get_user(user_id)

        if self.is_root_admin(user):
            raise ForbiddenError(
                "No se puede eliminar el usuario administrador principal del sistema"
            )

        email = user.email
        self.db.delete(user)
        self.db.commit()
        logger.info("Usuario eliminado: %s", email)

    @staticmethod
    def is_root_admin(user: User) -> bool:
        return user.email == settings.root_admin_email.lower()
