from typing import Optional, Tuple
from sqlalchemy.orm import Session
from gestor_inventario.core.exceptions import UnauthorizedError, ValidationError
from gestor_inventario.core.logging import get_logger
from gestor_inventario.core.security import create_access_token, decode_access_token, verify_password
from gestor_inventario.models.user import User, UserRole
from gestor_inventario.schemas.auth import RegisterRequest
from gestor_inventario.schemas.user import UserCreate
from .user_service import UserService, check_password

logger = get_logger(__name__)

class AuthService:
    def __init__(self, db: Session):
        self.db = db
        self.users = UserService(db)

    def login(self, email: Optional[str], password: Optional[str]) -> Tuple[User, str]:
        """Verifica credenciales y emite un token firmado"""
        if not email or not password:
            raise ValidationError("Email y contraseña son requeridos")

        user = self.users.get_user_by_email(email)
        if not user or not verify_password(password, user.password):
            logger.warning("Intento de login fallido para %s", email)
            raise UnauthorizedError("Credenciales inválidas")

        if not user.activo:
            raise UnauthorizedError("Usuario desactivado")

        token = create_access_token(user.id, user.email, user.rol)
        logger.info("Login correcto: %s", user.email)
        return user, token

    def register(self, register_data: RegisterRequest) -> User:
        """Alta pública: siempre con rol usuario"""
        check_password(register_data.password)
        return self.users.create_user(
            UserCreate(
                nombre=register_data.nombre,
                email=register_data.email,
                password=register_data.password,
                rol=UserRole.USUARIO,
            )
        )

    def get_user_from_token(self, token: str) -> User:
        """Resuelve el usuario del token; debe existir y seguir activo"""
        payload = decode_access_token(token)

        user = self.db.get(User, payload.get("userId"))
        if not user or not user.activo:
            raise UnauthorizedError("Usuario no válido o desactivado")
        return user
