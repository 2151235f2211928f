from typing import Optional
from fastapi import Depends, Query
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.orm import Session
from gestor_inventario.core.config import settings
from gestor_inventario.core.exceptions import ForbiddenError, UnauthorizedError
from gestor_inventario.db import get_db
from gestor_inventario.models.user import User
from gestor_inventario.services.auth_service import AuthService

# auto_error=False: la falta de token se responde con el sobre estándar
security = HTTPBearer(auto_error=False)


def get_token(credentials: Optional[HTTPAuthorizationCredentials] = Depends(security)) -> str:
    if credentials is None or not credentials.credentials:
        raise UnauthorizedError("Token no proporcionado")
    return credentials.credentials


def get_current_user(token: str = Depends(get_token), db: Session = Depends(get_db)) -> User:
    """El rol se toma de la base de datos en cada petición, no del token"""
    return AuthService(db).get_user_from_token(token)


def require_admin(current_user: User = Depends(get_current_user)) -> User:
    if not current_user.is_admin:
        raise ForbiddenError("Se requieren privilegios de administrador")
    return current_user


class PageParams:
    def __init__(
        self,
        page: int = Query(1, ge=1),
        limit: int = Query(settings.default_page_size, ge=1, le=settings.max_page_size),
    ):
        self.page = page
        self.limit = limit
