from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from gestor_inventario.api.deps import get_token
from gestor_inventario.db import get_db
from gestor_inventario.schemas.auth import AuthData, LoginRequest, RegisterRequest
from gestor_inventario.schemas.common import ApiResponse
from gestor_inventario.schemas.user import UserResponse
from gestor_inventario.services.auth_service import AuthService

router = APIRouter()

@router.post("/login", response_model=ApiResponse[AuthData])
def login(login_data: LoginRequest, db: Session = Depends(get_db)):
    """Iniciar sesión"""
    user, token = AuthService(db).login(login_data.email, login_data.password)
    return ApiResponse(
        data=AuthData(user=UserResponse.model_validate(user), token=token),
        message="Login exitoso",
    )

@router.post("/register", response_model=ApiResponse[UserResponse], status_code=201)
def register(register_data: RegisterRequest, db: Session = Depends(get_db)):
    """Registrar nuevo usuario"""
    user = AuthService(db).register(register_data)
    return ApiResponse(data=UserResponse.model_validate(user), message="Usuario registrado exitosamente")

@router.get("/validate", response_model=ApiResponse[AuthData])
def validate_token(token: str = Depends(get_token), db: Session = Depends(get_db)):
    """Validar token JWT"""
    user = AuthService(db).get_user_from_token(token)
    return ApiResponse(
        data=AuthData(user=UserResponse.model_validate(user), token=token),
        message="Token válido",
    )
