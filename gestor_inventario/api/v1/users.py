from typing import List
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from gestor_inventario.api.deps import PageParams, require_admin
from gestor_inventario.db import get_db
from gestor_inventario.schemas.common import ApiResponse, Pagination
from gestor_inventario.schemas.user import UserCreate, UserResponse, UserUpdate
from gestor_inventario.services.user_service import UserService

router = APIRouter(dependencies=[Depends(require_admin)])

@router.get("", response_model=ApiResponse[List[UserResponse]])
def get_users(params: PageParams = Depends(), db: Session = Depends(get_db)):
    """Listar usuarios (sin contraseña)"""
    users, total = UserService(db).get_users(params.page, params.limit)
    return ApiResponse(
        data=[UserResponse.model_validate(u) for u in users],
        pagination=Pagination.build(params.page, params.limit, total),
    )

@router.get("/{user_id}", response_model=ApiResponse[UserResponse])
def get_user(user_id: int, db: Session = Depends(get_db)):
    user = UserService(db).get_user(user_id)
    return ApiResponse(data=UserResponse.model_validate(user))

@router.post("", response_model=ApiResponse[UserResponse], status_code=201)
def create_user(user_data: UserCreate, db: Session = Depends(get_db)):
    user = UserService(db).create_user(user_data)
    return ApiResponse(data=UserResponse.model_validate(user), message="Usuario creado exitosamente")

@router.put("/{user_id}", response_model=ApiResponse[UserResponse])
def update_user(user_id: int, user_data: UserUpdate, db: Session = Depends(get_db)):
    user = UserService(db).update_user(user_id, user_data)
    return ApiResponse(data=UserResponse.model_validate(user), message="Usuario actualizado exitosamente")

@router.delete("/{user_id}", response_model=ApiResponse[None])
def delete_user(user_id: int, db: Session = Depends(get_db)):
    """Eliminar usuario permanentemente (excepto el administrador principal)"""
    UserService(db).delete_user(user_id)
    return ApiResponse(message="Usuario eliminado permanentemente")
