from typing import List
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from gestor_inventario.api.deps import PageParams, get_current_user
from gestor_inventario.db import get_db
from gestor_inventario.models.user import User
from gestor_inventario.schemas.common import ApiResponse, Pagination
from gestor_inventario.schemas.movement import MovementCreate, MovementResponse, MovementUpdate
from gestor_inventario.services.movement_service import MovementService

router = APIRouter()

@router.get("", response_model=ApiResponse[List[MovementResponse]], dependencies=[Depends(get_current_user)])
def get_movements(params: PageParams = Depends(), db: Session = Depends(get_db)):
    """Listar movimientos, más recientes primero"""
    movements, total = MovementService(db).get_movements(params.page, params.limit)
    return ApiResponse(
        data=[MovementResponse.model_validate(m) for m in movements],
        pagination=Pagination.build(params.page, params.limit, total),
    )

@router.get("/{movement_id}", response_model=ApiResponse[MovementResponse], dependencies=[Depends(get_current_user)])
def get_movement(movement_id: int, db: Session = Depends(get_db)):
    """Obtener movimiento por ID"""
    movement = MovementService(db).get_movement(movement_id)
    return ApiResponse(data=MovementResponse.model_validate(movement))

@router.post("", response_model=ApiResponse[MovementResponse], status_code=201)
def create_movement(
    movement_data: MovementCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Registrar movimiento y actualizar el stock del producto"""
    movement = MovementService(db).apply_new_movement(
        product_id=movement_data.producto_id,
        tipo=movement_data.tipo,
        cantidad=movement_data.cantidad,
        motivo=movement_data.motivo,
        usuario=movement_data.usuario or current_user.nombre,
        notas=movement_data.notas,
    )
    return ApiResponse(data=MovementResponse.model_validate(movement), message="Movimiento creado exitosamente")

@router.put("/{movement_id}", response_model=ApiResponse[MovementResponse], dependencies=[Depends(get_current_user)])
def update_movement(movement_id: int, movement_data: MovementUpdate, db: Session = Depends(get_db)):
    """Actualizar movimiento revirtiendo y reaplicando su efecto en el stock"""
    movement = MovementService(db).revise_movement(
        movement_id,
        tipo=movement_data.tipo,
        cantidad=movement_data.cantidad,
        product_id=movement_data.producto_id,
        motivo=movement_data.motivo,
        usuario=movement_data.usuario,
        notas=movement_data.notas,
    )
    return ApiResponse(data=MovementResponse.model_validate(movement), message="Movimiento actualizado exitosamente")

@router.delete("/{movement_id}", response_model=ApiResponse[None], dependencies=[Depends(get_current_user)])
def delete_movement(movement_id: int, db: Session = Depends(get_db)):
    """Eliminar movimiento permanentemente revirtiendo su efecto en el stock"""
    MovementService(db).retract_movement(movement_id)
    return ApiResponse(message="Movimiento eliminado permanentemente")
