from typing import List
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from gestor_inventario.api.deps import get_current_user, require_admin
from gestor_inventario.db import get_db
from gestor_inventario.schemas.category import CategoryCreate, CategoryResponse, CategoryUpdate
from gestor_inventario.schemas.common import ApiResponse
from gestor_inventario.services.category_service import CategoryService

router = APIRouter()

@router.get("", response_model=ApiResponse[List[CategoryResponse]], dependencies=[Depends(get_current_user)])
def get_categories(db: Session = Depends(get_db)):
    """Obtener todas las categorías"""
    categories = CategoryService(db).get_all_categories()
    return ApiResponse(data=[CategoryResponse.model_validate(c) for c in categories])

@router.get("/{category_id}", response_model=ApiResponse[CategoryResponse], dependencies=[Depends(get_current_user)])
def get_category(category_id: int, db: Session = Depends(get_db)):
    """Obtener categoría por ID"""
    category = CategoryService(db).get_category(category_id)
    return ApiResponse(data=CategoryResponse.model_validate(category))

@router.post("", response_model=ApiResponse[CategoryResponse], status_code=201, dependencies=[Depends(require_admin)])
def create_category(category_data: CategoryCreate, db: Session = Depends(get_db)):
    """Crear nueva categoría"""
    category = CategoryService(db).create_category(category_data)
    return ApiResponse(data=CategoryResponse.model_validate(category), message="Categoría creada exitosamente")

@router.put("/{category_id}", response_model=ApiResponse[CategoryResponse], dependencies=[Depends(require_admin)])
def update_category(category_id: int, category_data: CategoryUpdate, db: Session = Depends(get_db)):
    """Actualizar categoría"""
    category = CategoryService(db).update_category(category_id, category_data)
    return ApiResponse(data=CategoryResponse.model_validate(category), message="Categoría actualizada exitosamente")

@router.delete("/{category_id}", response_model=ApiResponse[None], dependencies=[Depends(require_admin)])
def delete_category(category_id: int, db: Session = Depends(get_db)):
    """Eliminar categoría permanentemente"""
    CategoryService(db).delete_category(category_id)
    return ApiResponse(message="Categoría eliminada permanentemente")
