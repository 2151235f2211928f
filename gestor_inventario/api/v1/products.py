from typing import List, Optional
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from gestor_inventario.api.deps import PageParams, get_current_user
from gestor_inventario.db import get_db
from gestor_inventario.schemas.common import ApiResponse, Pagination
from gestor_inventario.schemas.product import ProductCreate, ProductResponse, ProductUpdate
from gestor_inventario.services.product_service import ProductService

router = APIRouter(dependencies=[Depends(get_current_user)])

@router.get("", response_model=ApiResponse[List[ProductResponse]])
def get_products(
    params: PageParams = Depends(),
    search: Optional[str] = Query(None),
    db: Session = Depends(get_db),
):
    """Listar productos con paginación y búsqueda"""
    products, total = ProductService(db).get_products(params.page, params.limit, search)
    return ApiResponse(
        data=[ProductResponse.model_validate(p) for p in products],
        pagination=Pagination.build(params.page, params.limit, total),
    )

@router.get("/{product_id}", response_model=ApiResponse[ProductResponse])
def get_product(product_id: int, db: Session = Depends(get_db)):
    """Obtener producto por ID"""
    product = ProductService(db).get_product(product_id)
    return ApiResponse(data=ProductResponse.model_validate(product))

@router.post("", response_model=ApiResponse[ProductResponse], status_code=201)
def create_product(product_data: ProductCreate, db: Session = Depends(get_db)):
    """Crear nuevo producto"""
    product = ProductService(db).create_product(product_data)
    return ApiResponse(data=ProductResponse.model_validate(product), message="Producto creado exitosamente")

@router.put("/{product_id}", response_model=ApiResponse[ProductResponse])
def update_product(product_id: int, product_data: ProductUpdate, db: Session = Depends(get_db)):
    """Actualizar producto (el stock solo cambia con movimientos)"""
    product = ProductService(db).update_product(product_id, product_data)
    return ApiResponse(data=ProductResponse.model_validate(product), message="Producto actualizado exitosamente")

@router.delete("/{product_id}", response_model=ApiResponse[None])
def delete_product(product_id: int, db: Session = Depends(get_db)):
    """Eliminar producto permanentemente"""
    ProductService(db).delete_product(product_id)
    return ApiResponse(message="Producto eliminado permanentemente")
