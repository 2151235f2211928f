from typing import List
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from gestor_inventario.api.deps import get_current_user
from gestor_inventario.db import get_db
from gestor_inventario.schemas.common import ApiResponse
from gestor_inventario.schemas.product import ProductResponse
from gestor_inventario.schemas.report import CategoryValue, InventorySummary
from gestor_inventario.services.report_service import ReportService

router = APIRouter(dependencies=[Depends(get_current_user)])

@router.get("/low-stock", response_model=ApiResponse[List[ProductResponse]])
def low_stock(db: Session = Depends(get_db)):
    """Productos activos con stock por debajo del mínimo"""
    products = ReportService(db).low_stock_products()
    return ApiResponse(data=[ProductResponse.model_validate(p) for p in products])

@router.get("/summary", response_model=ApiResponse[InventorySummary])
def summary(db: Session = Depends(get_db)):
    return ApiResponse(data=ReportService(db).inventory_summary())

@router.get("/value-by-category", response_model=ApiResponse[List[CategoryValue]])
def value_by_category(db: Session = Depends(get_db)):
    return ApiResponse(data=ReportService(db).value_by_category())
