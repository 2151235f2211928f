import traceback
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.encoders import jsonable_encoder
from starlette.exceptions import HTTPException as StarletteHTTPException
from gestor_inventario import __version__
from gestor_inventario.api.v1.api import api_router
from gestor_inventario.core.config import settings
from gestor_inventario.core.exceptions import InventoryError
from gestor_inventario.core.logging import configure_logging, get_logger
from gestor_inventario.db import SessionLocal, create_tables
from gestor_inventario.services.seed_service import seed_initial_data

configure_logging(settings.log_level)
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    create_tables()
    if settings.seed_on_startup:
        db = SessionLocal()
        try:
            seed_initial_data(db)
        finally:
            db.close()
    logger.info("%s iniciado (entorno=%s)", settings.project_name, settings.environment)
    yield


app = FastAPI(
    title=settings.project_name,
    description="API de gestión de inventario: productos, categorías, movimientos y usuarios",
    version=__version__,
    lifespan=lifespan,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router, prefix=settings.api_prefix)


def error_response(status_code: int, message: str, error=None) -> JSONResponse:
    content = {"success": False, "message": message}
    if error is not None:
        content["error"] = error
    return JSONResponse(status_code=status_code, content=jsonable_encoder(content))


@app.exception_handler(InventoryError)
async def inventory_error_handler(request: Request, exc: InventoryError):
    if exc.status_code >= 500:
        logger.error("Error en %s %s: %s", request.method, request.url.path, exc.message)
    return error_response(exc.status_code, exc.message, exc.details)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    errors = [
        {"campo": ".".join(str(part) for part in err["loc"][1:]), "mensaje": err["msg"]}
        for err in exc.errors()
    ]
    return error_response(400, "Datos de entrada inválidos", errors)


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == 404 and exc.detail == "Not Found":
        return error_response(404, f"Ruta no encontrada: {request.url.path}")
    return error_response(exc.status_code, str(exc.detail))


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.error("Error no controlado en %s %s", request.method, request.url.path, exc_info=exc)
    # La traza solo se expone fuera de producción
    error = None if settings.is_production else "".join(
        traceback.format_exception(type(exc), exc, exc.__traceback__)
    )
    return error_response(500, "Error interno del servidor", error)


@app.get("/")
def read_root():
    return {"message": "Gestor de Inventario API", "version": __version__}


@app.get("/health")
def health():
    return {"status": "healthy"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=settings.app_port)
