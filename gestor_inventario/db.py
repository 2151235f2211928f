from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, declarative_base, Session
from gestor_inventario.core.config import settings

engine = create_engine(
    settings.database_url,
    connect_args={"check_same_thread": False} if "sqlite" in settings.database_url else {}
)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


# lower() de SQLite solo convierte ASCII; esta versión también convierte Á, É, Ñ, ...
UNICODE_LOWER = "unicode_lower"


def _unicode_lower(value):
    return value.lower() if isinstance(value, str) else value


@event.listens_for(Engine, "connect")
def _configure_sqlite(dbapi_connection, connection_record):
    if type(dbapi_connection).__module__.startswith("sqlite3"):
        # SQLite no aplica las claves foráneas si no se pide explícitamente
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()
        dbapi_connection.create_function(UNICODE_LOWER, 1, _unicode_lower, deterministic=True)


def create_tables(bind=None):
    # Registrar todos los modelos antes de crear las tablas
    import gestor_inventario.models  # noqa: F401
    Base.metadata.create_all(bind=bind or engine)


# Dependencia para obtener sesión de base de datos
def get_db() -> Session:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
