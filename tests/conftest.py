"""
Fixtures de pytest para el gestor de inventario.

Cada test recibe una base SQLite temporal propia; la dependencia ``get_db``
de la aplicación se redirige a ella.
"""

import os

os.environ.setdefault("SEED_ON_STARTUP", "false")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from gestor_inventario.core.config import settings
from gestor_inventario.core.logging import reset_logging
from gestor_inventario.core.security import create_access_token, hash_password
from gestor_inventario.db import create_tables, get_db
from gestor_inventario.main import app
from gestor_inventario.models.category import Category
from gestor_inventario.models.product import Product
from gestor_inventario.models.user import User, UserRole


@pytest.fixture(autouse=True, scope="session")
def _propagate_logs():
    """Dejar que los logs lleguen a caplog."""
    reset_logging()
    yield
    reset_logging()


@pytest.fixture
def engine(tmp_path):
    engine = create_engine(
        f"sqlite:///{tmp_path / 'test_inventario.db'}",
        connect_args={"check_same_thread": False},
    )
    create_tables(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(session_factory):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


# =============================================================================
# Datos
# =============================================================================


def _add_user(db, nombre, email, password, rol, activo=True):
    user = User(
        nombre=nombre,
        email=email,
        password=hash_password(password),
        rol=rol.value,
        activo=activo,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


@pytest.fixture
def admin_user(db):
    return _add_user(db, "Administrador", settings.root_admin_email, "admin123", UserRole.ADMIN)


@pytest.fixture
def regular_user(db):
    return _add_user(db, "Ana Pérez", "ana@utm.edu.ec", "secreto1", UserRole.USUARIO)


@pytest.fixture
def make_user(db):
    def _make(nombre="Luis", email="luis@utm.edu.ec", password="secreto1",
              rol=UserRole.USUARIO, activo=True):
        return _add_user(db, nombre, email, password, rol, activo)
    return _make


def _headers_for(user):
    token = create_access_token(user.id, user.email, user.rol)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def headers_for():
    return _headers_for


@pytest.fixture
def admin_headers(admin_user):
    return _headers_for(admin_user)


@pytest.fixture
def user_headers(regular_user):
    return _headers_for(regular_user)


@pytest.fixture
def category(db):
    category = Category(nombre="Electrónicos", descripcion="Productos electrónicos")
    db.add(category)
    db.commit()
    db.refresh(category)
    return category


@pytest.fixture
def make_product(db, category):
    counter = {"n": 0}

    def _make(nombre=None, stock=25, stock_minimo=5, precio=100.0, activo=True,
              codigo_barras=None, categoria=None):
        counter["n"] += 1
        product = Product(
            nombre=nombre or f"Producto {counter['n']}",
            descripcion="Producto de prueba",
            categoria_id=(categoria or category).id,
            precio=precio,
            stock=stock,
            stock_minimo=stock_minimo,
            codigo_barras=codigo_barras,
            proveedor="Proveedor SA",
            activo=activo,
        )
        db.add(product)
        db.commit()
        db.refresh(product)
        return product

    return _make


@pytest.fixture
def product(make_product):
    return make_product(nombre="Laptop Dell Inspiron 15", stock=25, stock_minimo=5)
