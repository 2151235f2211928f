from sqlalchemy.orm import Session
from gestor_inventario.core.config import settings
from gestor_inventario.core.logging import get_logger
from gestor_inventario.core.security import hash_password
from gestor_inventario.models.category import Category
from gestor_inventario.models.product import Product
from gestor_inventario.models.user import User, UserRole

logger = get_logger(__name__)

SEED_CATEGORIES = [
    {"nombre": "Electrónicos", "descripcion": "Productos electrónicos y tecnológicos"},
    {"nombre": "Oficina", "descripcion": "Productos de oficina y papelería"},
    {"nombre": "Herramientas", "descripcion": "Herramientas y equipos de trabajo"},
]

SEED_PRODUCTS = [
    {
        "nombre": "Laptop Dell Inspiron 15",
        "descripcion": "Laptop para uso profesional con procesador Intel i7",
        "codigo_barras": "DELL-LAP-001",
        "categoria": "Electrónicos",
        "precio": 15000,
        "stock": 25,
        "stock_minimo": 5,
        "proveedor": "Dell México",
    },
    {
        "nombre": "Mouse Logitech MX Master",
        "descripcion": "Mouse inalámbrico profesional ergonómico",
        "codigo_barras": "LOG-MOU-002",
        "categoria": "Electrónicos",
        "precio": 800,
        "stock": 50,
        "stock_minimo": 10,
        "proveedor": "Logitech",
    },
    {
        "nombre": "Papel Bond A4 500 hojas",
        "descripcion": "Resma de papel bond blanco tamaño carta",
        "codigo_barras": "PAP-BON-003",
        "categoria": "Oficina",
        "precio": 120,
        "stock": 2,
        "stock_minimo": 10,
        "proveedor": "Papelería Corp",
    },
    {
        "nombre": "Teclado Mecánico RGB",
        "descripcion": "Teclado mecánico gaming con retroiluminación RGB",
        "codigo_barras": "TEC-RGB-004",
        "categoria": "Electrónicos",
        "precio": 1200,
        "stock": 15,
        "stock_minimo": 5,
        "proveedor": "Gaming Gear",
    },
]


def seed_initial_data(db: Session) -> dict:
    """Crear datos iniciales en una base vacía; no toca datos existentes"""
    created = {"categories": 0, "products": 0, "users": 0}

    if not db.query(User).filter(User.email == settings.root_admin_email.lower()).first():
        db.add(User(
            nombre="Administrador",
            email=settings.root_admin_email.lower(),
            password=hash_password(settings.root_admin_password),
            rol=UserRole.ADMIN.value,
        ))
        created["users"] += 1

    if db.query(Category).count() == 0:
        categories = {}
        for data in SEED_CATEGORIES:
            categories[data["nombre"]] = Category(**data)
            db.add(categories[data["nombre"]])
        created["categories"] = len(categories)

        if db.query(Product).count() == 0:
            for data in SEED_PRODUCTS:
                fields = {k: v for k, v in data.items() if k != "categoria"}
                db.add(Product(categoria=categories[data["categoria"]], **fields))
            created["products"] = len(SEED_PRODUCTS)

    db.commit()
    logger.info("Datos iniciales: %s", created)
    return created
