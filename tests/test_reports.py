"""Tests de reportes y de la carga de datos iniciales."""

from gestor_inventario.models.category import Category
from gestor_inventario.models.product import Product
from gestor_inventario.models.user import User
from gestor_inventario.services.report_service import ReportService
from gestor_inventario.services.seed_service import SEED_PRODUCTS, seed_initial_data


class TestReportService:

    def test_low_stock_is_strictly_below_minimum(self, db, make_product):
        make_product(nombre="Papel Bond A4", stock=2, stock_minimo=10)
        make_product(nombre="En el límite", stock=5, stock_minimo=5)
        make_product(nombre="Inactivo", stock=0, stock_minimo=3, activo=False)

        low = ReportService(db).low_stock_products()

        assert [p.nombre for p in low] == ["Papel Bond A4"]

    def test_summary(self, db, make_product):
        make_product(stock=10, precio=2.5)
        make_product(stock=4, precio=100, stock_minimo=5)
        make_product(stock=50, precio=1000, activo=False)

        summary = ReportService(db).inventory_summary()

        assert summary.productos_activos == 2
        assert summary.unidades_totales == 14
        assert summary.valor_total_inventario == 425.0
        assert summary.categorias_unicas == 1
        assert summary.productos_stock_bajo == 1

    def test_value_by_category_sorted_descending(self, db, make_product):
        oficina = Category(nombre="Oficina")
        db.add(oficina)
        db.commit()
        make_product(stock=10, precio=10)
        make_product(stock=1, precio=5000, categoria=oficina)

        rows = ReportService(db).value_by_category()

        assert [(r.categoria, r.numero_de_productos, r.valor_total) for r in rows] == [
            ("Oficina", 1, 5000.0),
            ("Electrónicos", 1, 100.0),
        ]


class TestReportEndpoints:

    def test_low_stock_endpoint(self, client, user_headers, make_product):
        make_product(nombre="Papel Bond A4", stock=2, stock_minimo=10)

        body = client.get("/api/reports/low-stock", headers=user_headers).json()

        assert [p["nombre"] for p in body["data"]] == ["Papel Bond A4"]
        assert body["data"][0]["isLowStock"] is True

    def test_summary_uses_camel_case(self, client, user_headers, product):
        data = client.get("/api/reports/summary", headers=user_headers).json()["data"]

        assert data["productosActivos"] == 1
        assert data["unidadesTotales"] == 25

    def test_requires_token(self, client):
        assert client.get("/api/reports/summary").status_code == 401


class TestSeed:

    def test_seed_populates_empty_database(self, db):
        created = seed_initial_data(db)

        assert created == {"categories": 3, "products": len(SEED_PRODUCTS), "users": 1}
        papel = db.query(Product).filter(Product.codigo_barras == "PAP-BON-003").one()
        assert papel.is_low_stock
        assert papel.categoria.nombre == "Oficina"

    def test_seed_is_idempotent(self, db):
        seed_initial_data(db)
        again = seed_initial_data(db)

        assert again == {"categories": 0, "products": 0, "users": 0}
        assert db.query(User).count() == 1
        assert db.query(Category).count() == 3

    def test_seeded_admin_can_log_in(self, client, db):
        seed_initial_data(db)

        response = client.post("/api/auth/login", json={"email": "admin@utm.edu.ec", "password": "admin123"})

        assert response.status_code == 200
        assert response.json()["data"]["user"]["rol"] == "admin"


class TestHealth:

    def test_health(self, client):
        assert client.get("/health").json() == {"status": "healthy"}

    def test_unknown_route(self, client):
        response = client.get("/api/nada")

        assert response.status_code == 404
        assert response.json()["message"] == "Ruta no encontrada: /api/nada"
