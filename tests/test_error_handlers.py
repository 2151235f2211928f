"""Tests del manejador de errores no controlados."""

import pytest
from fastapi.testclient import TestClient

from gestor_inventario.core.config import settings
from gestor_inventario.main import app
from gestor_inventario.services.report_service import ReportService


@pytest.fixture
def failing_client(client, monkeypatch):
    """Cliente cuyo reporte de resumen lanza una excepción inesperada."""
    def boom(self):
        raise RuntimeError("fallo inesperado")

    monkeypatch.setattr(ReportService, "inventory_summary", boom)
    # client ya redirige get_db a la base del test
    return TestClient(app, raise_server_exceptions=False)


class TestUnhandledErrors:

    def test_traceback_outside_production(self, failing_client, user_headers, monkeypatch):
        monkeypatch.setattr(settings, "environment", "development")

        response = failing_client.get("/api/reports/summary", headers=user_headers)

        assert response.status_code == 500
        body = response.json()
        assert body["success"] is False
        assert body["message"] == "Error interno del servidor"
        assert "RuntimeError: fallo inesperado" in body["error"]

    def test_no_traceback_in_production(self, failing_client, user_headers, monkeypatch):
        monkeypatch.setattr(settings, "environment", "production")

        response = failing_client.get("/api/reports/summary", headers=user_headers)

        assert response.status_code == 500
        assert response.json() == {"success": False, "message": "Error interno del servidor"}

    def test_error_is_logged(self, failing_client, user_headers, caplog):
        with caplog.at_level("ERROR", logger="gestor_inventario"):
            failing_client.get("/api/reports/summary", headers=user_headers)

        assert any("/api/reports/summary" in r.getMessage() and r.exc_info for r in caplog.records)
