"""Tests de /api/users."""

from gestor_inventario.models.user import UserRole


def _payload(**overrides):
    payload = {
        "nombre": "Carlos Ruiz",
        "email": "Carlos.Ruiz@UTM.edu.ec",
        "password": "clave123",
        "rol": "usuario",
    }
    payload.update(overrides)
    return payload


class TestCreateUser:

    def test_create_hides_password_and_folds_email(self, client, admin_headers):
        response = client.post("/api/users", json=_payload(), headers=admin_headers)

        assert response.status_code == 201
        data = response.json()["data"]
        assert data["email"] == "carlos.ruiz@utm.edu.ec"
        assert data["rol"] == "usuario"
        assert data["activo"] is True
        assert "password" not in data

    def test_duplicate_email_ignores_case(self, client, admin_headers):
        client.post("/api/users", json=_payload(), headers=admin_headers)
        response = client.post(
            "/api/users", json=_payload(email="carlos.ruiz@utm.edu.ec"), headers=admin_headers
        )

        assert response.status_code == 400
        assert response.json()["message"] == "Ya existe un usuario con ese email"

    def test_short_password(self, client, admin_headers):
        response = client.post("/api/users", json=_payload(password="123"), headers=admin_headers)

        assert response.status_code == 400
        assert response.json()["message"] == "La contraseña debe tener al menos 6 caracteres"

    def test_invalid_role(self, client, admin_headers):
        response = client.post("/api/users", json=_payload(rol="superusuario"), headers=admin_headers)
        assert response.status_code == 400

    def test_invalid_email(self, client, admin_headers):
        response = client.post("/api/users", json=_payload(email="no-es-un-email"), headers=admin_headers)
        assert response.status_code == 400


class TestListUsers:

    def test_sorted_by_name_without_passwords(self, client, admin_headers, make_user):
        make_user(nombre="Zoila", email="zoila@utm.edu.ec")
        make_user(nombre="Bruno", email="bruno@utm.edu.ec")

        body = client.get("/api/users", headers=admin_headers).json()

        assert [u["nombre"] for u in body["data"]] == ["Administrador", "Bruno", "Zoila"]
        assert all("password" not in u for u in body["data"])
        assert body["pagination"]["total"] == 3


class TestUpdateUser:

    def test_password_change_allows_new_login(self, client, admin_headers, regular_user):
        response = client.put(
            f"/api/users/{regular_user.id}", json={"password": "nuevaClave"}, headers=admin_headers
        )
        assert response.status_code == 200

        old = client.post("/api/auth/login", json={"email": regular_user.email, "password": "secreto1"})
        new = client.post("/api/auth/login", json={"email": regular_user.email, "password": "nuevaClave"})
        assert old.status_code == 401
        assert new.status_code == 200

    def test_short_new_password(self, client, admin_headers, regular_user):
        response = client.put(f"/api/users/{regular_user.id}", json={"password": "abc"}, headers=admin_headers)
        assert response.status_code == 400

    def test_promote_to_admin(self, client, admin_headers, regular_user):
        response = client.put(f"/api/users/{regular_user.id}", json={"rol": "admin"}, headers=admin_headers)
        assert response.json()["data"]["rol"] == UserRole.ADMIN.value

    def test_unknown_user(self, client, admin_headers):
        response = client.put("/api/users/999", json={"nombre": "Nadie"}, headers=admin_headers)
        assert response.status_code == 404
        assert response.json()["message"] == "Usuario no encontrado"


class TestDeleteUser:

    def test_delete(self, client, admin_headers, make_user):
        user = make_user()
        response = client.delete(f"/api/users/{user.id}", headers=admin_headers)

        assert response.status_code == 200
        assert response.json()["message"] == "Usuario eliminado permanentemente"
        assert client.get(f"/api/users/{user.id}", headers=admin_headers).status_code == 404

    def test_root_admin_cannot_be_deleted(self, client, admin_user, admin_headers):
        response = client.delete(f"/api/users/{admin_user.id}", headers=admin_headers)

        assert response.status_code == 403
        assert response.json()["message"] == (
            "No se puede eliminar el usuario administrador principal del sistema"
        )

    def test_root_admin_protected_from_other_admins(self, client, admin_user, make_user, headers_for):
        other_admin = make_user(nombre="Otra Admin", email="otra@utm.edu.ec", rol=UserRole.ADMIN)
        response = client.delete(f"/api/users/{admin_user.id}", headers=headers_for(other_admin))

        assert response.status_code == 403


class TestUserPermissions:

    def test_regular_user_is_forbidden(self, client, user_headers, admin_user):
        assert client.get("/api/users", headers=user_headers).status_code == 403
        assert client.delete(f"/api/users/{admin_user.id}", headers=user_headers).status_code == 403

    def test_demoted_admin_loses_access_immediately(self, client, admin_headers, make_user, headers_for):
        other_admin = make_user(nombre="Temporal", email="temp@utm.edu.ec", rol=UserRole.ADMIN)
        headers = headers_for(other_admin)
        assert client.get("/api/users", headers=headers).status_code == 200

        client.put(f"/api/users/{other_admin.id}", json={"rol": "usuario"}, headers=admin_headers)

        # El token sigue diciendo "admin", pero el rol se relee de la base
        assert client.get("/api/users", headers=headers).status_code == 403


class TestRootAdminUpdate:

    def test_email_cannot_change(self, client, admin_user, admin_headers):
        response = client.put(
            f"/api/users/{admin_user.id}", json={"email": "otro@utm.edu.ec"}, headers=admin_headers
        )

        assert response.status_code == 403
        # Sigue protegido frente al borrado
        assert client.delete(f"/api/users/{admin_user.id}", headers=admin_headers).status_code == 403

    def test_cannot_be_deactivated(self, client, admin_user, admin_headers):
        response = client.put(f"/api/users/{admin_user.id}", json={"activo": False}, headers=admin_headers)

        assert response.status_code == 403
        login = client.post("/api/auth/login", json={"email": admin_user.email, "password": "admin123"})
        assert login.status_code == 200

    def test_cannot_be_demoted(self, client, admin_user, make_user, headers_for):
        other_admin = make_user(nombre="Otra Admin", email="otra@utm.edu.ec", rol=UserRole.ADMIN)

        response = client.put(
            f"/api/users/{admin_user.id}", json={"rol": "usuario"}, headers=headers_for(other_admin)
        )

        assert response.status_code == 403
        assert client.get("/api/users", headers=headers_for(admin_user)).status_code == 200

    def test_other_fields_can_change(self, client, admin_user, admin_headers):
        response = client.put(
            f"/api/users/{admin_user.id}",
            json={"nombre": "Admin Principal", "email": admin_user.email, "activo": True, "rol": "admin"},
            headers=admin_headers,
        )

        assert response.status_code == 200
        assert response.json()["data"]["nombre"] == "Admin Principal"
