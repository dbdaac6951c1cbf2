"""API tests for /users."""

import pytest

NEW_USER = {
    "username": "newcustomer",
    "email": "newcustomer@example.com",
    "password": "valid-password",
    "cpf": "11122233344",
    "phone": "11977776666",
    "address": "Rua Nova, 10",
}


class TestCreateUser:
    """POST /api/v1/users."""

    def test_anonymous_can_register(self, client):
        response = client.post("/api/v1/users", json=NEW_USER)

        assert response.status_code == 201
        body = response.json()
        assert body["username"] == "newcustomer"
        assert body["features"] == ["read:activation_token"]
        assert "password" not in body

    def test_features_cannot_be_injected(self, client):
        response = client.post("/api/v1/users", json=dict(NEW_USER, features=["delete:devices"]))

        assert response.status_code == 400
        assert response.json()["errors"][0]["details"]["field"] == "features"

    def test_missing_cpf(self, client):
        body = dict(NEW_USER)
        body.pop("cpf")

        response = client.post("/api/v1/users", json=body)

        assert response.status_code == 400

    def test_customer_cannot_register_users(self, client_for):
        client, _ = client_for("customer")

        response = client.post("/api/v1/users", json=NEW_USER)

        assert response.status_code == 403


class TestReadUser:
    """GET /api/v1/users/{username}."""

    def test_read_self(self, client_for):
        client, user = client_for("customer")

        response = client.get(f"/api/v1/users/{user.username}")

        assert response.status_code == 200
        assert response.json()["id"] == user.id

    def test_read_other_without_others(self, client_for, make_user):
        client, _ = client_for("customer")
        other = make_user("customer")

        response = client.get(f"/api/v1/users/{other.username}")

        assert response.status_code == 403
        assert "read:user:others" in response.json()["errors"][0]["action"]

    def test_support_reads_other(self, client_for, make_user):
        client, _ = client_for("support")
        other = make_user("customer")

        response = client.get(f"/api/v1/users/{other.username}")

        assert response.status_code == 200
        assert response.json()["username"] == other.username

    def test_missing_user(self, client_for):
        client, _ = client_for("admin")

        response = client.get("/api/v1/users/ghost")

        assert response.status_code == 404

    def test_anonymous_cannot_read(self, client, make_user):
        other = make_user("customer")

        assert client.get(f"/api/v1/users/{other.username}").status_code == 403


class TestUpdateUser:
    """PATCH /api/v1/users/{username}."""

    def test_update_self(self, client_for):
        client, user = client_for("customer")

        response = client.patch(f"/api/v1/users/{user.username}", json={"phone": "11911112222"})

        assert response.status_code == 200
        assert response.json()["phone"] == "11911112222"

    def test_update_other_forbidden(self, client_for, make_user):
        client, _ = client_for("customer")
        other = make_user("customer")

        response = client.patch(f"/api/v1/users/{other.username}", json={"phone": "1"})

        assert response.status_code == 403

    def test_admin_updates_other(self, client_for, make_user):
        client, _ = client_for("admin")
        other = make_user("customer")

        response = client.patch(f"/api/v1/users/{other.username}", json={"address": "Rua C, 3"})

        assert response.status_code == 200
        assert response.json()["address"] == "Rua C, 3"

    @pytest.mark.parametrize("field", ["id", "features", "created_at"])
    def test_forbidden_fields(self, client_for, field):
        client, user = client_for("customer")

        response = client.patch(f"/api/v1/users/{user.username}", json={field: "x"})

        assert response.status_code == 400
        assert response.json()["errors"][0]["details"]["field"] == field

    def test_empty_body(self, client_for):
        client, user = client_for("customer")

        response = client.patch(f"/api/v1/users/{user.username}", json={})

        assert response.status_code == 400

    @pytest.mark.parametrize("field, value", [
        ("username", None),
        ("email", None),
        ("password", None),
        ("cpf", 12345678900),
        ("password", ""),
    ])
    def test_invalid_text_values(self, client_for, user_repository, field, value):
        client, user = client_for("customer")

        response = client.patch(f"/api/v1/users/{user.username}", json={field: value})

        assert response.status_code == 400
        assert response.json()["errors"][0]["details"]["field"] == field
        assert user_repository.rows[user.id] == user
