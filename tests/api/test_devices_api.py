"""API tests for /devices."""

import uuid

import pytest

DEVICE = {
    "email_acc": "acc@example.com",
    "utid_device": "UTID-1",
    "serial_number": "SN-1",
    "serial_number_router": "SNR-1",
    "model": "Starlink Mini",
}


@pytest.fixture
def stored_device(device_repository):
    return device_repository.add(dict(DEVICE, status="available"))


class TestCreateDevice:
    """POST /api/v1/devices."""

    def test_admin_creates(self, client_for):
        client, _ = client_for("admin")

        response = client.post("/api/v1/devices", json=DEVICE)

        assert response.status_code == 201
        assert response.json()["status"] == "available"

    def test_id_in_body_rejected(self, client_for, device_repository):
        client, _ = client_for("admin")

        response = client.post("/api/v1/devices", json=dict(DEVICE, id=str(uuid.uuid4())))

        assert response.status_code == 400
        assert device_repository.rows == {}

    def test_operator_cannot_create(self, client_for):
        client, _ = client_for("operator")

        assert client.post("/api/v1/devices", json=DEVICE).status_code == 403

    def test_duplicate_serial(self, client_for, stored_device):
        client, _ = client_for("admin")

        response = client.post("/api/v1/devices", json=dict(DEVICE, utid_device="UTID-2"))

        assert response.status_code == 400


class TestReadDevice:
    """GET /api/v1/devices/{id}."""

    def test_get(self, client_for, stored_device):
        client, _ = client_for("operator")

        response = client.get(f"/api/v1/devices/{stored_device.id}")

        assert response.status_code == 200
        assert response.json()["serial_number"] == "SN-1"

    def test_invalid_id(self, client_for):
        client, _ = client_for("operator")

        assert client.get("/api/v1/devices/not-a-uuid").status_code == 400

    def test_missing(self, client_for):
        client, _ = client_for("operator")

        assert client.get(f"/api/v1/devices/{uuid.uuid4()}").status_code == 404

    def test_list(self, client_for, stored_device):
        client, _ = client_for("support")

        response = client.get("/api/v1/devices")

        assert [device["id"] for device in response.json()] == [stored_device.id]


class TestUpdateDevice:
    """PATCH /api/v1/devices/{id}."""

    def test_admin_full_update(self, client_for, stored_device):
        client, _ = client_for("admin")

        response = client.patch(
            f"/api/v1/devices/{stored_device.id}",
            json={"model": "Starlink Standard", "status": "rented"},
        )

        assert response.status_code == 200
        assert response.json()["model"] == "Starlink Standard"
        assert response.json()["status"] == "rented"

    def test_forbidden_field_leaves_device_unchanged(self, client_for, stored_device, device_repository):
        client, _ = client_for("admin")

        response = client.patch(f"/api/v1/devices/{stored_device.id}", json={"id": "x"})

        assert response.status_code == 400
        assert response.json()["errors"][0]["details"]["field"] == "id"
        assert device_repository.rows[stored_device.id] == stored_device

    def test_operator_status_only(self, client_for, stored_device):
        client, _ = client_for("operator")

        response = client.patch(f"/api/v1/devices/{stored_device.id}", json={"status": "maintenance"})

        assert response.status_code == 200
        assert response.json()["status"] == "maintenance"

    def test_operator_mixed_fields_forbidden(self, client_for, stored_device, device_repository):
        client, _ = client_for("operator")

        response = client.patch(
            f"/api/v1/devices/{stored_device.id}",
            json={"status": "rented", "model": "X"},
        )

        assert response.status_code == 403
        assert device_repository.rows[stored_device.id].model == "Starlink Mini"

    def test_operator_other_fields_only(self, client_for, stored_device):
        client, _ = client_for("operator")

        response = client.patch(f"/api/v1/devices/{stored_device.id}", json={"model": "X"})

        assert response.status_code == 400

    def test_invalid_status(self, client_for, stored_device):
        client, _ = client_for("operator")

        response = client.patch(f"/api/v1/devices/{stored_device.id}", json={"status": "lost"})

        assert response.status_code == 400

    def test_customer_forbidden(self, client_for, stored_device):
        client, _ = client_for("customer")

        response = client.patch(f"/api/v1/devices/{stored_device.id}", json={"status": "rented"})

        assert response.status_code == 403

    @pytest.mark.parametrize("field, value", [
        ("serial_number", 123),
        ("serial_number", None),
        ("utid_device", "   "),
    ])
    def test_invalid_unique_values(self, client_for, stored_device, device_repository, field, value):
        client, _ = client_for("admin")

        response = client.patch(f"/api/v1/devices/{stored_device.id}", json={field: value})

        assert response.status_code == 400
        assert response.json()["errors"][0]["details"]["field"] == field
        assert device_repository.rows[stored_device.id] == stored_device


class TestDeleteDevice:
    """DELETE /api/v1/devices/{id}."""

    def test_admin_deletes(self, client_for, stored_device, device_repository):
        client, _ = client_for("admin")

        response = client.delete(f"/api/v1/devices/{stored_device.id}")

        assert response.status_code == 204
        assert stored_device.id not in device_repository.rows

    def test_manager_cannot_delete(self, client_for, stored_device):
        client, _ = client_for("manager")

        assert client.delete(f"/api/v1/devices/{stored_device.id}").status_code == 403
