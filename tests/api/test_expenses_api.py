"""API tests for /financialexpenses."""

import pytest

EXPENSE = {
    "description": "Office rent",
    "amount_in_cents": 250000,
    "category": "rent",
    "due_date_at": "2030-02-05T00:00:00Z",
}


@pytest.fixture
def stored_expense(expense_repository):
    return expense_repository.add({"description": "Internet", "amount_in_cents": 15990})


class TestFinancialExpensesAPI:
    """Tests for the financial expenses endpoints."""

    def test_admin_creates(self, client_for):
        client, _ = client_for("admin")

        response = client.post("/api/v1/financialexpenses", json=EXPENSE)

        assert response.status_code == 201
        assert response.json()["category"] == "rent"

    def test_customer_forbidden(self, client_for):
        client, _ = client_for("customer")

        assert client.post("/api/v1/financialexpenses", json=EXPENSE).status_code == 403
        assert client.get("/api/v1/financialexpenses").status_code == 403

    def test_negative_amount(self, client_for):
        client, _ = client_for("admin")

        response = client.post("/api/v1/financialexpenses", json=dict(EXPENSE, amount_in_cents=-5))

        assert response.status_code == 400

    def test_created_at_rejected(self, client_for):
        client, _ = client_for("manager")

        response = client.post(
            "/api/v1/financialexpenses",
            json=dict(EXPENSE, created_at="2020-01-01T00:00:00Z"),
        )

        assert response.status_code == 400
        assert response.json()["errors"][0]["details"]["field"] == "created_at"

    def test_list_and_get(self, client_for, stored_expense):
        client, _ = client_for("manager")

        listed = client.get("/api/v1/financialexpenses")
        fetched = client.get(f"/api/v1/financialexpenses/{stored_expense.id}")

        assert [expense["id"] for expense in listed.json()] == [stored_expense.id]
        assert fetched.json()["description"] == "Internet"

    def test_update(self, client_for, stored_expense):
        client, _ = client_for("manager")

        response = client.patch(
            f"/api/v1/financialexpenses/{stored_expense.id}",
            json={"amount_in_cents": 17990, "unknown": "dropped"},
        )

        assert response.status_code == 200
        assert response.json()["amount_in_cents"] == 17990
        assert "unknown" not in response.json()

    def test_manager_cannot_delete(self, client_for, stored_expense):
        client, _ = client_for("manager")

        assert client.delete(f"/api/v1/financialexpenses/{stored_expense.id}").status_code == 403

    def test_admin_deletes(self, client_for, stored_expense, expense_repository):
        client, _ = client_for("admin")

        assert client.delete(f"/api/v1/financialexpenses/{stored_expense.id}").status_code == 204
        assert expense_repository.rows == {}

    def test_invalid_id(self, client_for):
        client, _ = client_for("admin")

        assert client.get("/api/v1/financialexpenses/abc").status_code == 400
