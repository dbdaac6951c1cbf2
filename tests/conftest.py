"""Test configuration and fixtures for rental-admin.

API tests run against in-memory repositories injected through
``app.dependency_overrides``; no database is needed.
"""

import uuid
from dataclasses import replace
from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from rental_admin.api import dependencies
from rental_admin.app import create_app
from rental_admin.config.settings import Settings
from rental_admin.features.authorization import AuthorizationService
from rental_admin.features.devices.entities import Device
from rental_admin.features.expenses.entities import FinancialExpense
from rental_admin.features.orders.entities import CustomerOrder
from rental_admin.features.sessions.entities import Session
from rental_admin.features.users.entities import User


def _now():
    return datetime.now(timezone.utc)


class InMemoryUserRepository:
    """User repository backed by a dict."""

    def __init__(self):
        self.rows = {}

    async def get_by_id(self, user_id):
        return self.rows.get(str(user_id))

    async def get_by_username(self, username):
        for user in self.rows.values():
            if user.username.lower() == username.lower():
                return user
        return None

    async def get_by_email(self, email):
        for user in self.rows.values():
            if user.email.lower() == email.lower():
                return user
        return None

    async def exists_with_value(self, column, value):
        return any(
            (getattr(user, column) or "").lower() == value.lower()
            for user in self.rows.values()
        )

    def add(self, values):
        now = _now()
        user = User(id=str(uuid.uuid4()), created_at=now, updated_at=now, **values)
        self.rows[user.id] = user
        return user

    async def create(self, values):
        return self.add(values)

    async def update(self, user_id, values):
        user = replace(self.rows[user_id], updated_at=_now(), **values)
        self.rows[user_id] = user
        return user

    async def set_features(self, user_id, features):
        if user_id not in self.rows:
            return None
        return await self.update(user_id, {"features": list(features)})


class InMemorySessionRepository:
    """Session repository backed by a dict keyed by token."""

    def __init__(self):
        self.rows = {}

    def open(self, user_id, expires_in=timedelta(days=30)):
        now = _now()
        session = Session(
            id=str(uuid.uuid4()),
            token=uuid.uuid4().hex,
            user_id=user_id,
            expires_at=now + expires_in,
            created_at=now,
            updated_at=now,
        )
        self.rows[session.token] = session
        return session

    async def find_valid_by_token(self, token):
        session = self.rows.get(token)
        if session is None or session.is_expired:
            return None
        return session


class _InMemoryCrudRepository:
    entity = None

    def __init__(self):
        self.rows = {}

    async def get_by_id(self, entity_id):
        return self.rows.get(str(entity_id))

    async def list_all(self):
        return list(self.rows.values())

    def add(self, values):
        now = _now()
        row = self.entity(id=str(uuid.uuid4()), created_at=now, updated_at=now, **values)
        self.rows[row.id] = row
        return row

    async def create(self, values):
        return self.add(values)

    async def update(self, entity_id, values):
        if entity_id not in self.rows:
            return None
        row = replace(self.rows[entity_id], updated_at=_now(), **values)
        self.rows[entity_id] = row
        return row

    async def delete(self, entity_id):
        return self.rows.pop(entity_id, None) is not None


class InMemoryDeviceRepository(_InMemoryCrudRepository):
    entity = Device

    async def exists_with_value(self, column, value, exclude_id=None):
        return any(
            getattr(device, column).lower() == value.lower() and device.id != exclude_id
            for device in self.rows.values()
        )


class InMemoryOrderRepository(_InMemoryCrudRepository):
    entity = CustomerOrder

    async def list_by_customer_id(self, customer_id):
        return [order for order in self.rows.values() if order.customer_id == customer_id]


class InMemoryExpenseRepository(_InMemoryCrudRepository):
    entity = FinancialExpense


class FakeDatabase:
    """Stands in for DatabaseManager where only the health check is used."""

    def __init__(self, healthy=True):
        self.healthy = healthy

    async def health_check(self):
        return self.healthy


@pytest.fixture
def authorization():
    """Authorization service with the built-in configuration."""
    return AuthorizationService()


@pytest.fixture
def user_repository():
    return InMemoryUserRepository()


@pytest.fixture
def session_repository():
    return InMemorySessionRepository()


@pytest.fixture
def device_repository():
    return InMemoryDeviceRepository()


@pytest.fixture
def order_repository():
    return InMemoryOrderRepository()


@pytest.fixture
def expense_repository():
    return InMemoryExpenseRepository()


@pytest.fixture
def database():
    return FakeDatabase()


@pytest.fixture
def make_user(user_repository, authorization):
    """Factory storing a user that holds the features of ``role``."""
    counter = {"value": 0}

    def factory(role="customer", **overrides):
        counter["value"] += 1
        number = counter["value"]
        values = {
            "username": f"{role}{number}",
            "email": f"{role}{number}@example.com",
            "password": "scrypt$hash",
            "features": authorization.features_for(role),
            "cpf": f"000000000{number:02d}",
            "phone": "11999990000",
            "address": "Rua Teste, 100",
        }
        values.update(overrides)
        return user_repository.add(values)

    return factory


@pytest.fixture
def app(user_repository, session_repository, device_repository, order_repository,
        expense_repository, database):
    """Create FastAPI test app wired to in-memory repositories."""
    app = create_app(Settings(environment="testing", debug=False))
    app.dependency_overrides.update({
        dependencies.get_database: lambda: database,
        dependencies.get_user_repository: lambda: user_repository,
        dependencies.get_session_repository: lambda: session_repository,
        dependencies.get_device_repository: lambda: device_repository,
        dependencies.get_order_repository: lambda: order_repository,
        dependencies.get_expense_repository: lambda: expense_repository,
    })
    return app


@pytest.fixture
def client(app):
    """Anonymous test client."""
    return TestClient(app)


@pytest.fixture
def client_for(app, make_user, session_repository):
    """Factory returning ``(client, user)`` logged in with the given role."""

    def factory(role="customer", **overrides):
        user = make_user(role, **overrides)
        session = session_repository.open(user.id)
        return TestClient(app, cookies={"session_id": session.token}), user

    return factory
