"""Tests for the customer order service."""

import uuid
from datetime import datetime, timezone

import pytest

from rental_admin.core.exceptions import NotFoundError, ValidationError
from rental_admin.features.orders.services import CustomerOrderService


@pytest.fixture
def service(order_repository):
    return CustomerOrderService(order_repository)


@pytest.fixture
def order_values():
    return {
        "customer_id": str(uuid.uuid4()),
        "start_date": "2030-03-01T10:00:00Z",
        "end_date": "2030-03-10T10:00:00Z",
    }


class TestCustomerOrderService:
    """Tests for CustomerOrderService."""

    @pytest.mark.asyncio
    async def test_create_defaults_to_pending(self, service, order_values):
        order = await service.create(order_values)

        assert order.status == "pending"
        assert order.start_date == datetime(2030, 3, 1, 10, tzinfo=timezone.utc)
        assert order.get_owner_id() == order_values["customer_id"]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("field", ["customer_id", "start_date", "end_date"])
    async def test_create_requires_field(self, service, order_values, field):
        order_values.pop(field)

        with pytest.raises(ValidationError) as exc_info:
            await service.create(order_values)

        assert exc_info.value.details["field"] == field

    @pytest.mark.asyncio
    async def test_end_date_must_follow_start_date(self, service, order_values):
        order_values["end_date"] = "2030-02-01T10:00:00Z"

        with pytest.raises(ValidationError) as exc_info:
            await service.create(order_values)

        assert exc_info.value.details["field"] == "end_date"

    @pytest.mark.asyncio
    async def test_invalid_date_rejected(self, service, order_values):
        order_values["start_date"] = "next tuesday"

        with pytest.raises(ValidationError):
            await service.create(order_values)

    @pytest.mark.asyncio
    async def test_invalid_status_rejected(self, service, order_values):
        order_values["status"] = "shipped"

        with pytest.raises(ValidationError):
            await service.create(order_values)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("field,value", [("lat", "invalid-lat"), ("lat", 91), ("lng", -181), ("lng", True)])
    async def test_invalid_coordinates_rejected(self, service, order_values, field, value):
        order_values[field] = value

        with pytest.raises(ValidationError) as exc_info:
            await service.create(order_values)

        assert exc_info.value.details["field"] == field

    @pytest.mark.asyncio
    async def test_list_by_customer(self, service, order_values):
        mine = await service.create(order_values)
        await service.create(dict(order_values, customer_id=str(uuid.uuid4())))

        orders = await service.list_by_customer_id(order_values["customer_id"])

        assert [order.id for order in orders] == [mine.id]
        assert len(await service.list_all()) == 2

    @pytest.mark.asyncio
    async def test_update_checks_period_against_stored_dates(self, service, order_values):
        order = await service.create(order_values)

        with pytest.raises(ValidationError):
            await service.update(order.id, {"end_date": "2030-02-01T00:00:00Z"})

    @pytest.mark.asyncio
    async def test_update(self, service, order_values):
        order = await service.create(order_values)

        updated = await service.update(order.id, {"notes": "Deliver at noon", "lat": -23.55052})

        assert updated.notes == "Deliver at noon"
        assert updated.lat == -23.55052

    @pytest.mark.asyncio
    async def test_find_invalid_and_missing(self, service):
        with pytest.raises(ValidationError):
            await service.find_one_by_id("123")
        with pytest.raises(NotFoundError):
            await service.find_one_by_id(str(uuid.uuid4()))
