"""Customer order service for rental order business logic."""

from typing import Any, Dict, List

from loguru import logger

from ....core.exceptions import NotFoundError, ValidationError
from ....utils.datetime import parse_iso8601
from ....utils.uuid import is_valid_uuid
from ..entities.customer_order import DEFAULT_ORDER_STATUS, ORDER_STATUSES, CustomerOrder
from ..entities.protocols import CustomerOrderRepository

DATE_FIELDS = {"start_date": "start date", "end_date": "end date"}
COORDINATE_LIMITS = {"lat": ("latitude", 90.0), "lng": ("longitude", 180.0)}


class CustomerOrderService:
    """Customer order service implementation."""

    def __init__(self, repository: CustomerOrderRepository):
        """Initialize service with repository."""
        self.repository = repository

    async def create(self, values: Dict[str, Any]) -> CustomerOrder:
        """Place an order. Status defaults to ``pending``."""
        values = dict(values)
        if not values.get("status"):
            values["status"] = DEFAULT_ORDER_STATUS

        if not values.get("customer_id") or not is_valid_uuid(values["customer_id"]):
            raise ValidationError(
                message="The customer id was not found or is invalid.",
                action="Check the customer id and try again.",
                details={"field": "customer_id"},
            )
        values["customer_id"] = str(values["customer_id"])

        for field_name, label in DATE_FIELDS.items():
            if not values.get(field_name):
                raise ValidationError(
                    message=f"A {label} is required.",
                    action=f"Check that the {label} was filled in and try again.",
                    details={"field": field_name},
                )

        self._normalize(values)
        self._validate_period(values["start_date"], values["end_date"])

        return await self.repository.create(values)

    async def list_all(self) -> List[CustomerOrder]:
        return await self.repository.list_all()

    async def list_by_customer_id(self, customer_id: str) -> List[CustomerOrder]:
        return await self.repository.list_by_customer_id(str(customer_id))

    async def find_one_by_id(self, order_id: str) -> CustomerOrder:
        if not is_valid_uuid(order_id):
            raise ValidationError(
                message="The customer order id is invalid.",
                action="Check the customer order id and try again.",
                details={"field": "id"},
            )

        order = await self.repository.get_by_id(str(order_id))
        if not order:
            raise NotFoundError(
                message="Customer order not found.",
                action="Check the customer order id and try again.",
            )
        return order

    async def update(self, order_id: str, values: Dict[str, Any]) -> CustomerOrder:
        """Update an order with already filtered values."""
        if not values:
            raise ValidationError(
                message="No values were provided to update.",
                action="Check the submitted data and try again.",
            )

        current = await self.find_one_by_id(order_id)
        values = dict(values)
        self._normalize(values)

        if "start_date" in values or "end_date" in values:
            self._validate_period(
                values.get("start_date", current.start_date),
                values.get("end_date", current.end_date),
            )

        updated = await self.repository.update(current.id, values)
        if not updated:
            raise NotFoundError(
                message="Customer order not found.",
                action="Check the customer order id and try again.",
            )
        return updated

    async def delete(self, order_id: str) -> None:
        current = await self.find_one_by_id(order_id)
        await self.repository.delete(current.id)
        logger.info(f"Order {current.id} removed")

    def _normalize(self, values: Dict[str, Any]) -> None:
        """Validate status and coordinates and parse dates in place."""
        if "status" in values and values["status"] not in ORDER_STATUSES:
            raise ValidationError(
                message="The informed status is not valid.",
                action="Check the allowed statuses and try again.",
                details={"field": "status", "allowed": list(ORDER_STATUSES)},
            )

        for field_name, label in DATE_FIELDS.items():
            if values.get(field_name) is None:
                continue
            try:
                values[field_name] = parse_iso8601(values[field_name])
            except ValueError:
                raise ValidationError(
                    message=f"The informed {label} is invalid.",
                    action=f"Check the {label} and try again.",
                    details={"field": field_name},
                )

        for field_name, (label, limit) in COORDINATE_LIMITS.items():
            if values.get(field_name) is None:
                continue
            value = values[field_name]
            if isinstance(value, bool) or not isinstance(value, (int, float)) or abs(value) > limit:
                raise ValidationError(
                    message=f"The informed {label} is invalid.",
                    action=f"Check the {label} value and try again.",
                    details={"field": field_name},
                )
            values[field_name] = float(value)

    @staticmethod
    def _validate_period(start_date, end_date) -> None:
        if end_date <= start_date:
            raise ValidationError(
                message="The end date must be after the start date.",
                action="Check the informed dates and try again.",
                details={"field": "end_date"},
            )
