"""Financial expense service."""

from typing import Any, Dict, List

from loguru import logger

from ....core.exceptions import NotFoundError, ValidationError
from ....utils.datetime import parse_iso8601
from ....utils.uuid import is_valid_uuid
from ..entities.financial_expense import EXPENSE_CATEGORIES, FinancialExpense
from ..entities.protocols import FinancialExpenseRepository

DATE_FIELDS = {"paid_at": "payment date", "due_date_at": "due date"}


class FinancialExpenseService:
    """Financial expense service implementation."""

    def __init__(self, repository: FinancialExpenseRepository):
        """Initialize service with repository."""
        self.repository = repository

    async def create(self, values: Dict[str, Any]) -> FinancialExpense:
        values = dict(values)
        if not values.get("description"):
            raise ValidationError(
                message="Description was not provided.",
                action="Provide a valid description to perform this operation.",
                details={"field": "description"},
            )
        if values.get("amount_in_cents") is None:
            raise ValidationError(
                message="Amount was not provided.",
                action="Provide a valid amount to perform this operation.",
                details={"field": "amount_in_cents"},
            )

        self._normalize(values)
        return await self.repository.create(values)

    async def find_one_by_id(self, expense_id: str) -> FinancialExpense:
        if not is_valid_uuid(expense_id):
            raise ValidationError(
                message="The informed id was not found or is invalid.",
                action="Check the id and try again.",
                details={"field": "id"},
            )

        expense = await self.repository.get_by_id(str(expense_id))
        if not expense:
            raise NotFoundError(
                message="The informed id was not found or is invalid.",
                action="Check the id and try again.",
            )
        return expense

    async def list_all(self) -> List[FinancialExpense]:
        return await self.repository.list_all()

    async def update(self, expense_id: str, values: Dict[str, Any]) -> FinancialExpense:
        if not values:
            raise ValidationError(
                message="No values were provided to update.",
                action="Provide at least one valid field to perform this operation.",
            )

        current = await self.find_one_by_id(expense_id)
        values = dict(values)
        if "description" in values and not values["description"]:
            raise ValidationError(
                message="Description cannot be empty.",
                action="Provide a valid description to perform this operation.",
                details={"field": "description"},
            )

        self._normalize(values)
        updated = await self.repository.update(current.id, values)
        if not updated:
            raise NotFoundError(
                message="The informed id was not found or is invalid.",
                action="Check the id and try again.",
            )
        return updated

    async def delete(self, expense_id: str) -> None:
        current = await self.find_one_by_id(expense_id)
        await self.repository.delete(current.id)
        logger.info(f"Financial expense {current.id} removed")

    @staticmethod
    def _normalize(values: Dict[str, Any]) -> None:
        """Validate amount and category and parse dates in place."""
        if "amount_in_cents" in values:
            amount = values["amount_in_cents"]
            if isinstance(amount, bool) or not isinstance(amount, int):
                raise ValidationError(
                    message="Amount must be an integer number of cents.",
                    action="Provide a valid amount to perform this operation.",
                    details={"field": "amount_in_cents"},
                )
            if amount < 0:
                raise ValidationError(
                    message="Amount cannot be negative.",
                    action="Provide a valid amount to perform this operation.",
                    details={"field": "amount_in_cents"},
                )

        if values.get("category") and values["category"] not in EXPENSE_CATEGORIES:
            raise ValidationError(
                message="Invalid category.",
                action=f"Choose one of {', '.join(EXPENSE_CATEGORIES)}.",
                details={"field": "category", "allowed": list(EXPENSE_CATEGORIES)},
            )

        for field_name, label in DATE_FIELDS.items():
            if values.get(field_name) is None:
                continue
            try:
                values[field_name] = parse_iso8601(values[field_name])
            except ValueError:
                raise ValidationError(
                    message=f"Invalid {label}.",
                    action=f"Provide a valid {label} to perform this operation.",
                    details={"field": field_name},
                )
