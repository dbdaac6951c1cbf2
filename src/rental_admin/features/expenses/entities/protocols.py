"""Repository protocols for the financial expenses feature."""

from typing import Any, Dict, List, Optional, Protocol, runtime_checkable

from .financial_expense import FinancialExpense


@runtime_checkable
class FinancialExpenseRepository(Protocol):
    """Persistence operations the expense service relies on."""

    async def get_by_id(self, expense_id: str) -> Optional[FinancialExpense]:
        ...

    async def list_all(self) -> List[FinancialExpense]:
        ...

    async def create(self, values: Dict[str, Any]) -> FinancialExpense:
        ...

    async def update(self, expense_id: str, values: Dict[str, Any]) -> Optional[FinancialExpense]:
        ...

    async def delete(self, expense_id: str) -> bool:
        ...
