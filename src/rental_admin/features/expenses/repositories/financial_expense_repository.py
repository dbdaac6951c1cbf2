"""
Financial expenses repository for database operations.
"""

from typing import Any, Dict, List, Optional

from loguru import logger

from ....database.connection import DatabaseManager
from ....database.utils import build_insert_query, build_update_query
from ..entities.financial_expense import FinancialExpense


class FinancialExpenseDatabaseRepository:
    """Repository for financial expense data access."""

    def __init__(self, database: DatabaseManager):
        """Initialize the repository with a database manager."""
        self.db = database

    async def get_by_id(self, expense_id: str) -> Optional[FinancialExpense]:
        """Get an expense by ID."""
        record = await self.db.fetchrow(
            """
            SELECT
              *
            FROM
              financial_expenses
            WHERE
              id = $1
            LIMIT
              1
            """,
            expense_id,
        )
        return FinancialExpense.from_record(record) if record else None

    async def list_all(self) -> List[FinancialExpense]:
        """List every expense, newest first."""
        records = await self.db.fetch(
            """
            SELECT
              *
            FROM
              financial_expenses
            ORDER BY
              created_at DESC
            """
        )
        return [FinancialExpense.from_record(record) for record in records]

    async def create(self, values: Dict[str, Any]) -> FinancialExpense:
        """Insert an expense and return the stored row."""
        query, params = build_insert_query("financial_expenses", values)
        record = await self.db.fetchrow(query, *params)
        expense = FinancialExpense.from_record(record)
        logger.info(f"Created financial expense {expense.id}")
        return expense

    async def update(self, expense_id: str, values: Dict[str, Any]) -> Optional[FinancialExpense]:
        """Update the given columns of an expense."""
        query, params = build_update_query("financial_expenses", values)
        record = await self.db.fetchrow(query, expense_id, *params)
        if not record:
            return None
        logger.debug(f"Updated financial expense {expense_id}: {sorted(values)}")
        return FinancialExpense.from_record(record)

    async def delete(self, expense_id: str) -> bool:
        """Delete an expense. Returns False when no row matched."""
        result = await self.db.execute("DELETE FROM financial_expenses WHERE id = $1", expense_id)
        deleted = int(result.split()[-1]) > 0
        if deleted:
            logger.info(f"Deleted financial expense {expense_id}")
        return deleted
