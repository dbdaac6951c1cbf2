"""Financial expense repositories."""

from .financial_expense_repository import FinancialExpenseDatabaseRepository

__all__ = ["FinancialExpenseDatabaseRepository"]
