"""Financial expense services."""

from .financial_expense_service import FinancialExpenseService

__all__ = ["FinancialExpenseService"]
