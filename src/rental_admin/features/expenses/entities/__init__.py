"""Financial expense entities."""

from .financial_expense import EXPENSE_CATEGORIES, FinancialExpense
from .protocols import FinancialExpenseRepository

__all__ = ["FinancialExpense", "FinancialExpenseRepository", "EXPENSE_CATEGORIES"]
