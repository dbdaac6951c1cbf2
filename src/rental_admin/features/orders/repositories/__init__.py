"""Customer order repositories."""

from .customer_order_repository import CustomerOrderDatabaseRepository

__all__ = ["CustomerOrderDatabaseRepository"]
