"""Customer order services."""

from .customer_order_service import CustomerOrderService

__all__ = ["CustomerOrderService"]
