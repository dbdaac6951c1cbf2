"""Customer order entities."""

from .customer_order import DEFAULT_ORDER_STATUS, ORDER_STATUSES, CustomerOrder
from .protocols import CustomerOrderRepository

__all__ = [
    "CustomerOrder",
    "CustomerOrderRepository",
    "ORDER_STATUSES",
    "DEFAULT_ORDER_STATUS",
]
