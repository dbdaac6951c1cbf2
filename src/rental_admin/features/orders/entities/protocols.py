"""Repository protocols for the orders feature."""

from typing import Any, Dict, List, Optional, Protocol, runtime_checkable

from .customer_order import CustomerOrder


@runtime_checkable
class CustomerOrderRepository(Protocol):
    """Persistence operations the order service relies on."""

    async def get_by_id(self, order_id: str) -> Optional[CustomerOrder]:
        ...

    async def list_all(self) -> List[CustomerOrder]:
        ...

    async def list_by_customer_id(self, customer_id: str) -> List[CustomerOrder]:
        ...

    async def create(self, values: Dict[str, Any]) -> CustomerOrder:
        ...

    async def update(self, order_id: str, values: Dict[str, Any]) -> Optional[CustomerOrder]:
        ...

    async def delete(self, order_id: str) -> bool:
        ...
