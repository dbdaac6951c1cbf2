"""
Customer orders repository for database operations.
"""

from typing import Any, Dict, List, Optional

from loguru import logger

from ....database.connection import DatabaseManager
from ....database.utils import build_insert_query, build_update_query
from ..entities.customer_order import CustomerOrder

SELECT_WITH_CUSTOMER = """
    SELECT
      customer_order.*,
      users.username,
      users.email,
      users.cpf,
      users.phone,
      users.address,
      users.created_at AS customer_created_at
    FROM
      customer_order
      INNER JOIN users ON users.id = customer_order.customer_id
"""


class CustomerOrderDatabaseRepository:
    """Repository for customer order data access."""

    def __init__(self, database: DatabaseManager):
        """Initialize the repository with a database manager."""
        self.db = database

    async def get_by_id(self, order_id: str) -> Optional[CustomerOrder]:
        """Get an order with its customer columns."""
        record = await self.db.fetchrow(
            f"{SELECT_WITH_CUSTOMER} WHERE customer_order.id = $1 LIMIT 1",
            order_id,
        )
        return CustomerOrder.from_record(record) if record else None

    async def list_all(self) -> List[CustomerOrder]:
        """List every order, newest first."""
        records = await self.db.fetch(
            f"{SELECT_WITH_CUSTOMER} ORDER BY customer_order.created_at DESC"
        )
        return [CustomerOrder.from_record(record) for record in records]

    async def list_by_customer_id(self, customer_id: str) -> List[CustomerOrder]:
        """List the orders placed by one customer."""
        records = await self.db.fetch(
            f"{SELECT_WITH_CUSTOMER} WHERE customer_order.customer_id = $1 "
            "ORDER BY customer_order.created_at DESC",
            customer_id,
        )
        return [CustomerOrder.from_record(record) for record in records]

    async def create(self, values: Dict[str, Any]) -> CustomerOrder:
        """Insert an order and return the stored row."""
        query, params = build_insert_query("customer_order", values)
        record = await self.db.fetchrow(query, *params)
        order = CustomerOrder.from_record(record)
        logger.info(f"Created order {order.id} for customer {order.customer_id}")
        return order

    async def update(self, order_id: str, values: Dict[str, Any]) -> Optional[CustomerOrder]:
        """Update the given columns and re-read the order with its customer."""
        query, params = build_update_query("customer_order", values)
        record = await self.db.fetchrow(query, order_id, *params)
        if not record:
            return None
        logger.debug(f"Updated order {order_id}: {sorted(values)}")
        return await self.get_by_id(order_id)

    async def delete(self, order_id: str) -> bool:
        """Delete an order. Returns False when no row matched."""
        result = await self.db.execute("DELETE FROM customer_order WHERE id = $1", order_id)
        deleted = int(result.split()[-1]) > 0
        if deleted:
            logger.info(f"Deleted order {order_id}")
        return deleted
