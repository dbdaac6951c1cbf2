"""
Devices repository for database operations.
"""

from typing import Any, Dict, List, Optional

from loguru import logger

from ....database.connection import DatabaseManager
from ....database.utils import build_insert_query, build_update_query
from ..entities.device import Device

UNIQUE_COLUMNS = ("utid_device", "serial_number")


class DeviceDatabaseRepository:
    """Repository for device data access."""

    def __init__(self, database: DatabaseManager):
        """Initialize the repository with a database manager."""
        self.db = database

    async def get_by_id(self, device_id: str) -> Optional[Device]:
        """Get a device by ID."""
        record = await self.db.fetchrow(
            """
            SELECT
              *
            FROM
              devices
            WHERE
              id = $1
            LIMIT
              1
            """,
            device_id,
        )
        return Device.from_record(record) if record else None

    async def list_all(self) -> List[Device]:
        """List every device, newest first."""
        records = await self.db.fetch(
            """
            SELECT
              *
            FROM
              devices
            ORDER BY
              created_at DESC
            """
        )
        return [Device.from_record(record) for record in records]

    async def exists_with_value(
        self, column: str, value: str, exclude_id: Optional[str] = None
    ) -> bool:
        """Check whether another device already uses ``value`` in ``column``."""
        if column not in UNIQUE_COLUMNS:
            raise ValueError(f"Invalid unique column: {column}")

        if exclude_id:
            found = await self.db.fetchval(
                f"SELECT EXISTS (SELECT 1 FROM devices WHERE LOWER({column}) = LOWER($1) AND id <> $2)",
                value,
                exclude_id,
            )
        else:
            found = await self.db.fetchval(
                f"SELECT EXISTS (SELECT 1 FROM devices WHERE LOWER({column}) = LOWER($1))",
                value,
            )
        return bool(found)

    async def create(self, values: Dict[str, Any]) -> Device:
        """Insert a device and return the stored row."""
        query, params = build_insert_query("devices", values)
        record = await self.db.fetchrow(query, *params)
        device = Device.from_record(record)
        logger.info(f"Created device {device.id} ({device.utid_device})")
        return device

    async def update(self, device_id: str, values: Dict[str, Any]) -> Optional[Device]:
        """Update the given columns of a device."""
        query, params = build_update_query("devices", values)
        record = await self.db.fetchrow(query, device_id, *params)
        if not record:
            return None
        logger.debug(f"Updated device {device_id}: {sorted(values)}")
        return Device.from_record(record)

    async def delete(self, device_id: str) -> bool:
        """Delete a device. Returns False when no row matched."""
        result = await self.db.execute("DELETE FROM devices WHERE id = $1", device_id)
        deleted = int(result.split()[-1]) > 0
        if deleted:
            logger.info(f"Deleted device {device_id}")
        return deleted
