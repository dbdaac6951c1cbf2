"""Device domain entity."""

from dataclasses import asdict, dataclass, fields
from datetime import datetime
from typing import Any, Dict, Optional

from ....database.utils import process_database_record

DEVICE_STATUSES = ("available", "rented", "maintenance", "blocked")
DEFAULT_DEVICE_STATUS = "available"


@dataclass
class Device:
    """Rentable equipment tracked by the admin backend."""

    id: str
    email_acc: str
    utid_device: str
    serial_number: str
    serial_number_router: str
    model: str
    provider: Optional[str] = None
    tracker_code: Optional[str] = None
    status: str = DEFAULT_DEVICE_STATUS
    notes: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def get_owner_id(self) -> None:
        """Devices belong to the business, not to a user."""
        return None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_record(cls, record: Any) -> "Device":
        data = process_database_record(record)
        known = {f.name for f in fields(cls)}
        return cls(**{key: value for key, value in data.items() if key in known})
