"""Customer order domain entity."""

from dataclasses import asdict, dataclass, fields
from datetime import datetime
from typing import Any, Dict, Optional

from ....database.utils import process_database_record

ORDER_STATUSES = ("pending", "approved", "rejected", "completed", "canceled")
DEFAULT_ORDER_STATUS = "pending"


@dataclass
class CustomerOrder:
    """Rental order placed by a customer.

    The ``username`` .. ``customer_created_at`` attributes come from the
    joined customer row and are empty on freshly inserted orders.
    """

    id: str
    customer_id: str
    start_date: datetime
    end_date: datetime
    status: str = DEFAULT_ORDER_STATUS
    notes: Optional[str] = None
    location_refer: Optional[str] = None
    lat: Optional[float] = None
    lng: Optional[float] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    username: Optional[str] = None
    email: Optional[str] = None
    cpf: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    customer_created_at: Optional[datetime] = None

    def get_owner_id(self) -> str:
        """Orders are owned by the customer who placed them."""
        return self.customer_id

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_record(cls, record: Any) -> "CustomerOrder":
        data = process_database_record(record)
        known = {f.name for f in fields(cls)}
        return cls(**{key: value for key, value in data.items() if key in known})
