"""Financial expense domain entity."""

from dataclasses import asdict, dataclass, fields
from datetime import datetime
from typing import Any, Dict, Optional

from ....database.utils import process_database_record

EXPENSE_CATEGORIES = (
    "utilities",
    "rent",
    "payroll",
    "taxes",
    "maintenance",
    "supplies",
    "services",
    "transport",
    "marketing",
    "others",
)


@dataclass
class FinancialExpense:
    """Business expense entry. Amounts are stored in cents."""

    id: str
    description: str
    amount_in_cents: int
    category: Optional[str] = None
    paid_at: Optional[datetime] = None
    due_date_at: Optional[datetime] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def get_owner_id(self) -> None:
        return None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_record(cls, record: Any) -> "FinancialExpense":
        data = process_database_record(record)
        known = {f.name for f in fields(cls)}
        return cls(**{key: value for key, value in data.items() if key in known})
