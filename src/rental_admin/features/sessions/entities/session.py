"""Session entity."""

from dataclasses import dataclass, fields
from datetime import datetime
from typing import Any, Optional

from ....database.utils import process_database_record
from ....utils.datetime import is_expired


@dataclass
class Session:
    """Login session identified by the token stored in the session cookie."""

    id: str
    token: str
    user_id: str
    expires_at: datetime
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def is_expired(self) -> bool:
        return is_expired(self.expires_at)

    def get_owner_id(self) -> str:
        return self.user_id

    @classmethod
    def from_record(cls, record: Any) -> "Session":
        data = process_database_record(record)
        known = {f.name for f in fields(cls)}
        return cls(**{key: value for key, value in data.items() if key in known})
