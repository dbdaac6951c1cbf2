"""User domain entity.

Only ``id`` and ``features`` matter to authorization; the rest is account
data managed by the user service.
"""

from dataclasses import dataclass, field, fields
from datetime import datetime
from typing import Any, Dict, List, Optional

from ....database.utils import process_database_record


@dataclass
class User:
    """Registered account with its granted feature list."""

    id: str
    username: str
    email: str
    password: str
    features: List[str] = field(default_factory=list)
    cpf: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    notes: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def get_owner_id(self) -> str:
        """A user record is owned by the user it describes."""
        return self.id

    def has_feature(self, feature: str) -> bool:
        return feature in self.features

    def to_public_dict(self) -> Dict[str, Any]:
        """Serializable view without the password hash."""
        return {
            "id": self.id,
            "username": self.username,
            "email": self.email,
            "features": list(self.features),
            "cpf": self.cpf,
            "phone": self.phone,
            "address": self.address,
            "notes": self.notes,
            "created_at": self.created_at,
            "updated_at": self.updated_at,
        }

    @classmethod
    def from_record(cls, record: Any) -> "User":
        data = process_database_record(record)
        known = {f.name for f in fields(cls)}
        values = {key: value for key, value in data.items() if key in known}
        values["features"] = list(values.get("features") or [])
        return cls(**values)


@dataclass
class AnonymousUser:
    """Caller without a session, holding the anonymous role features."""

    features: List[str] = field(default_factory=list)
    id: Optional[str] = None
    username: Optional[str] = None

    def get_owner_id(self) -> None:
        return None
