"""Repository protocols for the users feature."""

from typing import Any, Dict, List, Optional, Protocol, runtime_checkable

from .user import User


@runtime_checkable
class UserRepository(Protocol):
    """Persistence operations the user service relies on."""

    async def get_by_id(self, user_id: str) -> Optional[User]:
        ...

    async def get_by_username(self, username: str) -> Optional[User]:
        """Case-insensitive lookup."""
        ...

    async def get_by_email(self, email: str) -> Optional[User]:
        """Case-insensitive lookup."""
        ...

    async def exists_with_value(self, column: str, value: str) -> bool:
        """Case-insensitive uniqueness probe on ``username``, ``email`` or ``cpf``."""
        ...

    async def create(self, values: Dict[str, Any]) -> User:
        ...

    async def update(self, user_id: str, values: Dict[str, Any]) -> User:
        ...

    async def set_features(self, user_id: str, features: List[str]) -> Optional[User]:
        ...
