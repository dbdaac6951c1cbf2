"""Repository protocols for the sessions feature."""

from typing import Optional, Protocol, runtime_checkable

from .session import Session


@runtime_checkable
class SessionRepository(Protocol):
    """Read access to login sessions."""

    async def find_valid_by_token(self, token: str) -> Optional[Session]:
        """Session holding ``token`` whose expiry is still in the future."""
        ...
