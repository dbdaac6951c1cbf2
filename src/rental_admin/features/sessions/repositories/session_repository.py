"""
Sessions repository for database operations.
"""

from typing import Optional

from loguru import logger

from ....database.connection import DatabaseManager
from ..entities.session import Session


class SessionDatabaseRepository:
    """Repository for session lookups."""

    def __init__(self, database: DatabaseManager):
        """Initialize the repository with a database manager."""
        self.db = database

    async def find_valid_by_token(self, token: str) -> Optional[Session]:
        """Get a non-expired session by its token."""
        record = await self.db.fetchrow(
            """
            SELECT
              *
            FROM
              sessions
            WHERE
              token = $1
              AND expires_at > NOW()
            LIMIT
              1
            """,
            token,
        )
        if not record:
            logger.debug("No valid session found for the provided token")
            return None
        return Session.from_record(record)
