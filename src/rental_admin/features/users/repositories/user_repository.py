"""
Users repository for database operations.
"""

from typing import Any, Dict, List, Optional

from loguru import logger

from ....database.connection import DatabaseManager
from ....database.utils import build_insert_query, build_update_query
from ..entities.user import User

UNIQUE_COLUMNS = ("username", "email", "cpf")


class UserDatabaseRepository:
    """Repository for user data access."""

    def __init__(self, database: DatabaseManager):
        """Initialize the repository with a database manager."""
        self.db = database

    async def get_by_id(self, user_id: str) -> Optional[User]:
        """Get a user by ID."""
        record = await self.db.fetchrow(
            """
            SELECT
              *
            FROM
              users
            WHERE
              id = $1
            LIMIT
              1
            """,
            user_id,
        )
        return User.from_record(record) if record else None

    async def get_by_username(self, username: str) -> Optional[User]:
        """Get a user by username, ignoring case."""
        record = await self.db.fetchrow(
            """
            SELECT
              *
            FROM
              users
            WHERE
              LOWER(username) = LOWER($1)
            LIMIT
              1
            """,
            username,
        )
        return User.from_record(record) if record else None

    async def get_by_email(self, email: str) -> Optional[User]:
        """Get a user by email, ignoring case."""
        record = await self.db.fetchrow(
            """
            SELECT
              *
            FROM
              users
            WHERE
              LOWER(email) = LOWER($1)
            LIMIT
              1
            """,
            email,
        )
        return User.from_record(record) if record else None

    async def exists_with_value(self, column: str, value: str) -> bool:
        """Check whether any user already uses ``value`` in ``column``."""
        if column not in UNIQUE_COLUMNS:
            raise ValueError(f"Invalid unique column: {column}")

        found = await self.db.fetchval(
            f"SELECT EXISTS (SELECT 1 FROM users WHERE LOWER({column}) = LOWER($1))",
            value,
        )
        return bool(found)

    async def create(self, values: Dict[str, Any]) -> User:
        """Insert a user and return the stored row."""
        query, params = build_insert_query("users", values)
        record = await self.db.fetchrow(query, *params)
        user = User.from_record(record)
        logger.info(f"Created user {user.id} ({user.username})")
        return user

    async def update(self, user_id: str, values: Dict[str, Any]) -> User:
        """Update the given columns of a user."""
        query, params = build_update_query("users", values)
        record = await self.db.fetchrow(query, user_id, *params)
        logger.debug(f"Updated user {user_id}: {sorted(values)}")
        return User.from_record(record)

    async def set_features(self, user_id: str, features: List[str]) -> Optional[User]:
        """Replace the feature list of a user."""
        record = await self.db.fetchrow(
            """
            UPDATE
              users
            SET
              features = $2,
              updated_at = timezone('utc', now())
            WHERE
              id = $1
            RETURNING
              *
            """,
            user_id,
            features,
        )
        return User.from_record(record) if record else None
