"""User repositories."""

from .user_repository import UserDatabaseRepository

__all__ = ["UserDatabaseRepository"]
