"""Session repositories."""

from .session_repository import SessionDatabaseRepository

__all__ = ["SessionDatabaseRepository"]
