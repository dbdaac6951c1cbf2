"""User entities."""

from .user import AnonymousUser, User
from .protocols import UserRepository

__all__ = ["User", "AnonymousUser", "UserRepository"]
