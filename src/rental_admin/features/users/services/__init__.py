"""User services."""

from .password import PasswordHasher
from .user_service import UserService

__all__ = ["PasswordHasher", "UserService"]
