"""Session entities."""

from .session import Session
from .protocols import SessionRepository

__all__ = ["Session", "SessionRepository"]
