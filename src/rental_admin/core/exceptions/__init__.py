"""Exception hierarchy for rental-admin."""

from .base import RentalAdminError, get_http_status_code
from .auth import (
    ForbiddenError,
    MissingContextError,
    UnauthorizedError,
    UnknownFeatureError,
)
from .domain import NotFoundError, ValidationError
from .http_mapping import HTTP_STATUS_MAP

__all__ = [
    "RentalAdminError",
    "get_http_status_code",
    "MissingContextError",
    "UnknownFeatureError",
    "ForbiddenError",
    "UnauthorizedError",
    "ValidationError",
    "NotFoundError",
    "HTTP_STATUS_MAP",
]
