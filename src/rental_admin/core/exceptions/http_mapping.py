"""HTTP status code mapping for exceptions."""

from typing import Dict, Type

from .auth import ForbiddenError, MissingContextError, UnauthorizedError, UnknownFeatureError
from .base import RentalAdminError
from .domain import NotFoundError, ValidationError


HTTP_STATUS_MAP: Dict[Type[Exception], int] = {
    # 400 Bad Request
    ValidationError: 400,
    MissingContextError: 400,
    UnknownFeatureError: 400,

    # 401 Unauthorized
    UnauthorizedError: 401,

    # 403 Forbidden
    ForbiddenError: 403,

    # 404 Not Found
    NotFoundError: 404,

    # Default for RentalAdminError
    RentalAdminError: 500,
}


def get_http_status_code(exception: Exception) -> int:
    """Resolve the status code by walking the exception's MRO."""
    for exception_type in type(exception).__mro__:
        if exception_type in HTTP_STATUS_MAP:
            return HTTP_STATUS_MAP[exception_type]
    return 500
