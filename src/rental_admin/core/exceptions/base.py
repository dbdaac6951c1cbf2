"""Base exceptions for rental-admin.

All exceptions inherit from RentalAdminError and carry a message, a
suggested action for the client, an error code and optional details.
HTTP status codes are resolved separately in ``http_mapping``.
"""

from typing import Any, Dict, Optional


class RentalAdminError(Exception):
    """Base exception for all rental-admin errors."""

    default_message = "An unexpected error occurred."
    default_action = "Contact support if the problem persists."

    def __init__(
        self,
        message: Optional[str] = None,
        action: Optional[str] = None,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.message = message or self.default_message
        super().__init__(self.message)
        self.action = action or self.default_action
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}

    @property
    def status_code(self) -> int:
        """HTTP status code for this error."""
        return get_http_status_code(self)

    def to_dict(self) -> Dict[str, Any]:
        """Render the error for API responses."""
        data = {
            "name": self.__class__.__name__,
            "message": self.message,
            "action": self.action,
            "status_code": self.status_code,
        }
        if self.details:
            data["details"] = self.details
        return data


def get_http_status_code(exception: Exception) -> int:
    """Get HTTP status code for an exception.

    Args:
        exception: The exception instance

    Returns:
        HTTP status code
    """
    from .http_mapping import get_http_status_code as resolve_status_code
    return resolve_status_code(exception)
