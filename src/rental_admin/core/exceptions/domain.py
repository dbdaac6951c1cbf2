"""Domain exceptions for input validation and lookups."""

from .base import RentalAdminError


class ValidationError(RentalAdminError):
    """Raised when input values are missing, malformed or not allowed."""

    default_message = "A validation error occurred."
    default_action = "Adjust the submitted data and try again."


class NotFoundError(RentalAdminError):
    """Raised when a requested resource does not exist."""

    default_message = "The requested resource was not found."
    default_action = "Check that the identifier is correct."
