"""Authorization exceptions.

MissingContextError and UnknownFeatureError flag caller bugs (no user, a
typo'd feature). ForbiddenError is a permission denial raised while
filtering input or by request handlers translating a ``can()`` refusal.
"""

from .base import RentalAdminError


class MissingContextError(RentalAdminError):
    """Raised when the caller is absent or carries no features list."""

    default_message = "No authenticated user context was provided."
    default_action = "Resolve the current user before checking features."


class UnknownFeatureError(RentalAdminError):
    """Raised when a feature is empty or not part of the catalog."""

    default_message = "The requested feature does not exist."
    default_action = "Check the feature name against the feature catalog."


class ForbiddenError(RentalAdminError):
    """Raised when the caller lacks the feature required for an action."""

    default_message = "You do not have permission to perform this action."
    default_action = "Check that your user holds the required feature."


class UnauthorizedError(RentalAdminError):
    """Raised when a session is missing, invalid or expired."""

    default_message = "User does not have an active session."
    default_action = "Check that this user is logged in and try again."
