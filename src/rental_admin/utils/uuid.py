"""UUID utilities."""

import uuid
from typing import Any


def is_valid_uuid(value: Any) -> bool:
    """
    Check if a value is a valid UUID or UUID string.

    Args:
        value: Value to validate

    Returns:
        True if valid UUID, False otherwise
    """
    if isinstance(value, uuid.UUID):
        return True
    try:
        uuid.UUID(str(value))
        return True
    except (ValueError, TypeError):
        return False
