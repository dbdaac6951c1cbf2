"""Protocols the authorization core consumes from collaborators."""

from collections.abc import Mapping
from typing import Any, List, Optional, Protocol, runtime_checkable

# Priority order used for resources that do not declare their owner.
OWNER_FIELDS = ("user_id", "owner_id", "created_by", "id")


@runtime_checkable
class OwnerIdentifiable(Protocol):
    """A resource that knows which user owns it."""

    def get_owner_id(self) -> Optional[Any]:
        """Identifier of the owning user, or None for unowned resources."""
        ...


@runtime_checkable
class Principal(Protocol):
    """Minimal caller shape: an id and the granted feature list."""

    id: Any
    features: List[str]


def resolve_owner_id(resource: Any) -> Optional[Any]:
    """Find the owner identifier of a resource.

    Resources implementing OwnerIdentifiable answer for themselves. Mappings
    and plain objects fall back to the first truthy value among
    ``user_id``, ``owner_id``, ``created_by`` and ``id``.
    """
    if isinstance(resource, OwnerIdentifiable):
        return resource.get_owner_id()

    for field in OWNER_FIELDS:
        if isinstance(resource, Mapping):
            value = resource.get(field)
        else:
            value = getattr(resource, field, None)
        if value:
            return value
    return None
