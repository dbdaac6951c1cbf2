"""Feature-flag authorization for the rental admin backend.

Module-level ``can``, ``filter_input`` and ``features_for`` delegate to a
default AuthorizationService built from the built-in catalog, role map and
field policies. Construct an AuthorizationService directly to use a
different configuration.
"""

from typing import Any, Dict, List

from .entities import (
    DEFAULT_FEATURE_CATALOG,
    DEFAULT_FIELD_POLICIES,
    DEFAULT_ROLE_MAP,
    DEFAULT_USER_FEATURES,
    INACTIVE_USER_FEATURES,
    Feature,
    FeatureCatalog,
    FieldPolicy,
    OwnerIdentifiable,
    Principal,
    RoleMap,
    resolve_owner_id,
)
from .services import AuthorizationService

default_authorization = AuthorizationService()


def can(user: Any, feature: str, resource: Any = None) -> bool:
    """Decide a feature check with the default configuration."""
    return default_authorization.can(user, feature, resource)


def filter_input(user: Any, feature: str, input_values: Any, target: Any = None) -> Dict[str, Any]:
    """Filter input with the default configuration."""
    return default_authorization.filter_input(user, feature, input_values, target)


def features_for(role: str) -> List[str]:
    """Feature list for a role in the default configuration."""
    return default_authorization.features_for(role)


__all__ = [
    "AuthorizationService",
    "default_authorization",
    "can",
    "filter_input",
    "features_for",
    "Feature",
    "FeatureCatalog",
    "RoleMap",
    "FieldPolicy",
    "OwnerIdentifiable",
    "Principal",
    "resolve_owner_id",
    "DEFAULT_FEATURE_CATALOG",
    "DEFAULT_ROLE_MAP",
    "DEFAULT_FIELD_POLICIES",
    "DEFAULT_USER_FEATURES",
    "INACTIVE_USER_FEATURES",
]
