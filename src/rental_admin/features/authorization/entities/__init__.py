"""Authorization entities: features, roles, field policies and protocols."""

from .feature import (
    DEFAULT_FEATURE_CATALOG,
    DEFAULT_FEATURES,
    OTHERS_QUALIFIER,
    Feature,
    FeatureCatalog,
)
from .role import (
    DEFAULT_ROLE_MAP,
    DEFAULT_ROLES,
    DEFAULT_USER_FEATURES,
    INACTIVE_USER_FEATURES,
    RoleMap,
)
from .field_policy import (
    DEFAULT_FIELD_POLICIES,
    FieldPolicy,
    build_field_policies,
)
from .protocols import OWNER_FIELDS, OwnerIdentifiable, Principal, resolve_owner_id

__all__ = [
    "Feature",
    "FeatureCatalog",
    "DEFAULT_FEATURES",
    "DEFAULT_FEATURE_CATALOG",
    "OTHERS_QUALIFIER",
    "RoleMap",
    "DEFAULT_ROLES",
    "DEFAULT_ROLE_MAP",
    "DEFAULT_USER_FEATURES",
    "INACTIVE_USER_FEATURES",
    "FieldPolicy",
    "DEFAULT_FIELD_POLICIES",
    "build_field_policies",
    "OwnerIdentifiable",
    "Principal",
    "OWNER_FIELDS",
    "resolve_owner_id",
]
