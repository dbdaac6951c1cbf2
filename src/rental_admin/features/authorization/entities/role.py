"""Role map: static role name to granted feature list.

Roles are configuration, not persisted state. Applying a role copies its
feature list onto a user record; only that list is stored.
"""

from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Tuple

from ....core.exceptions import UnknownFeatureError, ValidationError
from .feature import DEFAULT_FEATURE_CATALOG, FeatureCatalog

DEFAULT_USER_FEATURES = ("create:session", "read:session")

# Granted to freshly created, not yet activated accounts.
INACTIVE_USER_FEATURES = ("read:activation_token",)


class RoleMap:
    """Immutable role name to feature list mapping validated against a catalog."""

    def __init__(self, roles: Mapping[str, Iterable[str]], catalog: FeatureCatalog):
        validated: Dict[str, Tuple[str, ...]] = {}
        for role, features in roles.items():
            features = tuple(features)
            for code in features:
                if not catalog.exists(code):
                    raise UnknownFeatureError(
                        message=f'Role "{role}" grants unknown feature "{code}".',
                        action="Add the feature to the catalog or fix the role definition.",
                        details={"role": role, "feature": code},
                    )
            validated[role] = features
        self._roles = MappingProxyType(validated)
        self.catalog = catalog

    def features_for(self, role: str) -> List[str]:
        """Feature list granted by a role, in declaration order."""
        if role not in self._roles:
            raise ValidationError(
                message=f'Role "{role}" does not exist.',
                action=f"Choose one of: {', '.join(self.roles())}.",
                details={"role": role},
            )
        return list(self._roles[role])

    def roles(self) -> List[str]:
        return list(self._roles)

    def __contains__(self, role: object) -> bool:
        return role in self._roles

    def __repr__(self) -> str:
        return f"RoleMap(roles={self.roles()})"


DEFAULT_ROLES = {
    "anonymous": [
        "read:activation_token",
        "create:session",
        "create:user",
    ],
    "customer": [
        *DEFAULT_USER_FEATURES,
        "read:user",
        "update:user",
        "create:orders",
        "read:orders:self",
        "update:orders",
    ],
    "admin": [
        *DEFAULT_USER_FEATURES,
        "create:user",
        "read:user",
        "read:user:others",
        "update:user",
        "update:user:others",
        "create:devices",
        "read:devices",
        "update:devices",
        "update:devices:status",
        "delete:devices",
        "create:orders",
        "create:orders:status",
        "create:orders:others",
        "read:orders",
        "update:orders",
        "update:orders:others",
        "update:orders:status",
        "delete:orders",
        "delete:orders:completed",
        "create:financialexpenses",
        "read:financialexpenses",
        "update:financialexpenses",
        "delete:financialexpenses",
    ],
    "manager": [
        *DEFAULT_USER_FEATURES,
        "create:user",
        "read:user",
        "read:user:others",
        "create:devices",
        "read:devices",
        "update:devices",
        "update:devices:status",
        "create:orders",
        "create:orders:status",
        "create:orders:others",
        "read:orders",
        "update:orders",
        "update:orders:others",
        "update:orders:status",
        "create:financialexpenses",
        "read:financialexpenses",
        "update:financialexpenses",
    ],
    "operator": [
        *DEFAULT_USER_FEATURES,
        "read:devices",
        "update:devices:status",
        "read:orders",
    ],
    "support": [
        *DEFAULT_USER_FEATURES,
        "read:devices",
        "read:orders",
        "read:user",
        "read:user:others",
    ],
}

DEFAULT_ROLE_MAP = RoleMap(DEFAULT_ROLES, DEFAULT_FEATURE_CATALOG)
