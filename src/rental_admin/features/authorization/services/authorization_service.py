"""Feature-based authorization decisions and input filtering.

``can`` answers whether a caller holds a feature, optionally against a target
resource. Holding the bare feature is enough for resources the caller owns;
resources owned by someone else also need the derived ``action:entity:others``
grant. A denial is a ``False`` return, never an exception.

``filter_input`` narrows untrusted input to the fields a mutation feature may
write. Forbidden fields and unauthorized escalations raise instead of being
dropped, so clients cannot probe which fields are silently ignored.
"""

import logging
from collections.abc import Mapping
from typing import Any, Dict, FrozenSet, List, Optional, Tuple

from ....core.exceptions import (
    ForbiddenError,
    MissingContextError,
    UnknownFeatureError,
    ValidationError,
)
from ..entities.feature import DEFAULT_FEATURE_CATALOG, FeatureCatalog
from ..entities.field_policy import DEFAULT_FIELD_POLICIES, FieldPolicy, build_field_policies
from ..entities.protocols import resolve_owner_id
from ..entities.role import DEFAULT_ROLE_MAP, RoleMap

logger = logging.getLogger(__name__)


def _same_id(left: Any, right: Any) -> bool:
    """Compare identifiers by value so UUIDs match their string form."""
    return left == right or str(left) == str(right)


class AuthorizationService:
    """Decision engine and input filter bound to one immutable configuration."""

    def __init__(
        self,
        catalog: Optional[FeatureCatalog] = None,
        role_map: Optional[RoleMap] = None,
        field_policies: Optional[Mapping] = None,
    ):
        """Initialize with a catalog, role map and field policies.

        Args:
            catalog: Closed feature catalog (defaults to the built-in one)
            role_map: Role definitions validated against ``catalog``
            field_policies: Feature to FieldPolicy mapping for ``filter_input``
        """
        self.catalog = catalog or DEFAULT_FEATURE_CATALOG
        self.role_map = role_map or DEFAULT_ROLE_MAP
        if self.role_map.catalog is not self.catalog:
            # Re-validate roles built against a different catalog.
            self.role_map = RoleMap(
                {role: self.role_map.features_for(role) for role in self.role_map.roles()},
                self.catalog,
            )
        if field_policies is None:
            field_policies = DEFAULT_FIELD_POLICIES
        self.field_policies = build_field_policies(field_policies, self.catalog)

    def features_for(self, role: str) -> List[str]:
        """Feature list a role grants."""
        return self.role_map.features_for(role)

    def can(self, user: Any, feature: str, resource: Any = None) -> bool:
        """Decide whether ``user`` may use ``feature``, optionally on ``resource``.

        Args:
            user: Caller exposing ``id`` and a ``features`` list
            feature: Catalog feature code
            resource: Optional target whose owner is compared with the caller

        Returns:
            True when allowed, False when denied

        Raises:
            MissingContextError: user is None or has no features list
            UnknownFeatureError: feature is empty or not in the catalog
        """
        user_id, granted = self._read_principal(user)
        parsed = self.catalog.require(feature)

        if feature not in granted:
            return False

        if resource is None:
            return True

        owner_id = resolve_owner_id(resource)
        if owner_id and user_id is not None and _same_id(owner_id, user_id):
            return True

        return parsed.others().code in granted

    def filter_input(
        self,
        user: Any,
        feature: str,
        input_values: Any,
        target: Any = None,
    ) -> Dict[str, Any]:
        """Return only the fields ``feature`` may write from ``input_values``.

        Args:
            user: Caller exposing ``id`` and a ``features`` list
            feature: Mutation feature selecting the field policy
            input_values: Raw, untrusted input mapping
            target: Optional resource the mutation applies to

        Returns:
            New dict holding whitelisted keys only; empty when the caller
            cannot use ``feature`` on ``target``

        Raises:
            MissingContextError: user is None or has no features list
            UnknownFeatureError: feature unknown or without a field policy
            ValidationError: input is empty or carries a forbidden field
            ForbiddenError: a guarded field is present without its grant
        """
        self._read_principal(user)
        self.catalog.require(feature)

        if not isinstance(input_values, Mapping) or not input_values:
            raise ValidationError(
                message="No data was provided.",
                action="Send the fields you want to change and try again.",
            )

        policy = self._policy_for(feature)

        for field_name in sorted(policy.forbidden):
            if field_name in input_values:
                raise ValidationError(
                    message=f'Updating the "{field_name}" field is not allowed.',
                    action=f'Remove the "{field_name}" field from the input and try again.',
                    details={"field": field_name},
                )

        if not self.can(user, feature, target):
            logger.debug(f"Feature {feature} denied on target; input filtered to nothing")
            return {}

        if policy.exclusive:
            self._reject_mixed_fields(feature, policy.allowed, input_values)

        filtered = {
            key: value for key, value in input_values.items() if key in policy.allowed
        }

        for field_name, required_feature in policy.escalations.items():
            if field_name not in input_values:
                continue
            if not self.can(user, required_feature, target):
                raise ForbiddenError(
                    message=f'You do not have permission to set the "{field_name}" field.',
                    action=f'Check that your user holds the feature "{required_feature}".',
                    details={"field": field_name, "feature": required_feature},
                )
            filtered[field_name] = input_values[field_name]

        return filtered

    def _policy_for(self, feature: str) -> FieldPolicy:
        policy = self.field_policies.get(feature)
        if policy is None:
            raise UnknownFeatureError(
                message=f'Feature "{feature}" has no input whitelist.',
                action="Filter input with a mutation feature.",
                details={"feature": feature},
            )
        return policy

    @staticmethod
    def _reject_mixed_fields(
        feature: str,
        allowed: FrozenSet[str],
        input_values: Mapping,
    ) -> None:
        if not any(key in input_values for key in allowed):
            return
        extra = sorted(key for key in input_values if key not in allowed)
        if extra:
            raise ForbiddenError(
                message=f'Feature "{feature}" only allows changing: {", ".join(sorted(allowed))}.',
                action=f"Remove {', '.join(extra)} from the input and try again.",
                details={"feature": feature, "fields": extra},
            )

    @staticmethod
    def _read_principal(user: Any) -> Tuple[Any, Tuple[str, ...]]:
        """Extract ``(id, features)`` from a mapping or object caller."""
        if user is None:
            raise MissingContextError()

        if isinstance(user, Mapping):
            user_id = user.get("id")
            features = user.get("features")
        else:
            user_id = getattr(user, "id", None)
            features = getattr(user, "features", None)

        if not isinstance(features, (list, tuple)):
            raise MissingContextError(
                message="The user does not carry a features list.",
                action="Load the user with its features before checking permissions.",
            )
        return user_id, tuple(features)
