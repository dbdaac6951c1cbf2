"""Field whitelists tying mutation features to the fields they may write."""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import FrozenSet, Mapping

from ....core.exceptions import UnknownFeatureError
from .feature import DEFAULT_FEATURE_CATALOG, FeatureCatalog

TIMESTAMP_FIELDS = frozenset({"id", "created_at", "updated_at"})


@dataclass(frozen=True)
class FieldPolicy:
    """Which input fields a feature may set.

    Attributes:
        allowed: Fields copied through when present in the input.
        forbidden: Fields whose presence is rejected with a ValidationError.
        escalations: Field to feature; the field is copied only if the caller
            also holds that feature, otherwise ForbiddenError is raised.
        exclusive: When True, the allowed fields may not be mixed with any
            other key in the same input.
    """

    allowed: FrozenSet[str]
    forbidden: FrozenSet[str] = frozenset()
    escalations: Mapping[str, str] = field(default_factory=dict)
    exclusive: bool = False

    def __post_init__(self):
        object.__setattr__(self, "allowed", frozenset(self.allowed))
        object.__setattr__(self, "forbidden", frozenset(self.forbidden))
        object.__setattr__(self, "escalations", MappingProxyType(dict(self.escalations)))

    @property
    def writable(self) -> FrozenSet[str]:
        """Every field that may appear in a filtered result."""
        return self.allowed | frozenset(self.escalations)


def build_field_policies(
    policies: Mapping[str, FieldPolicy],
    catalog: FeatureCatalog,
) -> Mapping[str, FieldPolicy]:
    """Validate that every policy key and escalation names a catalog feature."""
    for code, policy in policies.items():
        for referenced in (code, *policy.escalations.values()):
            if not catalog.exists(referenced):
                raise UnknownFeatureError(
                    message=f'Field policy references unknown feature "{referenced}".',
                    details={"feature": referenced},
                )
    return MappingProxyType(dict(policies))


DEVICE_FIELDS = frozenset({
    "email_acc",
    "utid_device",
    "serial_number",
    "serial_number_router",
    "model",
    "provider",
    "tracker_code",
    "status",
    "notes",
})

ORDER_FIELDS = frozenset({
    "customer_id",
    "start_date",
    "end_date",
    "notes",
    "location_refer",
    "lat",
    "lng",
})

EXPENSE_FIELDS = frozenset({
    "description",
    "amount_in_cents",
    "category",
    "paid_at",
    "due_date_at",
})

USER_FIELDS = frozenset({
    "username",
    "email",
    "password",
    "cpf",
    "phone",
    "address",
    "notes",
})

DEFAULT_POLICIES = {
    "update:devices:status": FieldPolicy(allowed={"status"}, exclusive=True),
    "update:devices": FieldPolicy(allowed=DEVICE_FIELDS, forbidden=TIMESTAMP_FIELDS),
    "create:devices": FieldPolicy(allowed=DEVICE_FIELDS, forbidden=TIMESTAMP_FIELDS),
    "create:orders:status": FieldPolicy(allowed=ORDER_FIELDS | {"status"}),
    "create:orders": FieldPolicy(
        allowed=ORDER_FIELDS,
        escalations={"status": "create:orders:status"},
    ),
    "update:orders": FieldPolicy(
        allowed=ORDER_FIELDS - {"customer_id"},
        forbidden=TIMESTAMP_FIELDS,
        escalations={"status": "update:orders:status"},
    ),
    "update:orders:status": FieldPolicy(allowed={"status"}, exclusive=True),
    "create:financialexpenses": FieldPolicy(allowed=EXPENSE_FIELDS, forbidden=TIMESTAMP_FIELDS),
    "update:financialexpenses": FieldPolicy(allowed=EXPENSE_FIELDS, forbidden=TIMESTAMP_FIELDS),
    "create:user": FieldPolicy(allowed=USER_FIELDS, forbidden=TIMESTAMP_FIELDS | {"features"}),
    "update:user": FieldPolicy(allowed=USER_FIELDS, forbidden=TIMESTAMP_FIELDS | {"features"}),
}

DEFAULT_FIELD_POLICIES = build_field_policies(DEFAULT_POLICIES, DEFAULT_FEATURE_CATALOG)
