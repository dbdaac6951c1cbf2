"""Feature value object and the closed feature catalog.

A feature is a capability token ``action:entity`` or
``action:entity:qualifier``. Tokens are parsed once when the catalog is
built, so request-time checks only compare strings.
"""

import re
from dataclasses import dataclass
from typing import FrozenSet, Iterable, Iterator, Optional

from ....core.exceptions import UnknownFeatureError

OTHERS_QUALIFIER = "others"

_SEGMENT = re.compile(r"^[a-z_]+$")


@dataclass(frozen=True)
class Feature:
    """Immutable capability token with validation."""

    action: str
    entity: str
    qualifier: Optional[str] = None

    def __post_init__(self):
        """Validate every segment of the token."""
        segments = [self.action, self.entity]
        if self.qualifier is not None:
            segments.append(self.qualifier)
        for segment in segments:
            if not segment or not _SEGMENT.match(segment):
                raise UnknownFeatureError(
                    message=f'Malformed feature segment "{segment}".',
                    action="Features must look like action:entity or action:entity:qualifier.",
                )

    @classmethod
    def parse(cls, code: str) -> "Feature":
        """Build a feature from its string form."""
        if not isinstance(code, str) or not code:
            raise UnknownFeatureError(
                message="Feature must be a non-empty string.",
                details={"feature": code},
            )
        parts = code.split(":")
        if len(parts) not in (2, 3):
            raise UnknownFeatureError(
                message=f'Malformed feature "{code}".',
                action="Features must look like action:entity or action:entity:qualifier.",
                details={"feature": code},
            )
        return cls(*parts)

    @property
    def code(self) -> str:
        """String form used for storage and comparison."""
        if self.qualifier is None:
            return f"{self.action}:{self.entity}"
        return f"{self.action}:{self.entity}:{self.qualifier}"

    def others(self) -> "Feature":
        """The ``:others`` escalation derived from action and entity.

        Any qualifier is dropped, so ``update:devices:status`` escalates to
        ``update:devices:others``.
        """
        return Feature(self.action, self.entity, OTHERS_QUALIFIER)

    def __str__(self) -> str:
        return self.code


class FeatureCatalog:
    """Closed, immutable set of valid features."""

    def __init__(self, codes: Iterable[str]):
        features = {}
        for code in codes:
            feature = Feature.parse(code)
            features[feature.code] = feature
        self._features = features
        self._codes: FrozenSet[str] = frozenset(features)

    def exists(self, code: str) -> bool:
        """Membership test for a feature string."""
        return isinstance(code, str) and code in self._codes

    def require(self, code: str) -> Feature:
        """Return the parsed feature or raise UnknownFeatureError."""
        if not isinstance(code, str) or not code:
            raise UnknownFeatureError(
                message="Feature must be a non-empty string.",
                details={"feature": code},
            )
        feature = self._features.get(code)
        if feature is None:
            raise UnknownFeatureError(
                message=f'Feature "{code}" does not exist.',
                details={"feature": code},
            )
        return feature

    @property
    def codes(self) -> FrozenSet[str]:
        return self._codes

    def __contains__(self, code: object) -> bool:
        return isinstance(code, str) and code in self._codes

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._codes))

    def __len__(self) -> int:
        return len(self._codes)

    def __repr__(self) -> str:
        return f"FeatureCatalog(features={len(self._codes)})"


DEFAULT_FEATURES = (
    # USER
    "create:user",
    "read:user",
    "read:user:self",
    "read:user:others",
    "update:user",
    "update:user:others",

    # ACTIVATION_TOKEN
    "read:activation_token",

    # SESSION
    "create:session",
    "read:session",

    # DEVICES
    "create:devices",
    "read:devices",
    "update:devices",
    "update:devices:status",
    "delete:devices",

    # FINANCIAL EXPENSES
    "create:financialexpenses",
    "read:financialexpenses",
    "update:financialexpenses",
    "delete:financialexpenses",

    # CUSTOMER ORDERS
    "create:orders",
    "create:orders:status",
    "create:orders:others",
    "read:orders",
    "read:orders:self",
    "update:orders",
    "update:orders:others",
    "update:orders:self",
    "update:orders:status",
    "delete:orders",
    "delete:orders:completed",
)

DEFAULT_FEATURE_CATALOG = FeatureCatalog(DEFAULT_FEATURES)
