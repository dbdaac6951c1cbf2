"""Tests for feature tokens, the catalog and the role map."""

import pytest

from rental_admin.core.exceptions import UnknownFeatureError, ValidationError
from rental_admin.features.authorization import (
    DEFAULT_FEATURE_CATALOG,
    DEFAULT_ROLE_MAP,
    DEFAULT_USER_FEATURES,
    Feature,
    FeatureCatalog,
    RoleMap,
)


class TestFeature:
    """Tests for the Feature value type."""

    def test_parse_two_segments(self):
        feature = Feature.parse("read:devices")

        assert feature.action == "read"
        assert feature.entity == "devices"
        assert feature.qualifier is None
        assert feature.code == "read:devices"

    def test_parse_qualified(self):
        feature = Feature.parse("update:devices:status")

        assert feature.qualifier == "status"
        assert feature.code == "update:devices:status"

    def test_others_drops_qualifier(self):
        """The ownership escalation is derived from action and entity only."""
        assert Feature.parse("update:orders").others().code == "update:orders:others"
        assert Feature.parse("update:devices:status").others().code == "update:devices:others"

    @pytest.mark.parametrize("token", ["", "read", "read:", "a:b:c:d", "Read:devices", "read:dev ices"])
    def test_malformed_tokens_rejected(self, token):
        with pytest.raises(UnknownFeatureError):
            Feature.parse(token)

    def test_is_hashable_value(self):
        assert Feature.parse("read:user") == Feature("read", "user")
        assert len({Feature.parse("read:user"), Feature("read", "user")}) == 1


class TestFeatureCatalog:
    """Tests for the closed feature catalog."""

    def test_default_catalog_contains_base_and_added_tokens(self):
        for code in (
            "create:user",
            "read:user:others",
            "update:devices:status",
            "delete:orders:completed",
            "update:user:others",
            "create:orders:others",
        ):
            assert code in DEFAULT_FEATURE_CATALOG

    def test_exists(self):
        assert DEFAULT_FEATURE_CATALOG.exists("read:devices")
        assert not DEFAULT_FEATURE_CATALOG.exists("bogus:feature")
        assert not DEFAULT_FEATURE_CATALOG.exists("")

    def test_require_returns_feature(self):
        feature = DEFAULT_FEATURE_CATALOG.require("create:orders:status")

        assert feature == Feature("create", "orders", "status")

    @pytest.mark.parametrize("code", ["bogus:feature", "", None])
    def test_require_unknown_raises(self, code):
        with pytest.raises(UnknownFeatureError):
            DEFAULT_FEATURE_CATALOG.require(code)

    def test_iteration_is_sorted_and_sized(self):
        catalog = FeatureCatalog(["read:user", "create:user"])

        assert list(catalog) == ["create:user", "read:user"]
        assert len(catalog) == 2

    def test_malformed_code_fails_at_construction(self):
        with pytest.raises(UnknownFeatureError):
            FeatureCatalog(["read:user", "not-a-feature"])


class TestRoleMap:
    """Tests for role definitions."""

    def test_anonymous_role(self):
        assert sorted(DEFAULT_ROLE_MAP.features_for("anonymous")) == [
            "create:session",
            "create:user",
            "read:activation_token",
        ]

    def test_roles_include_baseline(self):
        for role in ("customer", "admin", "manager", "operator", "support"):
            features = DEFAULT_ROLE_MAP.features_for(role)
            for code in DEFAULT_USER_FEATURES:
                assert code in features

    def test_features_for_returns_fresh_list(self):
        features = DEFAULT_ROLE_MAP.features_for("customer")
        features.append("delete:devices")

        assert "delete:devices" not in DEFAULT_ROLE_MAP.features_for("customer")

    def test_unknown_role_raises(self):
        with pytest.raises(ValidationError):
            DEFAULT_ROLE_MAP.features_for("superuser")

    def test_role_with_unknown_feature_rejected(self):
        with pytest.raises(UnknownFeatureError):
            RoleMap({"broken": ["read:user", "fly:spaceship"]}, DEFAULT_FEATURE_CATALOG)

    def test_every_role_feature_is_in_catalog(self):
        for role in DEFAULT_ROLE_MAP.roles():
            for code in DEFAULT_ROLE_MAP.features_for(role):
                assert DEFAULT_FEATURE_CATALOG.exists(code)
