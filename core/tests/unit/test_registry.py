"""Unit tests for the feature registry."""

import pytest

from lombokgen.annotations.registry import (
    ALL_ARGS_CONSTRUCTOR,
    DATA,
    DEFAULT_FEATURE,
    NO_ARGS_CONSTRUCTOR,
    Feature,
    FeatureRegistry,
    get_default_registry,
)
from lombokgen.common.exceptions import ErrorCode, LombokGenError


class TestDefaultRegistry:
    """Test suite for the built-in Lombok catalog."""

    def test_catalog_has_six_features_in_declaration_order(self):
        registry = get_default_registry()
        assert [feature.key for feature in registry] == [
            "data",
            "builder",
            "allArgsConstructor",
            "noArgsConstructor",
            "accessors",
            "toString",
        ]

    def test_catalog_imports(self):
        registry = get_default_registry()
        assert registry.get("accessors").import_type == "lombok.experimental.Accessors"
        assert registry.get("toString").import_type == "lombok.ToString"

    def test_default_feature_is_data(self):
        assert DEFAULT_FEATURE is DATA
        assert DATA.name == "@Data"

    def test_lookup_is_case_insensitive(self):
        registry = get_default_registry()
        assert registry.get("ALLARGSCONSTRUCTOR") is ALL_ARGS_CONSTRUCTOR
        assert registry.get("tostring").name == "@ToString"
        assert "Builder" in registry

    def test_unknown_key_returns_none(self):
        assert get_default_registry().get("frobnicate") is None

    def test_all_args_constructor_depends_on_no_args_constructor(self):
        registry = get_default_registry()
        assert registry.get_dependencies(ALL_ARGS_CONSTRUCTOR) == [NO_ARGS_CONSTRUCTOR]
        assert registry.get_dependencies(DATA) == []

    def test_default_registry_is_frozen(self):
        """Test that the built-in catalog rejects new features."""
        registry = get_default_registry()
        assert registry.is_frozen
        with pytest.raises(LombokGenError) as exc_info:
            registry.register(Feature("value", "@Value", "lombok.Value"))
        assert exc_info.value.error_code == ErrorCode.REGISTRY_FROZEN
        assert len(registry) == 6


class TestFeatureRegistry:
    """Test suite for custom registries."""

    def test_duplicate_key_is_rejected_ignoring_case(self):
        registry = FeatureRegistry([Feature("value", "@Value", "lombok.Value")])
        with pytest.raises(LombokGenError) as exc_info:
            registry.register(Feature("VALUE", "@Value", "lombok.Value"))
        assert exc_info.value.error_code == ErrorCode.DUPLICATE_FEATURE

    def test_transitive_dependencies_are_resolved(self):
        """Test multi-level dependency resolution in declared order."""
        registry = FeatureRegistry([
            Feature("a", "@A", "x.A", dependencies=("b", "c")),
            Feature("b", "@B", "x.B", dependencies=("d",)),
            Feature("c", "@C", "x.C"),
            Feature("d", "@D", "x.D"),
        ])
        resolved = registry.resolve_dependencies(registry.get("a"))
        assert [feature.key for feature in resolved] == ["b", "d", "c"]

    def test_dependency_cycle_terminates(self):
        registry = FeatureRegistry([
            Feature("a", "@A", "x.A", dependencies=("b",)),
            Feature("b", "@B", "x.B", dependencies=("a",)),
        ])
        assert [feature.key for feature in registry.resolve_dependencies(registry.get("a"))] == ["b"]

    def test_unknown_dependency_is_skipped(self):
        registry = FeatureRegistry([Feature("a", "@A", "x.A", dependencies=("missing",))])
        assert registry.get_dependencies(registry.get("a")) == []

    def test_features_are_immutable(self):
        with pytest.raises(AttributeError):
            DATA.name = "@Value"
