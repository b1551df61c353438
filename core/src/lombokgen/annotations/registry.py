"""Feature registry for the Lombok annotations the plugin can attach.

This module holds the catalog of annotation features: their configuration
keys, the annotation literal they render as, the import they need, and the
features they depend on. The catalog is fixed once built; only a per-run
selection (see ``lombokgen.annotations.selection``) varies between runs.
"""

from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, List, Optional, Tuple
import logging

from lombokgen.common.exceptions import ErrorCode, feature_registration_error


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Feature:
    """One optionally-enabled annotation.

    Attributes:
        key: Configuration key that enables the feature (matched case-insensitively)
        name: Annotation literal without options, e.g. ``@Builder``
        import_type: Fully-qualified type imported by the generated source
        dependencies: Keys of features that must be selected alongside this one
    """

    key: str
    name: str
    import_type: str
    dependencies: Tuple[str, ...] = ()

    @property
    def lookup_key(self) -> str:
        return self.key.lower()


class FeatureRegistry:
    """Ordered catalog of annotation features.

    Features keep their registration order, which is the order used when
    iterating the catalog. Once ``freeze()`` is called no feature can be
    added, so the catalog stays fixed for the lifetime of the process.

    Example:
        >>> registry = FeatureRegistry()
        >>> registry.register(Feature("data", "@Data", "lombok.Data"))
        >>> registry.freeze()
        >>> registry.get("DATA").name
        '@Data'
    """

    def __init__(self, features: Iterable[Feature] = ()):
        self._features: Dict[str, Feature] = {}
        self._frozen: bool = False
        for feature in features:
            self.register(feature)

    def register(self, feature: Feature) -> None:
        """Add a feature to the catalog.

        Args:
            feature: The feature to register

        Raises:
            LombokGenError: If the registry is frozen or a feature with the
                same key (ignoring case) is already registered
        """
        if self._frozen:
            raise feature_registration_error(
                feature.key,
                f"Cannot register feature '{feature.key}': the registry is frozen",
            )
        if feature.lookup_key in self._features:
            raise feature_registration_error(
                feature.key,
                f"Feature '{feature.key}' is already registered",
                error_code=ErrorCode.DUPLICATE_FEATURE,
            )

        self._features[feature.lookup_key] = feature
        logger.debug(f"Registered feature: {feature.key} -> {feature.import_type}")

    def freeze(self) -> "FeatureRegistry":
        self._frozen = True
        return self

    @property
    def is_frozen(self) -> bool:
        return self._frozen

    def get(self, key: str) -> Optional[Feature]:
        """Find the feature for a configuration key, ignoring case.

        Args:
            key: Configuration key as written by the user

        Returns:
            The matching Feature, or None if the catalog has no such key
        """
        return self._features.get(key.lower())

    def get_dependencies(self, feature: Feature) -> List[Feature]:
        """Return the direct dependencies of a feature, in declared order."""
        dependencies = []
        for key in feature.dependencies:
            dependency = self.get(key)
            if dependency is None:
                logger.warning(
                    f"Feature '{feature.key}' depends on unknown feature '{key}', skipping"
                )
                continue
            dependencies.append(dependency)
        return dependencies

    def resolve_dependencies(self, feature: Feature) -> List[Feature]:
        """Return every feature reachable through the dependency graph.

        Dependencies are listed depth-first in declared order, each once.
        The feature itself is never part of the result, even on a cycle.
        """
        resolved: List[Feature] = []
        seen = {feature.lookup_key}
        pending = list(reversed(self.get_dependencies(feature)))
        while pending:
            dependency = pending.pop()
            if dependency.lookup_key in seen:
                continue
            seen.add(dependency.lookup_key)
            resolved.append(dependency)
            pending.extend(reversed(self.get_dependencies(dependency)))
        return resolved

    def features(self) -> List[Feature]:
        return list(self._features.values())

    def __iter__(self) -> Iterator[Feature]:
        return iter(self._features.values())

    def __len__(self) -> int:
        return len(self._features)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and key.lower() in self._features


DATA = Feature("data", "@Data", "lombok.Data")
BUILDER = Feature("builder", "@Builder", "lombok.Builder")
ALL_ARGS_CONSTRUCTOR = Feature(
    "allArgsConstructor",
    "@AllArgsConstructor",
    "lombok.AllArgsConstructor",
    dependencies=("noArgsConstructor",),
)
NO_ARGS_CONSTRUCTOR = Feature("noArgsConstructor", "@NoArgsConstructor", "lombok.NoArgsConstructor")
ACCESSORS = Feature("accessors", "@Accessors", "lombok.experimental.Accessors")
TO_STRING = Feature("toString", "@ToString", "lombok.ToString")

# Always selected, whatever the configuration says
DEFAULT_FEATURE = DATA

_default_registry = FeatureRegistry(
    [DATA, BUILDER, ALL_ARGS_CONSTRUCTOR, NO_ARGS_CONSTRUCTOR, ACCESSORS, TO_STRING]
).freeze()


def get_default_registry() -> FeatureRegistry:
    """Return the built-in, frozen six-feature catalog."""
    return _default_registry
