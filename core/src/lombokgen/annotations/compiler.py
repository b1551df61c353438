"""Compiles the host's flat configuration into a feature selection.

Configuration shape:
    ``<featureKey>``              ``"true"``/``"false"`` (any case) toggles a feature
    ``<featureKey>.<optionKey>``  option value for an enabled feature
    anything else                 ignored

The compiler never fails on configuration content. Unknown keys, values
other than ``true`` and options of disabled features are skipped and only
reported at DEBUG level.
"""

import logging
from collections.abc import Mapping
from typing import Any, Optional

from lombokgen.annotations.quoting import format_option
from lombokgen.annotations.registry import (
    DEFAULT_FEATURE,
    Feature,
    FeatureRegistry,
    get_default_registry,
)
from lombokgen.annotations.selection import FeatureSelection
from lombokgen.common.exceptions import validation_error
from lombokgen.utils.decorators import traced


logger = logging.getLogger(__name__)

OPTION_SEPARATOR = "."


def _as_text(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _parse_boolean(value: Any) -> bool:
    return _as_text(value).lower() == "true"


def _compile_attributes(self, properties, *args, **kwargs):
    return {"lombokgen.property_count": len(properties) if isinstance(properties, Mapping) else 0}


class ConfigurationCompiler:
    """Turns a flat string mapping into a frozen, dependency-closed FeatureSelection.

    Args:
        registry: Feature catalog to resolve keys against. Defaults to the
            built-in Lombok catalog.
        default_feature: Feature selected unconditionally, first.
    """

    def __init__(
        self,
        registry: Optional[FeatureRegistry] = None,
        default_feature: Feature = DEFAULT_FEATURE,
    ):
        self.registry = registry or get_default_registry()
        self.default_feature = default_feature

    @traced("lombokgen.compile", attribute_getter=_compile_attributes)
    def compile(self, properties: Mapping) -> FeatureSelection:
        """Compile a configuration mapping.

        Features are selected in the order their keys appear in the mapping,
        after the default feature. Options keep the order of their keys too.
        Each enabled feature pulls in its dependencies right after itself;
        a feature already present keeps its earlier position.

        Args:
            properties: Flat mapping of configuration key to value

        Returns:
            Frozen FeatureSelection, always containing the default feature

        Raises:
            LombokGenError: If ``properties`` is not a mapping
        """
        if not isinstance(properties, Mapping):
            raise validation_error(
                "Plugin configuration must be a mapping of string keys to string values",
                field="properties",
                value=type(properties).__name__,
            )

        selection = FeatureSelection()
        selection.add(self.default_feature)

        for key, value in properties.items():
            key = str(key)
            if OPTION_SEPARATOR in key:
                continue

            feature = self.registry.get(key)
            if feature is None:
                logger.debug(f"Ignoring unrecognized configuration key '{key}'")
                continue

            if not _parse_boolean(value):
                logger.debug(f"Feature '{feature.key}' is disabled (value: {value!r})")
                continue

            selection.add(feature)
            self._apply_options(selection, feature, key, properties)

            for dependency in self.registry.resolve_dependencies(feature):
                if dependency not in selection:
                    logger.debug(f"Adding '{dependency.key}' required by '{feature.key}'")
                selection.add(dependency)

        selection.freeze()
        logger.info(
            f"Compiled annotation selection: {', '.join(selection.annotations())}",
            extra={"features": selection.keys()},
        )
        return selection

    def _apply_options(
        self,
        selection: FeatureSelection,
        feature: Feature,
        key: str,
        properties: Mapping,
    ) -> None:
        prefix = key + OPTION_SEPARATOR
        for property_name, property_value in properties.items():
            property_name = str(property_name)
            if not property_name.startswith(prefix):
                continue
            option_key = property_name[property_name.index(OPTION_SEPARATOR) + 1:]
            selection.add_option(feature, format_option(option_key, _as_text(property_value)))


def compile_configuration(
    properties: Mapping,
    registry: Optional[FeatureRegistry] = None,
) -> FeatureSelection:
    """Compile a configuration mapping with a one-off compiler."""
    return ConfigurationCompiler(registry).compile(properties)
