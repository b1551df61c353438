"""Base class for code-generator plugins.

The host generator calls ``set_properties`` once with the plugin's flat
configuration and then invokes a checkpoint hook for every artifact it
generates. A hook returning False tells the host to drop that artifact.
"""

from collections.abc import Mapping
from typing import Any, Dict, List, Optional

from lombokgen.common.exceptions import validation_error
from lombokgen.types.generated import Interface, Method, ModelClassType, TopLevelClass


class PluginAdapter:
    """Plugin with pass-through checkpoint hooks.

    Every hook accepts the generated artifact and keeps it (returns True).
    Subclasses override only the checkpoints they care about.
    """

    def __init__(self):
        self.properties: Dict[str, str] = {}

    def set_properties(self, properties: Mapping[str, str]) -> None:
        """Store a copy of the plugin configuration.

        Raises:
            LombokGenError: If ``properties`` is not a mapping
        """
        if not isinstance(properties, Mapping):
            raise validation_error(
                "Plugin configuration must be a mapping of string keys to string values",
                field="properties",
                value=type(properties).__name__,
            )
        self.properties = dict(properties)

    def validate(self, warnings: List[str]) -> bool:
        """Check the configuration; append messages to ``warnings`` on problems.

        Returns:
            False if the plugin should be disabled for this run
        """
        return True

    def model_base_record_class_generated(
        self,
        top_level_class: TopLevelClass,
        introspected_table: Optional[Any] = None,
    ) -> bool:
        return True

    def model_primary_key_class_generated(
        self,
        top_level_class: TopLevelClass,
        introspected_table: Optional[Any] = None,
    ) -> bool:
        return True

    def model_record_with_blobs_class_generated(
        self,
        top_level_class: TopLevelClass,
        introspected_table: Optional[Any] = None,
    ) -> bool:
        return True

    def model_getter_method_generated(
        self,
        method: Method,
        top_level_class: TopLevelClass,
        introspected_column: Optional[Any] = None,
        introspected_table: Optional[Any] = None,
        model_class_type: Optional[ModelClassType] = None,
    ) -> bool:
        return True

    def model_setter_method_generated(
        self,
        method: Method,
        top_level_class: TopLevelClass,
        introspected_column: Optional[Any] = None,
        introspected_table: Optional[Any] = None,
        model_class_type: Optional[ModelClassType] = None,
    ) -> bool:
        return True

    def client_generated(
        self,
        interface: Interface,
        top_level_class: Optional[TopLevelClass] = None,
        introspected_table: Optional[Any] = None,
    ) -> bool:
        return True
