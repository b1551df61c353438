"""Plugin that replaces generated accessors with Lombok annotations.

Configuration example (the host's plugin properties)::

    builder=true
    builder.toBuilder=true
    allArgsConstructor=true
    accessors=true
    accessors.prefix=m,_

Every generated model class then receives ``@Data`` plus the enabled
annotations, for the example above::

    @Data
    @Builder(toBuilder=true)
    @AllArgsConstructor
    @NoArgsConstructor
    @Accessors(prefix={"m", "_"})

Getter and setter generation is suppressed, and generated client
interfaces are marked with ``@Mapper``.
"""

import logging
from typing import Any, Mapping, Optional

from lombokgen.annotations.augmentor import ClassAugmentor
from lombokgen.annotations.compiler import ConfigurationCompiler
from lombokgen.annotations.registry import FeatureRegistry
from lombokgen.annotations.selection import FeatureSelection
from lombokgen.common.exceptions import plugin_not_configured_error
from lombokgen.logging.filters import set_session_context
from lombokgen.plugin.base import PluginAdapter
from lombokgen.settings import get_settings
from lombokgen.types.generated import Interface, Method, ModelClassType, TopLevelClass
from lombokgen.utils.decorators import traced


logger = logging.getLogger(__name__)


def _class_attributes(self, top_level_class, *args, **kwargs):
    return {"lombokgen.type_name": getattr(top_level_class, "type_name", None)}


class LombokPlugin(PluginAdapter):
    """Attaches Lombok annotations to generated model classes.

    The selection is compiled once in ``set_properties`` and then shared,
    read-only, by every class checkpoint of the run. Calling
    ``set_properties`` again compiles a new selection and swaps it in;
    selections already handed out are left untouched.

    Args:
        registry: Feature catalog. Defaults to the built-in Lombok catalog.
    """

    def __init__(self, registry: Optional[FeatureRegistry] = None):
        super().__init__()
        self._compiler = ConfigurationCompiler(registry)
        self._selection: Optional[FeatureSelection] = None
        self._augmentor: Optional[ClassAugmentor] = None

    @property
    def selection(self) -> Optional[FeatureSelection]:
        return self._selection

    def set_properties(self, properties: Mapping[str, str]) -> None:
        super().set_properties(properties)
        session_id = set_session_context()
        logger.debug(f"Configuring Lombok plugin for session {session_id}")

        selection = self._compiler.compile(self.properties)
        self._augmentor = ClassAugmentor(selection)
        self._selection = selection

    def model_base_record_class_generated(
        self,
        top_level_class: TopLevelClass,
        introspected_table: Optional[Any] = None,
    ) -> bool:
        self._add_annotations(top_level_class, "model_base_record_class_generated")
        return True

    def model_primary_key_class_generated(
        self,
        top_level_class: TopLevelClass,
        introspected_table: Optional[Any] = None,
    ) -> bool:
        self._add_annotations(top_level_class, "model_primary_key_class_generated")
        return True

    def model_record_with_blobs_class_generated(
        self,
        top_level_class: TopLevelClass,
        introspected_table: Optional[Any] = None,
    ) -> bool:
        self._add_annotations(top_level_class, "model_record_with_blobs_class_generated")
        return True

    def model_getter_method_generated(
        self,
        method: Method,
        top_level_class: TopLevelClass,
        introspected_column: Optional[Any] = None,
        introspected_table: Optional[Any] = None,
        model_class_type: Optional[ModelClassType] = None,
    ) -> bool:
        # @Data generates it
        return False

    def model_setter_method_generated(
        self,
        method: Method,
        top_level_class: TopLevelClass,
        introspected_column: Optional[Any] = None,
        introspected_table: Optional[Any] = None,
        model_class_type: Optional[ModelClassType] = None,
    ) -> bool:
        return False

    def client_generated(
        self,
        interface: Interface,
        top_level_class: Optional[TopLevelClass] = None,
        introspected_table: Optional[Any] = None,
    ) -> bool:
        settings = get_settings()
        interface.add_imported_type(settings.mapper_annotation_type)
        interface.add_annotation(settings.mapper_annotation)
        return True

    @traced("lombokgen.augment_class", attribute_getter=_class_attributes)
    def _add_annotations(self, top_level_class: TopLevelClass, checkpoint: str) -> None:
        if self._augmentor is None:
            raise plugin_not_configured_error(checkpoint)
        self._augmentor.augment(top_level_class)
