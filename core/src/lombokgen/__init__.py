from lombokgen.__version__ import __version__

from lombokgen.annotations import (
    ClassAugmentor,
    ConfigurationCompiler,
    Feature,
    FeatureRegistry,
    FeatureSelection,
    augment_class,
    compile_configuration,
    get_default_registry,
    quote_option_value,
    render_annotation,
)
from lombokgen.plugin import LombokPlugin, PluginAdapter
from lombokgen.types import Interface, Method, ModelClassType, TopLevelClass

from lombokgen.common.exceptions import LombokGenError, ErrorCode

from lombokgen.logging import setup_logging


__all__ = [
    "__version__",

    "LombokPlugin",
    "PluginAdapter",

    "ConfigurationCompiler",
    "compile_configuration",
    "ClassAugmentor",
    "augment_class",
    "Feature",
    "FeatureRegistry",
    "FeatureSelection",
    "get_default_registry",
    "quote_option_value",
    "render_annotation",

    "TopLevelClass",
    "Interface",
    "Method",
    "ModelClassType",

    # Exceptions (public API)
    "LombokGenError",
    "ErrorCode",

    "setup_logging",
]
