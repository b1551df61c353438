"""Configuration-to-annotation compiler.

Key Components:
    - **Registry**: fixed catalog of Lombok annotation features
    - **Quoting**: raw option value to annotation literal
    - **Selection**: per-run, dependency-closed set of features with options
    - **Compiler**: flat configuration mapping to selection
    - **Renderer**: ``@Name`` / ``@Name(opt, ...)`` literals
    - **Augmentor**: appends imports and annotations to generated classes
"""

from lombokgen.annotations.augmentor import ClassAugmentor, augment_class
from lombokgen.annotations.compiler import ConfigurationCompiler, compile_configuration
from lombokgen.annotations.quoting import format_option, quote_option_value
from lombokgen.annotations.registry import (
    ACCESSORS,
    ALL_ARGS_CONSTRUCTOR,
    BUILDER,
    DATA,
    DEFAULT_FEATURE,
    NO_ARGS_CONSTRUCTOR,
    TO_STRING,
    Feature,
    FeatureRegistry,
    get_default_registry,
)
from lombokgen.annotations.renderer import render_annotation
from lombokgen.annotations.selection import FeatureSelection, SelectedFeature

__all__ = [
    "Feature",
    "FeatureRegistry",
    "get_default_registry",
    "DEFAULT_FEATURE",
    "DATA",
    "BUILDER",
    "ALL_ARGS_CONSTRUCTOR",
    "NO_ARGS_CONSTRUCTOR",
    "ACCESSORS",
    "TO_STRING",
    "quote_option_value",
    "format_option",
    "FeatureSelection",
    "SelectedFeature",
    "ConfigurationCompiler",
    "compile_configuration",
    "render_annotation",
    "ClassAugmentor",
    "augment_class",
]
