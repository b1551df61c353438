"""Settings for the lombokgen plugin, built on Pydantic Settings.

Configuration Sources (precedence order):
    1. Environment Variables (highest priority), prefixed ``LOMBOKGEN_``
    2. ``.env`` file in the working directory
    3. Default Values in code (lowest priority)

Quick Start:
    >>> from lombokgen.settings import get_settings
    >>> settings = get_settings()
    >>> settings.mapper_annotation_type
    'org.apache.ibatis.annotations.Mapper'
"""

from .main import PluginSettings, get_settings, reload_settings

from .base import LombokGenBaseSettings

__all__ = [
    "PluginSettings",
    "LombokGenBaseSettings",
    "get_settings",
    "reload_settings",
]
