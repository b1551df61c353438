"""Code-generator plugins."""

from .base import PluginAdapter
from .lombok import LombokPlugin

__all__ = [
    "PluginAdapter",
    "LombokPlugin",
]
