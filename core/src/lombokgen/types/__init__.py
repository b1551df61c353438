"""Type definitions for lombokgen.

This module provides the generated-source model used by hosts that do not
bring their own class representation.
"""

from .base import LombokGenBaseModel
from .generated import (
    CompilationUnit,
    Interface,
    Method,
    ModelClassType,
    TopLevelClass,
)

__all__ = [
    'LombokGenBaseModel',
    'CompilationUnit',
    'Interface',
    'Method',
    'ModelClassType',
    'TopLevelClass',
]
