"""Minimal model of the generated Java source the host passes to checkpoints.

Hosts with their own representation only need to satisfy
``AnnotatableProtocol``; these classes serve hosts that do not have one.
"""

from enum import Enum
from typing import List, Optional

from pydantic import Field

from .base import LombokGenBaseModel


class ModelClassType(str, Enum):
    """Kind of model class a getter or setter is generated for."""
    PRIMARY_KEY = "primary_key"
    BASE_RECORD = "base_record"
    RECORD_WITH_BLOBS = "record_with_blobs"


class Method(LombokGenBaseModel):
    """A generated method, e.g. a getter or setter."""

    name: str
    return_type: Optional[str] = None
    parameters: List[str] = Field(default_factory=list)


class CompilationUnit(LombokGenBaseModel):
    """Shared shape of generated classes and interfaces.

    Imports and annotations are kept in insertion order and are not
    de-duplicated.
    """

    type_name: str
    imported_types: List[str] = Field(default_factory=list)
    annotations: List[str] = Field(default_factory=list)
    methods: List[Method] = Field(default_factory=list)

    def add_imported_type(self, import_type: str) -> None:
        self.imported_types.append(import_type)

    def add_annotation(self, annotation: str) -> None:
        self.annotations.append(annotation)


class TopLevelClass(CompilationUnit):
    """A generated model class (base record, primary key, record with BLOBs)."""


class Interface(CompilationUnit):
    """A generated client (mapper) interface."""
