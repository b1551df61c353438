"""Protocols for the host's generated-source representations.

The plugin never builds generated classes itself; it appends to whatever
the host hands it. Any object with these methods can be augmented.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class AnnotatableProtocol(Protocol):
    """A generated class or interface that accepts imports and annotations."""

    def add_imported_type(self, import_type: str) -> None:
        """Append a fully-qualified type to the import list."""
        ...

    def add_annotation(self, annotation: str) -> None:
        """Append an annotation literal such as ``@Data``."""
        ...
