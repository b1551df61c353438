"""Protocol definitions for lombokgen."""

from .generated import AnnotatableProtocol

__all__ = [
    "AnnotatableProtocol",
]
