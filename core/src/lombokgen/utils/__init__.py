"""Utility helpers for lombokgen."""

from .decorators import traced

__all__ = [
    "traced",
]
