"""Logging infrastructure for lombokgen.

This module provides structured logging with JSON output and per-run
session tracking.
"""

from lombokgen.logging.filters import (
    ContextFilter,
    clear_session_context,
    session_scope,
    set_session_context,
)
from lombokgen.logging.logger import CustomJsonFormatter, get_logger, setup_logging

__all__ = [
    "get_logger",
    "setup_logging",
    "CustomJsonFormatter",
    "ContextFilter",
    "set_session_context",
    "clear_session_context",
    "session_scope",
]
