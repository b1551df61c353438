"""Logging filters for context injection.

This module provides filters that inject context variables into log records,
so every record emitted during one generation run carries the same session id.
"""

from __future__ import annotations

import logging
import uuid
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Iterator, Optional

from lombokgen.__version__ import __version__

session_id_var: ContextVar[Optional[str]] = ContextVar("session_id", default=None)


class ContextFilter(logging.Filter):
    """Logging filter that adds context variables to log records."""

    def filter(self, record: logging.LogRecord) -> bool:
        """Add context variables to the log record.

        Args:
            record: Log record to enhance

        Returns:
            Always True (doesn't filter out any records)
        """
        setattr(record, "session_id", session_id_var.get())
        setattr(record, "package_name", "lombokgen")
        setattr(record, "package_version", __version__)

        return True


def set_session_context(session_id: Optional[str] = None) -> str:
    """Set the generation session id, generating one if none is given."""
    session_id = session_id or str(uuid.uuid4())
    session_id_var.set(session_id)
    return session_id


def clear_session_context() -> None:
    """Clear the generation session id."""
    session_id_var.set(None)


@contextmanager
def session_scope(session_id: Optional[str] = None) -> Iterator[str]:
    """Bind a session id for the duration of the block."""
    token = session_id_var.set(session_id or str(uuid.uuid4()))
    try:
        yield session_id_var.get()
    finally:
        session_id_var.reset(token)
