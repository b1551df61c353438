import pytest

from lombokgen.logging.filters import clear_session_context
from lombokgen.settings import get_settings


@pytest.fixture(autouse=True)
def _isolate_settings(monkeypatch):
    """Drop cached settings and LOMBOKGEN_* variables around every test."""
    for name in ("LOG_LEVEL", "JSON_LOGS", "MAPPER_ANNOTATION_TYPE", "MAPPER_ANNOTATION"):
        monkeypatch.delenv(f"LOMBOKGEN_{name}", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
    clear_session_context()
