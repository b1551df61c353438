import logging
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import SettingsConfigDict

from .base import LombokGenBaseSettings

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class PluginSettings(LombokGenBaseSettings):
    """Settings for the plugin process itself.

    The feature selection is never read from here; it always comes from the
    flat mapping the host passes to ``set_properties``. These settings only
    cover how the plugin logs and which data-access annotation it attaches
    to generated client interfaces.

    Environment variables use the ``LOMBOKGEN_`` prefix, e.g.
    ``LOMBOKGEN_LOG_LEVEL=DEBUG``.
    """

    model_config = SettingsConfigDict(
        env_prefix="LOMBOKGEN_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    log_level: str = Field(
        default="INFO",
        description="Base log level for the lombokgen loggers."
    )
    json_logs: bool = Field(
        default=True,
        description="Emit structured JSON log lines. Disable for plain text output."
    )
    mapper_annotation_type: str = Field(
        default="org.apache.ibatis.annotations.Mapper",
        description="Fully-qualified import added to generated client interfaces."
    )
    mapper_annotation: str = Field(
        default="@Mapper",
        description="Annotation literal added to generated client interfaces."
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(
                f"Invalid log level '{v}'. Expected one of: {', '.join(_LOG_LEVELS)}"
            )
        return level

    @field_validator("mapper_annotation")
    @classmethod
    def validate_mapper_annotation(cls, v: str) -> str:
        v = v.strip()
        if not v.startswith("@"):
            v = f"@{v}"
        return v


@lru_cache(maxsize=1)
def get_settings() -> PluginSettings:
    """Return the process-wide plugin settings, loading them on first use."""
    settings = PluginSettings()
    logging.getLogger(__name__).debug(
        "Loaded plugin settings",
        extra={"log_level": settings.log_level, "json_logs": settings.json_logs},
    )
    return settings


def reload_settings() -> PluginSettings:
    """Drop the cached settings and load them again from the environment."""
    get_settings.cache_clear()
    return get_settings()
