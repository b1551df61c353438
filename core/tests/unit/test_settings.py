"""Unit tests for plugin settings."""

import pytest
from pydantic import ValidationError

from lombokgen.settings import PluginSettings, get_settings, reload_settings


class TestPluginSettings:
    """Test suite for PluginSettings."""

    def test_defaults(self):
        settings = PluginSettings()
        assert settings.log_level == "INFO"
        assert settings.json_logs is True
        assert settings.mapper_annotation_type == "org.apache.ibatis.annotations.Mapper"
        assert settings.mapper_annotation == "@Mapper"

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("LOMBOKGEN_LOG_LEVEL", "debug")
        monkeypatch.setenv("LOMBOKGEN_JSON_LOGS", "false")
        settings = PluginSettings()
        assert settings.log_level == "DEBUG"
        assert settings.json_logs is False

    def test_invalid_log_level_is_rejected(self):
        with pytest.raises(ValidationError):
            PluginSettings(log_level="LOUD")

    def test_mapper_annotation_gets_at_sign(self):
        assert PluginSettings(mapper_annotation="Repository").mapper_annotation == "@Repository"

    def test_get_settings_is_cached_until_reload(self, monkeypatch):
        first = get_settings()
        assert get_settings() is first
        monkeypatch.setenv("LOMBOKGEN_LOG_LEVEL", "WARNING")
        reloaded = reload_settings()
        assert reloaded is not first
        assert reloaded.log_level == "WARNING"
