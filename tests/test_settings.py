"""Tests for stdont.settings module.

Covers:
- StdontSettings defaults
- STDONT_* environment variable override
- log_level validation
- get_settings caching
"""

import pytest
from pydantic import ValidationError

from stdont.settings import StdontSettings, get_settings


class TestStdontSettingsDefaults:
    def test_default_log_level(self):
        assert StdontSettings().log_level == "WARNING"

    def test_default_json_logs_autodetect(self):
        assert StdontSettings().json_logs is None

    def test_unwrap_logging_off_by_default(self):
        assert StdontSettings().log_unwrap_failures is False


class TestStdontSettingsEnvOverride:
    def test_log_level_from_env(self, monkeypatch):
        monkeypatch.setenv("STDONT_LOG_LEVEL", "debug")
        assert StdontSettings().log_level == "DEBUG"

    def test_json_logs_from_env(self, monkeypatch):
        monkeypatch.setenv("STDONT_JSON_LOGS", "true")
        assert StdontSettings().json_logs is True

    def test_unwrap_logging_from_env(self, monkeypatch):
        monkeypatch.setenv("STDONT_LOG_UNWRAP_FAILURES", "true")
        assert StdontSettings().log_unwrap_failures is True

    def test_unprefixed_env_ignored(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "ERROR")
        assert StdontSettings().log_level == "WARNING"

    def test_invalid_level_rejected(self, monkeypatch):
        monkeypatch.setenv("STDONT_LOG_LEVEL", "LOUD")
        with pytest.raises(ValidationError):
            StdontSettings()


class TestGetSettings:
    def test_cached(self):
        assert get_settings() is get_settings()

    def test_cache_clear_rereads_env(self, monkeypatch):
        assert get_settings().log_level == "WARNING"
        monkeypatch.setenv("STDONT_LOG_LEVEL", "INFO")
        assert get_settings().log_level == "WARNING"
        get_settings.cache_clear()
        assert get_settings().log_level == "INFO"
