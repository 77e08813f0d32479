"""Runtime settings for stdont.

The helpers themselves take no configuration. Settings only steer the
ambient behaviour around them: how loud logging is and whether an unwrap
on ``Err`` leaves a log record before it raises.

Fields
──────
log_level            : structlog level used by ``configure_logging``
json_logs            : True for JSON, False for console, None to auto-detect
log_unwrap_failures  : emit an ``unwrap_failed`` warning before raising (off by
                       default; unconfigured structlog prints to stdout)

Every field reads from a ``STDONT_``-prefixed environment variable or a
``.env`` file, e.g. ``STDONT_LOG_UNWRAP_FAILURES=true``.

Tags:
    settings, configuration, pydantic, environment, stdont
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class StdontSettings(BaseSettings):
    """Settings loaded from ``STDONT_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="STDONT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ── Observability ────────────────────────────────────────────
    log_level: str = "WARNING"
    json_logs: bool | None = None
    log_unwrap_failures: bool = Field(
        default=False,
        description="Log an unwrap_failed event before raising UnwrapError",
    )

    @field_validator("log_level")
    @classmethod
    def _normalize_level(cls, value: str) -> str:
        level = value.upper()
        if level not in _LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LEVELS)}")
        return level


@lru_cache(maxsize=1)
def get_settings() -> StdontSettings:
    """Cached settings, loaded once per process."""
    return StdontSettings()


__all__ = ["StdontSettings", "get_settings"]
