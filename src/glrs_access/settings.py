"""GLRS access settings (conventional Pydantic v2)."""

from __future__ import annotations

from collections.abc import Callable
from functools import lru_cache

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ALLOWED_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})
ALLOWED_LOG_FORMATS = frozenset({"console", "json"})


def normalize_log_format(value: str, *, env_var: str = "GLRS_LOG_FORMAT") -> str:
    normalized = value.strip().lower()
    if normalized not in ALLOWED_LOG_FORMATS:
        allowed = ", ".join(sorted(ALLOWED_LOG_FORMATS))
        raise ValueError(f"{env_var} must be one of: {allowed}.")
    return normalized


def normalize_log_level(value: str, *, env_var: str = "GLRS_LOG_LEVEL") -> str:
    normalized = value.strip().upper()
    if normalized not in ALLOWED_LOG_LEVELS:
        allowed = ", ".join(sorted(ALLOWED_LOG_LEVELS))
        raise ValueError(f"{env_var} must be one of: {allowed}.")
    return normalized


class Settings(BaseSettings):
    """Access-engine settings loaded from GLRS_* environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="GLRS_",
        case_sensitive=False,
        extra="ignore",
        env_ignore_empty=True,
        str_strip_whitespace=True,
    )

    app_name: str = "GLRS Access"
    log_level: str = "INFO"
    log_format: str = "console"

    # When true, keys missing from a user's overrides fall back to the role preset.
    merge_partial_overrides: bool = False

    # Attribute on ``request.state`` where the identity layer binds the actor.
    actor_state_attribute: str = "actor"

    @model_validator(mode="after")
    def _finalize(self) -> Settings:
        self.log_format = normalize_log_format(self.log_format)
        self.log_level = normalize_log_level(self.log_level)
        if not self.actor_state_attribute:
            raise ValueError("GLRS_ACTOR_STATE_ATTRIBUTE must not be empty.")
        return self


def create_settings_accessors[T](
    settings_type: type[T],
) -> tuple[Callable[[], T], Callable[[], T]]:
    """Create ``get_settings`` and ``reload_settings`` helpers for a settings class."""

    @lru_cache(maxsize=1)
    def _build() -> T:
        return settings_type()

    def get_settings() -> T:
        return _build()

    def reload_settings() -> T:
        _build.cache_clear()
        return _build()

    return get_settings, reload_settings


get_settings, reload_settings = create_settings_accessors(Settings)

__all__ = [
    "ALLOWED_LOG_FORMATS",
    "ALLOWED_LOG_LEVELS",
    "Settings",
    "get_settings",
    "normalize_log_format",
    "normalize_log_level",
    "reload_settings",
]
