"""
tjportal settings (pydantic-settings).

Values come from TJPORTAL_* environment variables. Settings cover the
package's own behaviour only; the deployment environment is always
chosen by the caller.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class PortalSettings(BaseSettings):
    """Runtime settings for tjportal."""

    model_config = SettingsConfigDict(
        env_prefix="TJPORTAL_",
        extra="ignore",
    )

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Log level for the tjportal logger",
    )
    log_json: bool = Field(
        default=False,
        description="Emit JSON log lines instead of Rich console output",
    )


_settings: PortalSettings | None = None


def get_settings() -> PortalSettings:
    """Get the settings singleton, creating it on first use."""
    global _settings
    if _settings is None:
        _settings = PortalSettings()
    return _settings


def configure_settings(**overrides: Any) -> PortalSettings:
    """Replace the singleton with settings built from explicit values."""
    global _settings
    _settings = PortalSettings(**overrides)
    return _settings


def reset_settings() -> None:
    """Drop the singleton so the next get_settings() re-reads the environment."""
    global _settings
    _settings = None


__all__ = [
    "PortalSettings",
    "configure_settings",
    "get_settings",
    "reset_settings",
]
