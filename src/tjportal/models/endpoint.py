"""
Endpoint models.

EnvironmentKey names a deployment target; EndpointConfig holds the API
host and CDN path used for that target.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class EnvironmentKey(str, Enum):
    """Deployment environment identifier."""

    DEVELOPMENT = "development"
    TEST = "test"
    PRODUCTION = "production"


def _join(base: str, path: str) -> str:
    return f"{base.rstrip('/')}/{path.lstrip('/')}"


class EndpointConfig(BaseModel):
    """
    Endpoint settings for one environment.

    Instances are frozen: assignment raises a ValidationError, so a
    record handed out by the table cannot be used to change it.

    Example:
        >>> config = EndpointConfig(host="http://localhost:10010", cdn="")
        >>> config.api_url("/us/users")
        'http://localhost:10010/us/users'
        >>> config.asset_url("img/logo.png")
        'img/logo.png'
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    # Empty host means a relative, same-origin base
    host: str = Field(..., description="Base URL prefix for API calls")
    # Empty cdn means the default asset path
    cdn: str = Field(..., description="Base URL or path for static assets")

    def api_url(self, path: str) -> str:
        """
        Build an API request URL from the host.

        Args:
            path: Request path, with or without a leading slash

        Returns:
            Host and path joined by a single slash
        """
        return _join(self.host, path)

    def asset_url(self, path: str) -> str:
        """
        Build a static asset URL from the CDN path.

        Args:
            path: Asset path

        Returns:
            CDN and path joined by a single slash, or the path unchanged
            when no CDN is configured
        """
        if not self.cdn:
            return path
        return _join(self.cdn, path)
