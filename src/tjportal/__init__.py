"""
tjportal - endpoint configuration for the Tianji learning portal.

Maps each deployment environment to its API host and CDN path.

Usage:
    >>> from tjportal import get_config
    >>>
    >>> config = get_config("development")
    >>> config.host
    'http://localhost:10010'
    >>> config.api_url("/us/users/me")
    'http://localhost:10010/us/users/me'
"""

from __future__ import annotations

from tjportal.environments import (
    ENDPOINTS,
    ENVIRONMENT_ALIASES,
    get_config,
    iter_configs,
    list_environments,
    resolve_environment,
)
from tjportal.exceptions import (
    ConfigurationError,
    TJPortalError,
    UnknownEnvironmentError,
)
from tjportal.models import EndpointConfig, EnvironmentKey

__version__ = "0.1.0"

__all__ = [
    # Table
    "ENDPOINTS",
    "ENVIRONMENT_ALIASES",
    "get_config",
    "iter_configs",
    "list_environments",
    "resolve_environment",
    # Models
    "EndpointConfig",
    "EnvironmentKey",
    # Errors
    "TJPortalError",
    "ConfigurationError",
    "UnknownEnvironmentError",
]
