"""
Portal endpoint configuration.

Provides the API host and CDN path for development/test/production.
The table is built once at import time and exposed read-only.
"""

from __future__ import annotations

from collections.abc import Iterator
from types import MappingProxyType
from typing import Mapping

from tjportal.exceptions import UnknownEnvironmentError
from tjportal.logging import get_logger
from tjportal.models.endpoint import EndpointConfig, EnvironmentKey

logger = get_logger(__name__)

# Endpoint settings for each environment.
# NOTE: test and production point at the same host.
ENDPOINTS: Mapping[EnvironmentKey, EndpointConfig] = MappingProxyType({
    EnvironmentKey.DEVELOPMENT: EndpointConfig(
        host="http://localhost:10010",  # local gateway
        cdn="",
    ),
    EnvironmentKey.TEST: EndpointConfig(
        host="https://tjxt-user-t.itheima.net/api",
        cdn="",
    ),
    EnvironmentKey.PRODUCTION: EndpointConfig(
        host="https://tjxt-user-t.itheima.net/api",
        cdn="",
    ),
})

# Legacy identifiers accepted in addition to the enum values
ENVIRONMENT_ALIASES: Mapping[str, EnvironmentKey] = MappingProxyType({
    "product": EnvironmentKey.PRODUCTION,
})


def list_environments() -> tuple[EnvironmentKey, ...]:
    """Return all known environments in declaration order."""
    return tuple(EnvironmentKey)


def _known_names() -> tuple[str, ...]:
    return tuple(key.value for key in EnvironmentKey) + tuple(ENVIRONMENT_ALIASES)


def resolve_environment(key: EnvironmentKey | str) -> EnvironmentKey:
    """
    Normalize an environment identifier.

    Matching is exact: no case folding, no whitespace stripping and no
    fallback environment.

    Args:
        key: EnvironmentKey member, its value, or a legacy alias

    Returns:
        The matching EnvironmentKey

    Raises:
        UnknownEnvironmentError: If the key is not recognized

    Example:
        >>> resolve_environment("product")
        <EnvironmentKey.PRODUCTION: 'production'>
    """
    if isinstance(key, EnvironmentKey):
        return key
    if isinstance(key, str):
        if key in ENVIRONMENT_ALIASES:
            return ENVIRONMENT_ALIASES[key]
        try:
            return EnvironmentKey(key)
        except ValueError:
            pass
    raise UnknownEnvironmentError(key, known=_known_names())


def get_config(key: EnvironmentKey | str) -> EndpointConfig:
    """
    Get endpoint settings for the specified environment.

    Args:
        key: Environment - "development", "test" or "production"
            ("product" is accepted as an alias for "production")

    Returns:
        Frozen EndpointConfig shared with the table

    Raises:
        UnknownEnvironmentError: If the key is not recognized

    Example:
        >>> get_config("development").host
        'http://localhost:10010'
        >>> get_config("test").host
        'https://tjxt-user-t.itheima.net/api'
    """
    environment = resolve_environment(key)
    config = ENDPOINTS[environment]
    logger.debug(f"Resolved environment {environment.value}: host={config.host!r}")
    return config


def iter_configs() -> Iterator[tuple[EnvironmentKey, EndpointConfig]]:
    """Iterate over (environment, config) pairs in declaration order."""
    for environment in EnvironmentKey:
        yield environment, ENDPOINTS[environment]


__all__ = [
    "ENDPOINTS",
    "ENVIRONMENT_ALIASES",
    "get_config",
    "iter_configs",
    "list_environments",
    "resolve_environment",
]
