"""tjportal data models."""

from tjportal.models.endpoint import EndpointConfig, EnvironmentKey

__all__ = [
    "EndpointConfig",
    "EnvironmentKey",
]
