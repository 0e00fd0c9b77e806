"""
tjportal exception hierarchy.

All errors raised by the package derive from TJPortalError, so callers
can catch one type at the boundary (CLI, request handler) and let the
rest propagate.
"""

from __future__ import annotations

from collections.abc import Iterable


class TJPortalError(Exception):
    """Base exception for tjportal."""

    def __init__(self, message: str, cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.message = message
        self._original_cause = cause
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        return self.message


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(TJPortalError):
    """Endpoint configuration could not be resolved."""

    pass


class UnknownEnvironmentError(ConfigurationError):
    """Environment identifier is not part of the known set."""

    def __init__(self, environment: object, known: Iterable[str] = ()) -> None:
        self.environment = environment
        self.known = tuple(known)
        message = f"Unknown environment: {environment!r}"
        if self.known:
            message += f" (expected one of: {', '.join(self.known)})"
        super().__init__(message)


__all__ = [
    "TJPortalError",
    "ConfigurationError",
    "UnknownEnvironmentError",
]
