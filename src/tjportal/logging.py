"""
Logging setup for tjportal.

Library modules log through get_logger(__name__); nothing is printed
until an application (or the CLI) calls configure_logging().
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "tjportal"

# Marks handlers installed by configure_logging
_HANDLER_ATTR = "_tjportal_handler"

logging.getLogger(LOGGER_NAME).addHandler(logging.NullHandler())


class JsonFormatter(logging.Formatter):
    """One JSON object per log line."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "severity": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger inside the tjportal namespace.

    Args:
        name: Usually __name__ of the calling module

    Returns:
        Logger that propagates to the package logger
    """
    if name != LOGGER_NAME and not name.startswith(f"{LOGGER_NAME}."):
        name = f"{LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def configure_logging(level: str = "INFO", json_format: bool = False) -> logging.Logger:
    """
    Attach a stderr handler to the package logger.

    Calling it again replaces the handler installed by the previous call.

    Args:
        level: Log level name
        json_format: Emit JSON lines instead of Rich console output

    Returns:
        The package logger
    """
    logger = logging.getLogger(LOGGER_NAME)
    for existing in list(logger.handlers):
        if getattr(existing, _HANDLER_ATTR, False):
            logger.removeHandler(existing)

    handler: logging.Handler
    if json_format:
        handler = logging.StreamHandler()
        handler.setFormatter(JsonFormatter())
    else:
        handler = RichHandler(console=Console(stderr=True), show_path=False)
    setattr(handler, _HANDLER_ATTR, True)

    logger.addHandler(handler)
    logger.setLevel(level.upper())
    return logger


__all__ = ["JsonFormatter", "configure_logging", "get_logger"]
