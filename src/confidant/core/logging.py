"""Logging setup for Confidant.

Modules log through ``logging.getLogger(__name__)``; this module only wires
a handler onto the package logger for applications that want one.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from typing import Any, TextIO

from .config import get_config

ROOT_LOGGER_NAME = "confidant"
TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# LogRecord attributes that are not user supplied ``extra`` fields
_RECORD_ATTRS = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", (), None)).keys()
) | {"message", "asctime"}


class JSONFormatter(logging.Formatter):
    """Render records as one JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key, value in record.__dict__.items():
            if key not in _RECORD_ATTRS and not key.startswith("_"):
                payload[key] = value
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


def configure_logging(
    level: str | int | None = None,
    fmt: str | None = None,
    stream: TextIO | None = None,
) -> logging.Logger:
    """Attach a single handler to the ``confidant`` logger.

    Repeated calls replace the handler installed by a previous call rather
    than stacking another one.

    Args:
        level: Log level name or number. Defaults to the configured level.
        fmt: ``"text"`` or ``"json"``. Defaults to the configured format.
        stream: Output stream. Defaults to stderr.

    Returns:
        The configured package logger.
    """
    config = get_config()
    level = level if level is not None else config.log_level
    fmt = (fmt or config.log_format).lower()

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in list(logger.handlers):
        if getattr(handler, "_confidant_handler", False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler(stream)
    handler._confidant_handler = True  # type: ignore[attr-defined]
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(TEXT_FORMAT))

    logger.addHandler(handler)
    logger.setLevel(level.upper() if isinstance(level, str) else level)
    return logger


def get_logger(name: str | None = None) -> logging.Logger:
    """Get a logger namespaced under ``confidant``."""
    if not name or name == ROOT_LOGGER_NAME:
        return logging.getLogger(ROOT_LOGGER_NAME)
    if name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


__all__ = ["JSONFormatter", "configure_logging", "get_logger"]
