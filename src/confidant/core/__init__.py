"""Confidant Core - configuration, logging and the error taxonomy."""

from .config import ConfidantConfig, get_config
from .exceptions import (
    ConfidantException,
    ConfigException,
    CounterpartUndefinedError,
    InvalidVisibilityMode,
    NameResolutionError,
    ValidationException,
)
from .logging import JSONFormatter, configure_logging, get_logger

__all__ = [
    # Config
    "ConfidantConfig",
    "get_config",
    # Exceptions
    "ConfidantException",
    "ConfigException",
    "CounterpartUndefinedError",
    "InvalidVisibilityMode",
    "NameResolutionError",
    "ValidationException",
    # Logging
    "JSONFormatter",
    "configure_logging",
    "get_logger",
]
