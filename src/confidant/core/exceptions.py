"""Exception hierarchy for Confidant.

All errors raised by the package derive from ConfidantException so callers
can catch the whole family in one place. Nothing here is recovered
internally; the caller decides what a failure means for the user.
"""

from __future__ import annotations

from typing import Any


class ConfidantException(Exception):
    """Base exception for Confidant errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Serialize for error responses."""
        return {
            "error": type(self).__name__,
            "message": self.message,
            "details": self.details,
        }


class ValidationException(ConfidantException):
    """Input failed validation."""

    def __init__(self, message: str, field: str | None = None, value: Any = None) -> None:
        details: dict[str, Any] = {}
        if field is not None:
            details["field"] = field
        if value is not None:
            details["value"] = repr(value)
        super().__init__(message, details)
        self.field = field
        self.value = value


class InvalidVisibilityMode(ValidationException):
    """A visibility value outside the recognised modes.

    Signals corrupted or mis-migrated comment data.
    """

    def __init__(self, value: Any) -> None:
        super().__init__(
            f"Unrecognised comment visibility: {value!r}",
            field="visibility",
            value=value,
        )


class NameResolutionError(ConfidantException):
    """No display name could be produced for an identity."""

    def __init__(self, identity: Any, reason: str | None = None) -> None:
        message = f"Cannot resolve a display name for {identity!r}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message, {"identity": repr(identity)})
        self.identity = identity


class CounterpartUndefinedError(ConfidantException):
    """The owner-authored restricted comment has no single counterpart."""

    def __init__(self, viewer_count: int) -> None:
        super().__init__(
            f"Restricted comment by the owner needs exactly one viewer, found {viewer_count}",
            {"viewer_count": viewer_count},
        )
        self.viewer_count = viewer_count


class ConfigException(ConfidantException):
    """Invalid configuration value."""

    def __init__(self, message: str, key: str | None = None) -> None:
        super().__init__(message, {"key": key} if key else None)
        self.key = key


__all__ = [
    "ConfidantException",
    "ValidationException",
    "InvalidVisibilityMode",
    "NameResolutionError",
    "CounterpartUndefinedError",
    "ConfigException",
]
