"""Environment-driven configuration for Confidant."""

from __future__ import annotations

import logging
import os
import string
from collections.abc import Mapping
from dataclasses import dataclass
from functools import lru_cache

from .defaults import (
    DEFAULT_LOG_FORMAT,
    DEFAULT_LOG_LEVEL,
    DISCLOSURE_TEMPLATE,
    ENV_DISCLOSURE_TEMPLATE,
    ENV_LOG_FORMAT,
    ENV_LOG_LEVEL,
    ENV_STRICT_COUNTERPART,
    LOG_FORMATS,
)
from .exceptions import ConfigException

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off", ""})


def _parse_bool(raw: str, key: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ConfigException(f"{key} must be a boolean, got {raw!r}", key=key)


def validate_disclosure_template(template: str) -> str:
    """Check that a label template has exactly one field, {name}.

    Raises:
        ConfigException: If the template is malformed, has no {name} field,
            or has any other field.
    """
    try:
        fields = [field for _, field, _, _ in string.Formatter().parse(template) if field is not None]
    except ValueError as e:
        raise ConfigException(f"Malformed disclosure template: {e}", key=ENV_DISCLOSURE_TEMPLATE) from e
    if fields != ["name"]:
        raise ConfigException(
            f"Disclosure template must contain exactly one {{name}} field, found {fields!r}",
            key=ENV_DISCLOSURE_TEMPLATE,
        )
    return template


@dataclass(frozen=True)
class ConfidantConfig:
    """Resolved configuration values."""

    log_level: str = DEFAULT_LOG_LEVEL
    log_format: str = DEFAULT_LOG_FORMAT
    strict_counterpart: bool = False
    disclosure_template: str = DISCLOSURE_TEMPLATE

    def __post_init__(self) -> None:
        level = self.log_level.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ConfigException(f"Unknown log level: {self.log_level!r}", key=ENV_LOG_LEVEL)
        object.__setattr__(self, "log_level", level)

        fmt = self.log_format.lower()
        if fmt not in LOG_FORMATS:
            raise ConfigException(
                f"Log format must be one of {', '.join(LOG_FORMATS)}, got {self.log_format!r}",
                key=ENV_LOG_FORMAT,
            )
        object.__setattr__(self, "log_format", fmt)

        validate_disclosure_template(self.disclosure_template)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> ConfidantConfig:
        """Build a config from environment variables.

        Args:
            environ: Mapping to read from. Defaults to ``os.environ``.

        Raises:
            ConfigException: If any value is malformed.
        """
        env = os.environ if environ is None else environ
        return cls(
            log_level=env.get(ENV_LOG_LEVEL, DEFAULT_LOG_LEVEL),
            log_format=env.get(ENV_LOG_FORMAT, DEFAULT_LOG_FORMAT),
            strict_counterpart=_parse_bool(env.get(ENV_STRICT_COUNTERPART, "false"), ENV_STRICT_COUNTERPART),
            disclosure_template=env.get(ENV_DISCLOSURE_TEMPLATE, DISCLOSURE_TEMPLATE),
        )


@lru_cache(maxsize=1)
def get_config() -> ConfidantConfig:
    """Get the process-wide config, read once from the environment.

    Call ``get_config.cache_clear()`` after changing the environment.
    """
    return ConfidantConfig.from_env()


__all__ = ["ConfidantConfig", "get_config", "validate_disclosure_template"]
