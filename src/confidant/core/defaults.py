"""Centralized configurable defaults for Confidant.

Environment variable names and the values used when they are unset.
"""

from __future__ import annotations

# Disclosure label shown next to restricted comments
DISCLOSURE_TEMPLATE = "Visible only between you and {name}"

# Logging
DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_LOG_FORMAT = "text"
LOG_FORMATS = ("text", "json")

# Environment variables
ENV_LOG_LEVEL = "CONFIDANT_LOG_LEVEL"
ENV_LOG_FORMAT = "CONFIDANT_LOG_FORMAT"
ENV_STRICT_COUNTERPART = "CONFIDANT_STRICT_COUNTERPART"
ENV_DISCLOSURE_TEMPLATE = "CONFIDANT_DISCLOSURE_TEMPLATE"
