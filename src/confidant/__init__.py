"""Confidant - comment visibility for owned resources.

Confidant answers two questions about a single comment:
- can this requester see it?
- what should they be told about who else can?

Persistence, the ally graph and authentication stay with the caller; the
core works on already-resolved identities.
"""

__version__ = "1.0.0"

from .core.exceptions import (
    ConfidantException,
    CounterpartUndefinedError,
    InvalidVisibilityMode,
    NameResolutionError,
    ValidationException,
)
from .privacy import (
    AccessEvaluator,
    CommentView,
    CommentVisibilityFacts,
    CommentVisibilityService,
    DisclosureLabeler,
    MappingNameResolver,
    NameResolver,
    VisibilityMode,
    can_view,
    disclosure_label,
    get_service,
)

__all__ = [
    "__version__",
    "AccessEvaluator",
    "CommentView",
    "CommentVisibilityFacts",
    "CommentVisibilityService",
    "DisclosureLabeler",
    "MappingNameResolver",
    "NameResolver",
    "VisibilityMode",
    "can_view",
    "disclosure_label",
    "get_service",
    "ConfidantException",
    "CounterpartUndefinedError",
    "InvalidVisibilityMode",
    "NameResolutionError",
    "ValidationException",
]
