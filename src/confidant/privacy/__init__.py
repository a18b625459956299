# Confidant Privacy Module
"""
Per-comment visibility for comments on owned resources.

This module provides tools for:
- Access decisions: whether a requester may view a comment
- Disclosure labels: the "Visible only between you and ..." notice
- Name resolution: turning identities into display names for labels
"""

from .comment_viewers import (
    # Components
    AccessEvaluator,
    DisclosureLabeler,
    # Service
    CommentView,
    CommentVisibilityService,
    # High-level functions
    can_view,
    disclosure_label,
    get_service,
)
from .names import (
    MappingNameResolver,
    NameResolver,
    resolve_display_name,
)
from .types import (
    CommentVisibilityFacts,
    Identity,
    VisibilityMode,
)

__all__ = [
    # Types
    "CommentVisibilityFacts",
    "Identity",
    "VisibilityMode",
    # Components
    "AccessEvaluator",
    "DisclosureLabeler",
    "CommentView",
    "CommentVisibilityService",
    "can_view",
    "disclosure_label",
    "get_service",
    # Names
    "MappingNameResolver",
    "NameResolver",
    "resolve_display_name",
]
