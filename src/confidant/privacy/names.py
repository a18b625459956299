"""Display-name resolution for disclosure labels.

The caller owns the user directory; Confidant only needs a way to turn an
identity into the name shown in a label.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Protocol

from ..core.exceptions import NameResolutionError
from .types import Identity

logger = logging.getLogger(__name__)


class NameResolver(Protocol):
    """Protocol for resolving an identity to a display name.

    Implementations raise NameResolutionError (or any LookupError) when the
    identity is unknown. Plain functions satisfy the protocol.
    """

    def __call__(self, identity: Identity) -> str:
        ...


class MappingNameResolver:
    """In-memory name resolver for testing and local use."""

    def __init__(self, names: Mapping[Identity, str] | None = None) -> None:
        self._names: dict[Identity, str] = dict(names or {})

    def add(self, identity: Identity, name: str) -> None:
        """Register or replace the display name for an identity."""
        self._names[identity] = name

    def __contains__(self, identity: object) -> bool:
        return identity in self._names

    def __call__(self, identity: Identity) -> str:
        try:
            return self._names[identity]
        except KeyError:
            raise NameResolutionError(identity, "not in directory") from None


def resolve_display_name(resolver: NameResolver, identity: Identity) -> str:
    """Resolve a display name, normalising lookup failures.

    Raises:
        NameResolutionError: If the resolver cannot name the identity, raises
            a LookupError, or returns an empty or non-string value.
    """
    try:
        name = resolver(identity)
    except NameResolutionError:
        raise
    except LookupError as e:
        raise NameResolutionError(identity, str(e) or type(e).__name__) from e

    if not isinstance(name, str) or not name.strip():
        logger.warning("Name resolver returned an unusable value of type %s", type(name).__name__)
        raise NameResolutionError(identity, "resolver returned no name")
    return name


__all__ = ["NameResolver", "MappingNameResolver", "resolve_display_name"]
