# Confidant Privacy Types
"""
Types shared by the comment visibility components.
"""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

from ..core.exceptions import InvalidVisibilityMode, ValidationException

# Opaque identifier for a person. Equality is the only operation used.
Identity = Hashable


class VisibilityMode(str, Enum):
    """
    Comment visibility modes.

    OPEN does not mean "everyone in the owner's circle": it admits only the
    resource owner and the comment author. Any broader audience comes from
    the resource's own visibility, which is decided elsewhere.
    """

    RESTRICTED = "private"  # owner, author and the explicit viewer list
    OPEN = "all"            # owner and author only

    @classmethod
    def parse(cls, value: Any) -> VisibilityMode:
        """Coerce a stored value into a mode.

        Raises:
            InvalidVisibilityMode: If the value is not a recognised mode.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        raise InvalidVisibilityMode(value)


def _unique(viewers: Iterable[Identity] | None) -> tuple[Identity, ...]:
    if viewers is None:
        return ()
    if isinstance(viewers, (str, bytes)):
        raise ValidationException("viewers must be a collection of identities", field="viewers", value=viewers)
    seen: set[Identity] = set()
    ordered: list[Identity] = []
    for viewer in viewers:
        if viewer not in seen:
            seen.add(viewer)
            ordered.append(viewer)
    return tuple(ordered)


@dataclass(frozen=True)
class CommentVisibilityFacts:
    """Resolved facts about one comment, supplied fresh per evaluation.

    ``viewers`` keeps the caller's order with duplicates dropped; the first
    entry is the counterpart of an owner-authored restricted comment.
    """

    mode: VisibilityMode
    resource_owner: Identity
    author: Identity
    viewers: tuple[Identity, ...] = ()

    def __post_init__(self) -> None:
        if self.resource_owner is None:
            raise ValidationException("Comment facts need a resource owner", field="resource_owner")
        if self.author is None:
            raise ValidationException("Comment facts need an author", field="author")
        object.__setattr__(self, "mode", VisibilityMode.parse(self.mode))
        object.__setattr__(self, "viewers", _unique(self.viewers))

    @property
    def is_restricted(self) -> bool:
        return self.mode is VisibilityMode.RESTRICTED

    @property
    def is_owner_authored(self) -> bool:
        """True when the resource owner wrote the comment."""
        return self.author == self.resource_owner

    def has_viewer(self, identity: Identity) -> bool:
        return identity in self.viewers

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> CommentVisibilityFacts:
        """Build facts from a persisted comment row.

        Expects the stored field names: ``visibility``, ``owner_id`` (owner of
        the commented resource), ``comment_by`` and ``viewers``.

        Raises:
            ValidationException: If a required field is missing.
            InvalidVisibilityMode: If ``visibility`` is not recognised.
        """
        for key in ("visibility", "owner_id", "comment_by"):
            if key not in record:
                raise ValidationException(f"Comment record is missing '{key}'", field=key)
        return cls(
            mode=record["visibility"],
            resource_owner=record["owner_id"],
            author=record["comment_by"],
            viewers=record.get("viewers") or (),
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize using the persisted field names."""
        return {
            "visibility": self.mode.value,
            "owner_id": self.resource_owner,
            "comment_by": self.author,
            "viewers": list(self.viewers),
        }


__all__ = ["Identity", "VisibilityMode", "CommentVisibilityFacts"]
