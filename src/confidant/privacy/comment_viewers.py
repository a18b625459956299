"""Comment visibility: who may view a comment and what they are told.

Two pure components evaluate one comment at a time:

- AccessEvaluator decides whether a requester may view the comment.
- DisclosureLabeler builds the "Visible only between you and ..." notice
  shown next to restricted comments.

The labeler assumes the requester already passed the evaluator. Callers that
want both answers should go through CommentVisibilityService, which runs the
gate first and never labels a comment the requester cannot see.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ..core.config import get_config, validate_disclosure_template
from ..core.defaults import DISCLOSURE_TEMPLATE
from ..core.exceptions import CounterpartUndefinedError
from .names import NameResolver, resolve_display_name
from .types import CommentVisibilityFacts, Identity, VisibilityMode

logger = logging.getLogger(__name__)


class AccessEvaluator:
    """Decides comment access from ownership, authorship and the viewer list.

    OPEN comments are visible to the resource owner and the author only.
    That is narrower than the name suggests: wider disclosure depends on the
    resource's own visibility and is not decided here.
    """

    def can_view(self, facts: CommentVisibilityFacts, requester: Identity) -> bool:
        if requester == facts.resource_owner or requester == facts.author:
            return True
        if facts.mode is VisibilityMode.RESTRICTED:
            return facts.has_viewer(requester)
        return False

    def audience(self, facts: CommentVisibilityFacts) -> frozenset[Identity]:
        """Every identity that can_view admits for this comment."""
        members = {facts.resource_owner, facts.author}
        if facts.mode is VisibilityMode.RESTRICTED:
            members.update(facts.viewers)
        return frozenset(members)


class DisclosureLabeler:
    """Builds the audience notice for restricted comments."""

    def __init__(
        self,
        template: str = DISCLOSURE_TEMPLATE,
        strict_counterpart: bool = False,
    ) -> None:
        self.template = validate_disclosure_template(template)
        self.strict_counterpart = strict_counterpart

    def counterpart(self, facts: CommentVisibilityFacts, requester: Identity) -> Identity:
        """The other party in a restricted exchange, relative to the requester.

        Owner-authored comments pair the owner with their single viewer.
        Comments written by someone else pair the owner with the author, and
        the viewer list is ignored.

        Raises:
            CounterpartUndefinedError: If the owner asks about their own
                comment and there is no viewer, or there are several and
                ``strict_counterpart`` is set.
        """
        if requester != facts.resource_owner:
            return facts.resource_owner
        if not facts.is_owner_authored:
            return facts.author

        count = len(facts.viewers)
        if count == 0:
            raise CounterpartUndefinedError(count)
        if count > 1:
            if self.strict_counterpart:
                raise CounterpartUndefinedError(count)
            logger.warning(
                "Owner-authored restricted comment has %d viewers; labelling with the first",
                count,
            )
        return facts.viewers[0]

    def label(
        self,
        facts: CommentVisibilityFacts,
        requester: Identity,
        resolve_name: NameResolver,
    ) -> str | None:
        """Disclosure text for the requester, or None for OPEN comments.

        Raises:
            NameResolutionError: If the counterpart cannot be named.
            CounterpartUndefinedError: See ``counterpart``.
        """
        if facts.mode is VisibilityMode.OPEN:
            return None
        name = resolve_display_name(resolve_name, self.counterpart(facts, requester))
        return self.template.format(name=name)


@dataclass(frozen=True)
class CommentView:
    """Outcome of evaluating one comment for one requester."""

    visible: bool
    label: str | None = None


class CommentVisibilityService:
    """Gate-then-label evaluation of a single comment.

    The labeler only runs for requesters the evaluator admits, so a denied
    requester learns nothing about the comment's audience.
    """

    def __init__(
        self,
        resolve_name: NameResolver,
        evaluator: AccessEvaluator | None = None,
        labeler: DisclosureLabeler | None = None,
    ) -> None:
        self._resolve_name = resolve_name
        self._evaluator = evaluator or AccessEvaluator()
        self._labeler = labeler or _default_labeler()

    def viewable(self, facts: CommentVisibilityFacts, requester: Identity) -> bool:
        """Whether the requester may view the comment."""
        return self._evaluator.can_view(facts, requester)

    def viewers_label(self, facts: CommentVisibilityFacts, requester: Identity) -> str | None:
        """Disclosure label for a permitted requester, None otherwise."""
        return self.view(facts, requester).label

    def view(self, facts: CommentVisibilityFacts, requester: Identity) -> CommentView:
        """Evaluate access and, when granted, the disclosure label."""
        if not self._evaluator.can_view(facts, requester):
            logger.debug("Comment hidden from requester (mode=%s)", facts.mode.value)
            return CommentView(visible=False)

        label = self._labeler.label(facts, requester, self._resolve_name)
        logger.debug(
            "Comment visible to requester (mode=%s, labelled=%s)",
            facts.mode.value,
            label is not None,
        )
        return CommentView(visible=True, label=label)


# =============================================================================
# MODULE-LEVEL HELPERS
# =============================================================================

_evaluator = AccessEvaluator()


def _default_labeler() -> DisclosureLabeler:
    config = get_config()
    return DisclosureLabeler(
        template=config.disclosure_template,
        strict_counterpart=config.strict_counterpart,
    )


def can_view(facts: CommentVisibilityFacts, requester: Identity) -> bool:
    """Whether the requester may view the comment."""
    return _evaluator.can_view(facts, requester)


def disclosure_label(
    facts: CommentVisibilityFacts,
    requester: Identity,
    resolve_name: NameResolver,
) -> str | None:
    """Disclosure label using the configured template.

    Only call this for a requester that can_view already admitted.
    """
    return _default_labeler().label(facts, requester, resolve_name)


def get_service(resolve_name: NameResolver) -> CommentVisibilityService:
    """Create a service wired with the configured components."""
    return CommentVisibilityService(resolve_name, evaluator=_evaluator, labeler=_default_labeler())


__all__ = [
    "AccessEvaluator",
    "DisclosureLabeler",
    "CommentView",
    "CommentVisibilityService",
    "can_view",
    "disclosure_label",
    "get_service",
]
