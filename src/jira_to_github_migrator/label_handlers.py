"""
Predicate based and composite label handlers.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, TypeAlias

from .exceptions import LabelConfigurationError
from .models import JiraIssue

if TYPE_CHECKING:
    from .models import Label
    from .protocols import LabelHandler

logger: logging.Logger = logging.getLogger(__name__)

IssuePredicate: TypeAlias = Callable[[JiraIssue], bool]
LabelPredicate: TypeAlias = Callable[[str], bool]


class PredicateLabelHandler:
    """Applies a single label when a predicate on the issue holds."""

    def __init__(self, label: Label, predicate: IssuePredicate) -> None:
        self.label: Label = label
        self.predicate: IssuePredicate = predicate

    def get_all_labels(self) -> set[Label]:
        return {self.label}

    def get_labels_for(self, issue: JiraIssue) -> set[str]:
        return {self.label.name} if self.predicate(issue) else set()


def _any_of(predicates: list[LabelPredicate]) -> LabelPredicate:
    return lambda name: any(predicate(name) for predicate in predicates)


class CompositeLabelHandler:
    """Combines label handlers and resolves conflicts between their labels.

    Labels from all handlers are merged first. Then:

    - supersede rules drop a general label when a more specific one is also
      present (e.g. "type: bug" when "type: regression" is there), in the
      order they were added
    - removal rules drop every label matching a predicate when a trigger
      label is present (e.g. all "type: ..." labels for an issue that is
      still waiting for triage)
    """

    def __init__(self) -> None:
        self._handlers: list[LabelHandler] = []
        self._supersedes: list[tuple[str, str]] = []
        # Trigger label -> predicates; all predicates of a trigger apply
        self._removals: dict[str, list[LabelPredicate]] = {}

    def add_handler(self, handler: LabelHandler) -> None:
        self._handlers.append(handler)

    def add_predicate(self, label: Label, predicate: IssuePredicate) -> None:
        """Apply label to every issue matching predicate."""
        self.add_handler(PredicateLabelHandler(label, predicate))

    def add_supersede(self, general: str, specific: str) -> None:
        """If both labels are present, the specific one replaces the general one."""
        if general == specific:
            msg = f"Label cannot supersede itself: {general}"
            raise LabelConfigurationError(msg)
        self._supersedes.append((general, specific))

    def add_removal(self, trigger: str, predicate: LabelPredicate) -> None:
        """If trigger is present, remove every label matching predicate.

        Several removals for the same trigger are combined: a label is removed
        if any of them matches it.
        """
        if not trigger:
            msg = "Removal trigger label must not be empty"
            raise LabelConfigurationError(msg)
        predicates = self._removals.setdefault(trigger, [])
        if predicates:
            logger.debug(f"Adding removal rule #{len(predicates) + 1} for trigger '{trigger}'")
        predicates.append(predicate)

    def get_all_labels(self) -> set[Label]:
        return {label for handler in self._handlers for label in handler.get_all_labels()}

    def get_labels_for(self, issue: JiraIssue) -> set[str]:
        labels: set[str] = set()
        for handler in self._handlers:
            labels |= handler.get_labels_for(issue)

        for general, specific in self._supersedes:
            if general in labels and specific in labels:
                labels.discard(general)

        for trigger, predicates in self._removals.items():
            if trigger in labels:
                matches = _any_of(predicates)
                labels -= {name for name in labels if matches(name)}

        return labels
