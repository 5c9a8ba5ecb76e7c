"""Protocols defining the contracts for label handlers and issue processors.

Label decisions are split across small handlers that each look at one
aspect of a Jira issue:

1. FieldValueLabelHandler: maps raw field values (issue type, resolution,
   components, ...) to labels
2. PredicateLabelHandler: adds one label when a condition on the issue holds
3. CompositeLabelHandler: combines handlers and resolves conflicts between
   the labels they produce

All three satisfy LabelHandler, so composites can nest other composites.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from .models import ImportIssue, JiraIssue, Label


class LabelHandler(Protocol):
    """Protocol for anything that contributes GitHub labels for a Jira issue."""

    def get_all_labels(self) -> set[Label]:
        """Return every label this handler could ever produce.

        Used to create the labels on GitHub before any issue is imported.
        """
        ...

    def get_labels_for(self, issue: JiraIssue) -> set[str]:
        """Return the names of the labels that apply to the given issue.

        Must not modify the issue and must return the same result for the
        same issue on every call.
        """
        ...


class IssueProcessor(Protocol):
    """Protocol for last-minute adjustments of an issue before import."""

    def before_import(self, issue: JiraIssue, import_issue: ImportIssue) -> None:
        """Adjust import_issue in place, based on the Jira issue it comes from."""
        ...
