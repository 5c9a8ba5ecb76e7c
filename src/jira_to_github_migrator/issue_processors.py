"""
Issue processors applied to GitHub issues right before they are imported.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Final

from .label_factories import STATUS_LABEL
from .models import ImportIssue

if TYPE_CHECKING:
    from collections.abc import Callable

    from .models import JiraIssue
    from .protocols import IssueProcessor, LabelHandler

logger: logging.Logger = logging.getLogger(__name__)


class CompositeIssueProcessor:
    """Runs several issue processors in order."""

    def __init__(self, *processors: IssueProcessor) -> None:
        self.processors: list[IssueProcessor] = list(processors)

    def before_import(self, issue: JiraIssue, import_issue: ImportIssue) -> None:
        for processor in self.processors:
            processor.before_import(issue, import_issue)


class AssigneeDroppingIssueProcessor:
    """Unassigns issues that nobody is actually working on.

    That is the case for backlog issues and for issues that are waiting for
    triage or open for contributions.
    """

    UNASSIGNED_LABELS: Final[frozenset[str]] = frozenset(
        {STATUS_LABEL("waiting-for-triage").name, STATUS_LABEL("ideal-for-contribution").name}
    )

    def before_import(self, issue: JiraIssue, import_issue: ImportIssue) -> None:
        in_backlog = issue.fix_version is not None and "Backlog" in issue.fix_version
        if in_backlog or not self.UNASSIGNED_LABELS.isdisjoint(import_issue.labels):
            if import_issue.assignee is not None:
                logger.debug(f"Dropping assignee {import_issue.assignee} of {issue.key}")
            import_issue.assignee = None


def build_import_issue(
    issue: JiraIssue,
    label_handler: LabelHandler,
    processor: IssueProcessor | None = None,
    *,
    title: str | None = None,
    milestone_filter: Callable[[str], bool] | None = None,
) -> ImportIssue:
    """Build the GitHub side of a Jira issue with resolved labels.

    Args:
        issue: Jira issue snapshot
        label_handler: Handler deciding the labels
        processor: Optional processor run on the result before it is returned
        title: Issue title (defaults to the Jira key)
        milestone_filter: Decides whether the fix version becomes the milestone

    Returns:
        ImportIssue ready to be created on GitHub
    """
    milestone = issue.fix_version
    if milestone is not None and milestone_filter is not None and not milestone_filter(milestone):
        milestone = None

    import_issue = ImportIssue(
        title=title or issue.key,
        labels=label_handler.get_labels_for(issue),
        assignee=issue.assignee,
        milestone_title=milestone,
    )
    if processor is not None:
        processor.before_import(issue, import_issue)
    return import_issue
