"""Data models exchanged between Jira, the label handlers and GitHub.

JiraIssue is the read-only snapshot of a Jira issue that label handlers
inspect. Label and ImportIssue describe what ends up on the GitHub side.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from .exceptions import MigrationError


@dataclass(frozen=True)
class Label:
    """A label that can be applied to GitHub issues.

    Labels compare and hash by name only, matching GitHub where the name
    identifies the label within a repository.
    """

    name: str
    color: str = field(compare=False)  # Hex color without '#' prefix (e.g., "e3d9fc")
    description: str = field(default="", compare=False)


def _list_of(fields: Mapping[str, Any], name: str) -> list[Any]:
    """Return a list-valued Jira field, empty if missing."""
    value = fields.get(name) or []
    if not isinstance(value, list):
        msg = f"Invalid Jira issue payload: '{name}' is not a list"
        raise MigrationError(msg)
    return value


def _name_of(value: object) -> str | None:
    """Return the "name" entry of a Jira field object, if any."""
    if isinstance(value, Mapping):
        name = value.get("name")
        return name if isinstance(name, str) else None
    return None


@dataclass(frozen=True)
class JiraIssue:
    """Snapshot of the Jira issue fields used to decide GitHub labels."""

    key: str
    issue_type: str | None = None
    resolution: str | None = None
    status: str | None = None
    fix_version: str | None = None
    labels: tuple[str, ...] = ()
    components: tuple[str, ...] = ()
    votes: int = 0
    assignee: str | None = None

    def has_label(self, label: str) -> bool:
        return label in self.labels

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> JiraIssue:
        """Build a snapshot from a Jira REST issue payload.

        Only the first fix version is kept. Missing or null fields read as
        None or empty.

        Raises:
            MigrationError: If the payload does not have the shape of a Jira issue
        """
        if not isinstance(data, Mapping):
            msg = f"Invalid Jira issue payload: expected an object, got {type(data).__name__}"
            raise MigrationError(msg)
        fields = data.get("fields") or {}
        if not isinstance(fields, Mapping):
            msg = "Invalid Jira issue payload: 'fields' is not an object"
            raise MigrationError(msg)

        fix_versions = [name for v in _list_of(fields, "fixVersions") if (name := _name_of(v))]
        components = tuple(name for c in _list_of(fields, "components") if (name := _name_of(c)))

        assignee_data = fields.get("assignee")
        assignee: str | None = None
        if isinstance(assignee_data, Mapping):
            assignee = assignee_data.get("key") or assignee_data.get("name") or assignee_data.get("accountId")

        votes_data = fields.get("votes")
        votes = 0
        if isinstance(votes_data, Mapping):
            try:
                votes = int(votes_data.get("votes") or 0)
            except (TypeError, ValueError) as e:
                msg = f"Invalid Jira issue payload: vote count {votes_data.get('votes')!r} is not a number"
                raise MigrationError(msg) from e

        return cls(
            key=str(data.get("key", "")),
            issue_type=_name_of(fields.get("issuetype")),
            resolution=_name_of(fields.get("resolution")),
            status=_name_of(fields.get("status")),
            fix_version=fix_versions[0] if fix_versions else None,
            labels=tuple(str(label) for label in _list_of(fields, "labels")),
            components=components,
            votes=votes,
            assignee=assignee,
        )


@dataclass
class ImportIssue:
    """An issue about to be created on GitHub.

    Issue processors may adjust it (e.g. drop the assignee) before import.
    """

    title: str
    labels: set[str] = field(default_factory=set)
    assignee: str | None = None
    milestone_title: str | None = None
