"""
Label configuration for migrating the Spring Data Jira projects to GitHub.

Component names differ per project, everything else is shared.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Final

from .exceptions import LabelConfigurationError
from .field_mapper import FieldType, FieldValueLabelHandler
from .label_factories import HAS_LABEL, STATUS_LABEL, TYPE_LABEL
from .label_handlers import CompositeLabelHandler
from .rules import FieldMapping, Removal, Supersede, named, prefixed

if TYPE_CHECKING:
    from .label_handlers import IssuePredicate
    from .models import JiraIssue, Label

logger: logging.Logger = logging.getLogger(__name__)

DEFAULT_PROJECT: Final[str] = "redis"

# Fix versions used in Jira as triage buckets rather than releases
SKIP_VERSIONS: Final[frozenset[str]] = frozenset({"Contributions Welcome", "Pending Closure", "Waiting for Triage"})

ISSUE_TYPE, RESOLUTION, STATUS, VERSION, LABEL, COMPONENT = (
    FieldType.ISSUE_TYPE,
    FieldType.RESOLUTION,
    FieldType.STATUS,
    FieldType.VERSION,
    FieldType.LABEL,
    FieldType.COMPONENT,
)

FIELD_MAPPINGS: Final[tuple[FieldMapping, ...]] = (
    # "Backport" is not mapped
    FieldMapping(ISSUE_TYPE, "Bug", "bug"),
    FieldMapping(ISSUE_TYPE, "New Feature", "enhancement"),
    FieldMapping(ISSUE_TYPE, "Improvement", "enhancement"),
    FieldMapping(ISSUE_TYPE, "Refactoring", "task"),
    FieldMapping(ISSUE_TYPE, "Pruning", "task"),
    FieldMapping(ISSUE_TYPE, "Task", "task"),
    FieldMapping(ISSUE_TYPE, "Sub-task", "task"),
    # "Complete", "Fixed", "Done", "Incomplete" and "Cannot Reproduce" get no label
    FieldMapping(RESOLUTION, "Deferred", "declined"),
    FieldMapping(RESOLUTION, "Won't Do", "declined"),
    FieldMapping(RESOLUTION, "Won't Fix", "declined"),
    FieldMapping(RESOLUTION, "Works as Designed", "declined"),
    FieldMapping(RESOLUTION, "Duplicate", "duplicate"),
    FieldMapping(RESOLUTION, "Invalid", "invalid"),
    # Open/closed and in-progress states show on the GitHub timeline
    FieldMapping(STATUS, "Waiting for Feedback", "waiting-for-feedback"),
    FieldMapping(VERSION, "Waiting for Triage", "waiting-for-triage", STATUS_LABEL),
    FieldMapping(VERSION, "Contributions Welcome", "ideal-for-contribution", STATUS_LABEL),
    FieldMapping(LABEL, "Regression", "regression", TYPE_LABEL),
)


def _components(*mappings: tuple[str, str]) -> tuple[FieldMapping, ...]:
    """Component mappings, with the documentation and infrastructure ones every project has."""
    return (
        *(FieldMapping(COMPONENT, component, label) for component, label in mappings),
        FieldMapping(COMPONENT, "Documentation", "documentation", TYPE_LABEL),
        FieldMapping(COMPONENT, "Infrastructure", "task", TYPE_LABEL),
    )


def _dependencies() -> FieldMapping:
    return FieldMapping(COMPONENT, "Dependencies", "dependency-upgrade", TYPE_LABEL)


COMPONENT_MAPPINGS: Final[dict[str, tuple[FieldMapping, ...]]] = {
    "commons": (
        _dependencies(),
        *_components(
            ("API", "core"),
            ("Core", "core"),
            ("Integration", "web"),
            ("Mapping / Conversion", "mapping"),
            ("Query", "repository"),
            ("Repositories", "repository"),
        ),
    ),
    "cassandra": _components(
        ("API", "core"),
        ("Core", "core"),
        ("Cassandra Administration", "core"),
        ("Configuration", "core"),
        ("SessionFactory", "core"),
        ("Template API", "core"),
        ("Kotlin", "kotlin"),
        ("Mapping", "mapping"),
        ("Repository", "repository"),
    ),
    "couchbase": (
        _dependencies(),
        *_components(("Core", "core"), ("Mapping metadata", "mapping"), ("Repositories", "repository")),
    ),
    "elasticsearch": (
        _dependencies(),
        *_components(("Core", "core"), ("Mapping", "mapping"), ("Repositories", "repository")),
    ),
    "jdbc": (
        _dependencies(),
        *_components(
            ("Core", "core"),
            ("ORCL", "core"),
            ("Converter", "mapping"),
            ("Mapping", "mapping"),
            ("Relational", "relational"),
            ("R2DBC", "relational"),
            ("Repository", "repository"),
            ("Statement Builder", "statement-builder"),
        ),
    ),
    "jpa": _components(
        ("Core", "core"),
        ("Namespace", "core"),
        ("Specification", "core"),
        ("Query Parser", "query-parser"),
        ("Querydsl", "querydsl"),
    ),
    "kv": _components(("Configuration", "core"), ("Core", "core"), ("Map", "map"), ("Repositories", "repository")),
    "ldap": _components(("Repository", "repository")),
    "mongodb": _components(
        ("Aggregation framework", "aggregation-framework"),
        ("Core", "core"),
        ("GridFS", "gridfs"),
        ("Kotlin", "kotlin"),
        ("Mapping / Conversion", "mapping"),
        ("Repository", "repository"),
    ),
    "neo4j": (
        FieldMapping(COMPONENT, "CORE", "core"),
        FieldMapping(COMPONENT, "EXAMPLES", "core"),
        FieldMapping(COMPONENT, "DOC", "documentation", TYPE_LABEL),
        FieldMapping(COMPONENT, "Infrastructure", "task", TYPE_LABEL),
    ),
    "redis": _components(
        ("Cache", "cache"),
        ("Core", "core"),
        ("Jedis Driver", "jedis"),
        ("Lettuce Driver", "lettuce"),
        ("Kotlin", "kotlin"),
        ("Repository Support", "repository"),
    ),
    "rest": _components(
        ("API Documentation", "api-documentation"),
        ("Content negotiation", "content-negotiation"),
        ("Repositories", "repository"),
    ),
    "solr": _components(("Core", "core"), ("Namespace", "core"), ("Repository", "repository")),
}


def _unresolved(issue: JiraIssue) -> bool:
    return issue.resolution is None


def _untriaged(issue: JiraIssue) -> bool:
    return issue.resolution is None and issue.fix_version is None


VOTES_THRESHOLD: Final[int] = 10

PREDICATE_LABELS: Final[tuple[tuple[Label, IssuePredicate], ...]] = (
    (STATUS_LABEL("waiting-for-triage"), lambda issue: _untriaged(issue) and issue.has_label("triage.pending")),
    (
        STATUS_LABEL("ideal-for-contribution"),
        lambda issue: _untriaged(issue) and issue.has_label("triage.3.pr-welcome"),
    ),
    (STATUS_LABEL("blocked"), lambda issue: _unresolved(issue) and issue.has_label("triage.5.blocked")),
    (STATUS_LABEL("declined"), lambda issue: _unresolved(issue) and issue.has_label("triage.4.not-likely")),
    (HAS_LABEL("votes-jira"), lambda issue: issue.votes >= VOTES_THRESHOLD),
)

SUPERSEDES: Final[tuple[Supersede, ...]] = (
    Supersede("type: bug", "type: regression"),
    Supersede("type: task", "type: documentation"),
    Supersede("status: waiting-for-triage", "status: waiting-for-feedback"),
    Supersede("type: task", "type: dependency-upgrade"),
    Supersede("type: enhancement", "type: dependency-upgrade"),
    Supersede("type: enhancement", "type: task"),
)

REMOVALS: Final[tuple[Removal, ...]] = (
    # Jira users pick the type when opening an issue; on GitHub it is set at triage
    Removal("status: waiting-for-triage", prefixed("type: ")),
    # Invalid issues have no meaningful type
    Removal("status: invalid", prefixed("type: ")),
    # Anything declined or duplicate is neither a bug nor a regression
    Removal("status: declined", named("type: bug")),
    Removal("status: declined", named("type: regression")),
    Removal("status: duplicate", named("type: bug")),
    Removal("status: duplicate", named("type: regression")),
)


def build_label_handler(project: str = DEFAULT_PROJECT) -> CompositeLabelHandler:
    """Build the label handler for one Spring Data project.

    Args:
        project: Key of COMPONENT_MAPPINGS selecting the component labels

    Returns:
        CompositeLabelHandler with all mappings and conflict rules registered

    Raises:
        LabelConfigurationError: If the project is unknown
    """
    if project not in COMPONENT_MAPPINGS:
        msg = f"Unknown project: {project} (expected one of: {', '.join(sorted(COMPONENT_MAPPINGS))})"
        raise LabelConfigurationError(msg)

    field_handler = FieldValueLabelHandler()
    field_handler.add_mappings(COMPONENT_MAPPINGS[project])
    field_handler.add_mappings(FIELD_MAPPINGS)

    handler = CompositeLabelHandler()
    handler.add_handler(field_handler)
    for label, predicate in PREDICATE_LABELS:
        handler.add_predicate(label, predicate)
    for general, specific in SUPERSEDES:
        handler.add_supersede(general, specific)
    for trigger, predicate in REMOVALS:
        handler.add_removal(trigger, predicate)

    logger.debug(f"Built label handler for project '{project}'")
    return handler


def milestone_filter(version_name: str) -> bool:
    """Return True if a Jira fix version should become a GitHub milestone."""
    return version_name not in SKIP_VERSIONS
