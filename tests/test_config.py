"""Tests for the Spring Data label configuration."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from jira_to_github_migrator.config import (
    COMPONENT_MAPPINGS,
    FIELD_MAPPINGS,
    PREDICATE_LABELS,
    build_label_handler,
    milestone_filter,
)
from jira_to_github_migrator.exceptions import LabelConfigurationError

if TYPE_CHECKING:
    from collections.abc import Callable

    from jira_to_github_migrator.label_handlers import CompositeLabelHandler
    from jira_to_github_migrator.models import JiraIssue


@pytest.mark.unit
class TestScenarios:
    def test_bug(self, spr_handler: CompositeLabelHandler, make_issue: Callable[..., JiraIssue]) -> None:
        assert spr_handler.get_labels_for(make_issue(issue_type="Bug")) == {"type: bug"}

    def test_regression_supersedes_bug(
        self, spr_handler: CompositeLabelHandler, make_issue: Callable[..., JiraIssue]
    ) -> None:
        issue = make_issue(issue_type="Bug", labels=["Regression"])
        assert spr_handler.get_labels_for(issue) == {"type: regression"}

    def test_declined_removes_bug(self, spr_handler: CompositeLabelHandler, make_issue: Callable[..., JiraIssue]) -> None:
        issue = make_issue(issue_type="Bug", resolution="Won't Fix")
        assert spr_handler.get_labels_for(issue) == {"status: declined"}

    def test_declined_removes_regression(
        self, spr_handler: CompositeLabelHandler, make_issue: Callable[..., JiraIssue]
    ) -> None:
        issue = make_issue(issue_type="Bug", resolution="Works as Designed", labels=["Regression"])
        assert spr_handler.get_labels_for(issue) == {"status: declined"}

    def test_duplicate_removes_bug_and_regression(
        self, spr_handler: CompositeLabelHandler, make_issue: Callable[..., JiraIssue]
    ) -> None:
        issue = make_issue(issue_type="Bug", resolution="Duplicate", labels=["Regression"], components=["Core"])
        assert spr_handler.get_labels_for(issue) == {"status: duplicate", "in: core"}

    def test_votes_threshold(self, spr_handler: CompositeLabelHandler, make_issue: Callable[..., JiraIssue]) -> None:
        assert spr_handler.get_labels_for(make_issue(votes=10)) == {"has: votes-jira"}
        assert spr_handler.get_labels_for(make_issue(votes=9)) == set()

    def test_waiting_for_triage_removes_types(
        self, spr_handler: CompositeLabelHandler, make_issue: Callable[..., JiraIssue]
    ) -> None:
        issue = make_issue(issue_type="Improvement", labels=["triage.pending"], components=["Lettuce Driver"])
        assert spr_handler.get_labels_for(issue) == {"status: waiting-for-triage", "in: lettuce"}

    def test_waiting_for_triage_fix_version(
        self, spr_handler: CompositeLabelHandler, make_issue: Callable[..., JiraIssue]
    ) -> None:
        issue = make_issue(issue_type="Bug", fix_version="Waiting for Triage")
        assert spr_handler.get_labels_for(issue) == {"status: waiting-for-triage"}

    def test_triage_label_ignored_for_resolved_issues(
        self, spr_handler: CompositeLabelHandler, make_issue: Callable[..., JiraIssue]
    ) -> None:
        issue = make_issue(issue_type="Bug", resolution="Fixed", labels=["triage.pending", "triage.5.blocked"])
        assert spr_handler.get_labels_for(issue) == {"type: bug"}

    def test_triage_label_ignored_with_fix_version(
        self, spr_handler: CompositeLabelHandler, make_issue: Callable[..., JiraIssue]
    ) -> None:
        issue = make_issue(issue_type="Bug", fix_version="2.3 GA", labels=["triage.3.pr-welcome"])
        assert spr_handler.get_labels_for(issue) == {"type: bug"}

    def test_feedback_supersedes_triage(
        self, spr_handler: CompositeLabelHandler, make_issue: Callable[..., JiraIssue]
    ) -> None:
        issue = make_issue(issue_type="Bug", status="Waiting for Feedback", labels=["triage.pending"])
        # The triage label is superseded before it could remove the type
        assert spr_handler.get_labels_for(issue) == {"status: waiting-for-feedback", "type: bug"}

    def test_not_likely_is_declined(
        self, spr_handler: CompositeLabelHandler, make_issue: Callable[..., JiraIssue]
    ) -> None:
        issue = make_issue(issue_type="Bug", labels=["triage.4.not-likely"])
        assert spr_handler.get_labels_for(issue) == {"status: declined"}

    def test_documentation_component_supersedes_task(
        self, spr_handler: CompositeLabelHandler, make_issue: Callable[..., JiraIssue]
    ) -> None:
        issue = make_issue(issue_type="Task", components=["Documentation"])
        assert spr_handler.get_labels_for(issue) == {"type: documentation"}

    def test_invalid_removes_all_types(
        self, spr_handler: CompositeLabelHandler, make_issue: Callable[..., JiraIssue]
    ) -> None:
        issue = make_issue(issue_type="New Feature", resolution="Invalid", components=["Infrastructure"])
        assert spr_handler.get_labels_for(issue) == {"status: invalid"}

    def test_resolution_is_stable(self, spr_handler: CompositeLabelHandler, make_issue: Callable[..., JiraIssue]) -> None:
        issue = make_issue(issue_type="Bug", labels=["Regression", "triage.5.blocked"], components=["Cache"], votes=30)
        results = [spr_handler.get_labels_for(issue) for _ in range(3)]
        assert results[0] == results[1] == results[2]
        assert results[0] == {"type: regression", "status: blocked", "in: cache", "has: votes-jira"}


@pytest.mark.unit
class TestAllLabels:
    def test_labels_named_by_rules(self, spr_handler: CompositeLabelHandler) -> None:
        expected = {
            "type: bug",
            "type: enhancement",
            "type: task",
            "type: regression",
            "type: documentation",
            "status: declined",
            "status: duplicate",
            "status: invalid",
            "status: waiting-for-feedback",
            "status: waiting-for-triage",
            "status: ideal-for-contribution",
            "status: blocked",
            "has: votes-jira",
            "in: cache",
            "in: core",
            "in: jedis",
            "in: lettuce",
            "in: kotlin",
            "in: repository",
        }
        assert {label.name for label in spr_handler.get_all_labels()} == expected

    def test_labels_are_unique_by_name(self, spr_handler: CompositeLabelHandler) -> None:
        labels = spr_handler.get_all_labels()
        assert len(labels) == len({label.name for label in labels})

    def test_colors_follow_prefix(self, spr_handler: CompositeLabelHandler) -> None:
        colors = {"type: ": "e3d9fc", "status: ": "fef2c0", "in: ": "e8f9de", "has: ": "dfdfdf"}
        for label in spr_handler.get_all_labels():
            prefix = label.name.split(" ", 1)[0] + " "
            assert label.color == colors[prefix], label.name

    def test_rule_count(self) -> None:
        assert len(FIELD_MAPPINGS) == 17
        assert len(PREDICATE_LABELS) == 5


@pytest.mark.unit
class TestBuildLabelHandler:
    @pytest.mark.parametrize("project", sorted(COMPONENT_MAPPINGS))
    def test_every_project_builds(self, project: str, make_issue: Callable[..., JiraIssue]) -> None:
        handler = build_label_handler(project)
        assert "type: documentation" in {label.name for label in handler.get_all_labels()}
        assert handler.get_labels_for(make_issue(components=["Infrastructure"])) == {"type: task"}

    def test_project_components(self, make_issue: Callable[..., JiraIssue]) -> None:
        handler = build_label_handler("jdbc")
        issue = make_issue(components=["R2DBC", "Statement Builder", "Cache"])
        assert handler.get_labels_for(issue) == {"in: relational", "in: statement-builder"}

    def test_dependencies_supersede_enhancement(self, make_issue: Callable[..., JiraIssue]) -> None:
        handler = build_label_handler("commons")
        issue = make_issue(issue_type="Improvement", components=["Dependencies"])
        assert handler.get_labels_for(issue) == {"type: dependency-upgrade"}

    def test_unknown_project(self) -> None:
        with pytest.raises(LabelConfigurationError, match="Unknown project: spanner"):
            build_label_handler("spanner")


@pytest.mark.unit
class TestMilestoneFilter:
    @pytest.mark.parametrize("version", ["Contributions Welcome", "Pending Closure", "Waiting for Triage"])
    def test_triage_buckets_are_skipped(self, version: str) -> None:
        assert not milestone_filter(version)

    def test_release_versions_are_kept(self) -> None:
        assert milestone_filter("2.1 GA")
        assert milestone_filter("General Backlog")
