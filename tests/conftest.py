"""
Pytest configuration and fixtures.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import pytest

from jira_to_github_migrator.config import build_label_handler
from jira_to_github_migrator.models import JiraIssue

if TYPE_CHECKING:
    from collections.abc import Callable

    from jira_to_github_migrator.label_handlers import CompositeLabelHandler


@pytest.fixture
def spr_handler() -> CompositeLabelHandler:
    """Label handler of the default (Spring Data Redis) configuration."""
    return build_label_handler()


@pytest.fixture
def make_issue() -> Callable[..., JiraIssue]:
    """Factory for Jira issues; unset fields are empty."""

    def _make_issue(**fields: Any) -> JiraIssue:
        fields.setdefault("key", "DATAREDIS-1")
        for name in ("labels", "components"):
            if name in fields:
                fields[name] = tuple(fields[name])
        return JiraIssue(**fields)

    return _make_issue

