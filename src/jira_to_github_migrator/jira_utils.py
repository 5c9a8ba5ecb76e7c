"""
Fetching Jira issues over the Jira REST API.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Final

import requests

from .exceptions import MigrationError
from .models import JiraIssue

if TYPE_CHECKING:
    from .rate_limit import RateLimiter

logger: logging.Logger = logging.getLogger(__name__)

# Only the fields read by the label handlers
ISSUE_FIELDS: Final[str] = "issuetype,resolution,status,fixVersions,labels,components,votes,assignee"
REQUEST_TIMEOUT_SECONDS: Final[int] = 30


def get_issue(
    base_url: str,
    key: str,
    *,
    session: requests.Session | None = None,
    rate_limiter: RateLimiter | None = None,
) -> JiraIssue:
    """Fetch a Jira issue and return its label-relevant snapshot.

    Args:
        base_url: Jira base URL (e.g., "https://jira.spring.io")
        key: Issue key (e.g., "DATAREDIS-1234")
        session: Optional requests session (for authentication or connection reuse)
        rate_limiter: Optional limiter consulted before the request

    Returns:
        JiraIssue snapshot

    Raises:
        MigrationError: If the issue cannot be fetched
    """
    url = f"{base_url.rstrip('/')}/rest/api/2/issue/{key}"
    if rate_limiter is not None:
        rate_limiter.obtain_permit()

    logger.debug(f"Fetching {url}")
    try:
        response = (session or requests).get(url, params={"fields": ISSUE_FIELDS}, timeout=REQUEST_TIMEOUT_SECONDS)
        response.raise_for_status()
        return JiraIssue.from_json(response.json())
    except (requests.RequestException, ValueError) as e:
        msg = f"Failed to fetch Jira issue {key}: {e}"
        raise MigrationError(msg) from e
