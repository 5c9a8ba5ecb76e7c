"""
Command-line interface for the Jira to GitHub label migration.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING

from . import github_utils as ghu
from . import jira_utils
from .config import COMPONENT_MAPPINGS, DEFAULT_PROJECT, build_label_handler
from .exceptions import MigrationError
from .labels import create_labels
from .models import JiraIssue
from .rate_limit import RateLimiter
from .utils import setup_logging

if TYPE_CHECKING:
    from collections.abc import Sequence

logger: logging.Logger = logging.getLogger(__name__)


def parse_arguments(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="Map Jira issue metadata to GitHub labels")

    common = argparse.ArgumentParser(add_help=False)
    _ = common.add_argument(
        "--project",
        "-p",
        default=DEFAULT_PROJECT,
        choices=sorted(COMPONENT_MAPPINGS),
        help=f"Spring Data project whose component labels to use (default: {DEFAULT_PROJECT})",
    )
    _ = common.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")

    subparsers = parser.add_subparsers(dest="command", required=True)

    _ = subparsers.add_parser("list-labels", parents=[common], help="Print every label the configuration can apply")

    resolve = subparsers.add_parser("resolve", parents=[common], help="Print the labels of Jira issues")
    _ = resolve.add_argument("issues", nargs="+", help="Jira issue JSON file, or issue key when --jira-url is given")
    _ = resolve.add_argument("--jira-url", help="Jira base URL to fetch issue keys from")

    provision = subparsers.add_parser("provision", parents=[common], help="Create the labels in a GitHub repository")
    _ = provision.add_argument("github_repo", help="GitHub repository path (owner/repo)")
    _ = provision.add_argument(
        "--github-pass-token", help="Path for GitHub token in pass utility (default: github/cli/token)"
    )

    return parser.parse_args(argv)


def _load_issue(source: str, jira_url: str | None, rate_limiter: RateLimiter) -> JiraIssue:
    if jira_url:
        return jira_utils.get_issue(jira_url, source, rate_limiter=rate_limiter)
    try:
        data = json.loads(Path(source).read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        msg = f"Failed to read Jira issue from {source}: {e}"
        raise MigrationError(msg) from e
    return JiraIssue.from_json(data)


def _list_labels(args: argparse.Namespace) -> None:
    for label in sorted(build_label_handler(args.project).get_all_labels(), key=lambda label: label.name):
        print(f"{label.name} #{label.color}")


def _resolve(args: argparse.Namespace) -> None:
    handler = build_label_handler(args.project)
    rate_limiter = RateLimiter()
    for source in args.issues:
        issue = _load_issue(source, args.jira_url, rate_limiter)
        labels = ", ".join(sorted(handler.get_labels_for(issue)))
        print(f"{issue.key or source}: {labels}")


def _provision(args: argparse.Namespace) -> None:
    handler = build_label_handler(args.project)
    client = ghu.get_client(ghu.get_token(args.github_pass_token))
    repo = ghu.get_repo(client, args.github_repo)
    result = create_labels(repo, handler.get_all_labels(), rate_limiter=RateLimiter())
    print(f"Created {len(result.created)} labels, {len(result.existing)} already existed")


def main(argv: Sequence[str] | None = None) -> None:
    """Main entry point."""
    args = parse_arguments(argv)

    verbose: bool = getattr(args, "verbose", False)
    setup_logging(verbose=verbose)

    commands = {"list-labels": _list_labels, "resolve": _resolve, "provision": _provision}
    try:
        commands[args.command](args)
    except MigrationError:
        logger.exception("Command failed")
        sys.exit(1)
    sys.exit(0)
