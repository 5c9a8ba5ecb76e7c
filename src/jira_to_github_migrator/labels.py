"""
Creation of the migration labels in a GitHub repository.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, NamedTuple

from github import GithubException

from .exceptions import MigrationError

if TYPE_CHECKING:
    from collections.abc import Iterable

    from github.Repository import Repository as GithubRepository

    from .models import Label
    from .rate_limit import RateLimiter

logger: logging.Logger = logging.getLogger(__name__)


def _is_already_exists_error(exc: GithubException) -> bool:
    """Check if a GithubException is a 422 'already_exists' validation error."""
    if not isinstance(exc.data, dict):
        return False
    errors: object = exc.data.get("errors")  # pyright: ignore[reportUnknownVariableType]
    if not isinstance(errors, list):
        return False
    return any(isinstance(e, dict) and e.get("code") == "already_exists" for e in errors)  # pyright: ignore[reportUnknownArgumentType,reportUnknownVariableType]


class LabelProvisioningResult(NamedTuple):
    """Result of label provisioning."""

    created: list[str]
    """Names of the labels created in the repository."""
    existing: dict[str, str]
    """Requested label name -> name of the label that was already there."""


def create_labels(
    github_repo: GithubRepository,
    labels: Iterable[Label],
    rate_limiter: RateLimiter | None = None,
) -> LabelProvisioningResult:
    """Create the given labels in a GitHub repository, skipping existing ones.

    Matching with existing GitHub labels is case-insensitive (GitHub treats
    "Bug" and "bug" as the same label). Existing labels keep their color.

    Args:
        github_repo: The GitHub repository to create labels in
        labels: Labels to create
        rate_limiter: Optional limiter consulted before each create call

    Returns:
        LabelProvisioningResult with created and existing labels

    Raises:
        MigrationError: If a label cannot be created
    """
    created: list[str] = []
    existing: dict[str, str] = {}

    try:
        # Lowercase name -> actual name
        github_labels: dict[str, str] = {label.name.lower(): label.name for label in github_repo.get_labels()}
    except GithubException as e:
        msg = f"Failed to list labels of {github_repo.full_name}: {e}"
        raise MigrationError(msg) from e

    for label in sorted(labels, key=lambda label: label.name):
        existing_name = github_labels.get(label.name.lower())
        if existing_name is not None:
            existing[label.name] = existing_name
            logger.info(f"Using existing label: {label.name} -> {existing_name}")
            continue

        if rate_limiter is not None:
            rate_limiter.obtain_permit()
        try:
            github_label = github_repo.create_label(
                name=label.name,
                color=label.color,
                description=label.description,
            )
        except GithubException as e:
            if e.status == 422 and _is_already_exists_error(e):
                # Created concurrently, e.g. by GitHub's default label provisioning
                try:
                    existing_label = github_repo.get_label(label.name)
                except GithubException as lookup_error:
                    msg = f"Failed to look up existing label {label.name}"
                    raise MigrationError(msg) from lookup_error
                existing[label.name] = existing_label.name
                logger.debug(f"Label already existed: {label.name} -> {existing_label.name}")
                continue
            msg = f"Failed to create label {label.name}"
            raise MigrationError(msg) from e

        github_labels[github_label.name.lower()] = github_label.name
        created.append(github_label.name)
        logger.info(f"Created label: {github_label.name} ({label.color})")

    logger.info(f"Created {len(created)} labels, {len(existing)} already existed")
    return LabelProvisioningResult(created=created, existing=existing)
