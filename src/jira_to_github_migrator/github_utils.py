from __future__ import annotations

import logging
import os
from typing import Final

from github import Github, UnknownObjectException
from github.Repository import Repository

from . import utils
from .exceptions import MigrationError

# Module-wide logger
logger: logging.Logger = logging.getLogger(__name__)

_TOKEN_ENV_VAR: Final[str] = "GITHUB_TOKEN"  # noqa: S105
_DEFAULT_TOKEN_PASS_PATH: Final[str] = "github/cli/token"  # noqa: S105


def get_token(pass_path: str | None = None) -> str | None:
    """Get GitHub token from pass path, env var GITHUB_TOKEN, or default pass location."""
    if pass_path:
        return utils.get_pass_value(pass_path)

    token: str | None = os.environ.get(_TOKEN_ENV_VAR)
    if token:
        return token

    try:
        return utils.get_pass_value(_DEFAULT_TOKEN_PASS_PATH)
    except utils.PassError:
        logger.warning("No GitHub token specified nor found")
        return None


def get_client(token: str | None = None) -> Github:
    """Get a GitHub client using the token."""
    return Github(token)


def get_repo(client: Github, repo_path: str) -> Repository:
    """Get an existing GitHub repository by its "owner/repo" path."""
    parts = repo_path.strip().split("/")
    if len(parts) != 2 or not all(parts):
        msg = f"Invalid GitHub repository path: '{repo_path}'. Expected format: 'owner/repository'"
        raise MigrationError(msg)

    try:
        return client.get_repo(repo_path)
    except UnknownObjectException as e:
        msg = f"GitHub repository {repo_path} not found"
        raise MigrationError(msg) from e
