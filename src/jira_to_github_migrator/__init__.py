"""
Jira to GitHub Label Migration

Decides the GitHub labels of migrated Jira issues from their issue type,
resolution, status, fix version, Jira labels, components and votes.
"""

from __future__ import annotations

from .cli import main
from .config import build_label_handler
from .exceptions import LabelConfigurationError, MigrationError
from .field_mapper import FieldType, FieldValueLabelHandler
from .label_handlers import CompositeLabelHandler, PredicateLabelHandler
from .models import ImportIssue, JiraIssue, Label
from .rate_limit import RateLimiter
from .utils import setup_logging

# Package version
__version__ = "0.1.0"

__all__ = [
    "CompositeLabelHandler",
    "FieldType",
    "FieldValueLabelHandler",
    "ImportIssue",
    "JiraIssue",
    "Label",
    "LabelConfigurationError",
    "MigrationError",
    "PredicateLabelHandler",
    "RateLimiter",
    "build_label_handler",
    "main",
    "setup_logging",
]
