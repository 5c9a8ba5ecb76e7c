"""
Custom exception classes for the Jira to GitHub migration tool.
"""

from __future__ import annotations


class MigrationError(Exception):
    """Base exception for migration errors."""


class LabelConfigurationError(MigrationError):
    """Raised when label rules are registered with invalid arguments."""
