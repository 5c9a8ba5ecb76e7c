"""Declarative label rules.

Rules are plain records so that a migration configuration can be written as
tables of data and registered on the handlers in one go.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, NamedTuple

if TYPE_CHECKING:
    from .field_mapper import FieldType
    from .label_factories import LabelFactory
    from .label_handlers import LabelPredicate


@dataclass(frozen=True)
class FieldMapping:
    """Apply label_name when the Jira field has exactly the given value."""

    field_type: FieldType
    value: str
    label_name: str
    factory: LabelFactory | None = None  # None: default factory of field_type


class Supersede(NamedTuple):
    """The specific label replaces the general one when both are present."""

    general: str
    specific: str


class Removal(NamedTuple):
    """When trigger is present, labels matching predicate are removed."""

    trigger: str
    predicate: LabelPredicate


def prefixed(prefix: str) -> LabelPredicate:
    """Predicate matching label names that start with prefix."""
    return lambda name: name.startswith(prefix)


def named(label_name: str) -> LabelPredicate:
    """Predicate matching exactly one label name."""
    return lambda name: name == label_name
