"""
Field value to label mapping for Jira issues.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from enum import Enum
from typing import TYPE_CHECKING

from . import label_factories
from .exceptions import LabelConfigurationError

if TYPE_CHECKING:
    from .label_factories import LabelFactory
    from .models import JiraIssue, Label
    from .rules import FieldMapping

logger: logging.Logger = logging.getLogger(__name__)


class FieldType(Enum):
    """Jira issue fields that mapping rules can read."""

    ISSUE_TYPE = "issue_type"
    RESOLUTION = "resolution"
    STATUS = "status"
    VERSION = "version"
    LABEL = "label"
    COMPONENT = "component"

    @property
    def default_factory(self) -> LabelFactory:
        """Label factory used when a mapping does not name one."""
        return _DEFAULT_FACTORIES[self]

    def values_of(self, issue: JiraIssue) -> tuple[str, ...]:
        """Return the issue's raw value(s) for this field, skipping empty ones."""
        if self is FieldType.ISSUE_TYPE:
            values: Iterable[str | None] = (issue.issue_type,)
        elif self is FieldType.RESOLUTION:
            values = (issue.resolution,)
        elif self is FieldType.STATUS:
            values = (issue.status,)
        elif self is FieldType.VERSION:
            values = (issue.fix_version,)
        elif self is FieldType.LABEL:
            values = issue.labels
        else:
            values = issue.components
        return tuple(value for value in values if value is not None)


_DEFAULT_FACTORIES: dict[FieldType, LabelFactory] = {
    FieldType.ISSUE_TYPE: label_factories.TYPE_LABEL,
    FieldType.RESOLUTION: label_factories.STATUS_LABEL,
    FieldType.STATUS: label_factories.STATUS_LABEL,
    FieldType.VERSION: label_factories.STATUS_LABEL,
    FieldType.LABEL: label_factories.TYPE_LABEL,
    FieldType.COMPONENT: label_factories.IN_LABEL,
}


class FieldValueLabelHandler:
    """Maps exact Jira field values to GitHub labels.

    A value matches only if it is equal (case-sensitive) to the registered
    value. Multi-valued fields (labels, components) can contribute several
    labels for one issue.
    """

    def __init__(self) -> None:
        self._mappings: dict[FieldType, dict[str, Label]] = {}

    def add_mapping(
        self,
        field_type: FieldType,
        value: str,
        label_name: str,
        factory: LabelFactory | None = None,
    ) -> None:
        """Register the label to apply when field_type has the given value.

        Registering the same field and value again replaces the earlier label.
        """
        if not isinstance(field_type, FieldType):
            msg = f"Invalid field type: {field_type!r}"
            raise LabelConfigurationError(msg)

        label = (factory or field_type.default_factory)(label_name)
        values = self._mappings.setdefault(field_type, {})
        previous = values.get(value)
        if previous is not None and previous.name != label.name:
            logger.warning(f"Replacing mapping {field_type.name} '{value}': {previous.name} -> {label.name}")
        values[value] = label

    def add_mappings(self, mappings: Iterable[FieldMapping]) -> None:
        for mapping in mappings:
            self.add_mapping(mapping.field_type, mapping.value, mapping.label_name, mapping.factory)

    def get_all_labels(self) -> set[Label]:
        return {label for values in self._mappings.values() for label in values.values()}

    def get_labels_for(self, issue: JiraIssue) -> set[str]:
        labels: set[str] = set()
        for field_type, values in self._mappings.items():
            for value in field_type.values_of(issue):
                label = values.get(value)
                if label is not None:
                    labels.add(label.name)
        return labels
