"""
Factories for the prefixed GitHub labels used by the migration.

Each category of label shares a prefix and a color, e.g. "type: bug" and
"type: regression" are both rendered in the "type" color.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Final, TypeAlias

from .models import Label

LabelFactory: TypeAlias = Callable[[str], Label]

TYPE_COLOR: Final[str] = "e3d9fc"
STATUS_COLOR: Final[str] = "fef2c0"
IN_COLOR: Final[str] = "e8f9de"
HAS_COLOR: Final[str] = "dfdfdf"


def create(prefix: str, name: str, color: str) -> Label:
    return Label(name=prefix + name, color=color)


def TYPE_LABEL(name: str) -> Label:  # noqa: N802
    return create("type: ", name, TYPE_COLOR)


def STATUS_LABEL(name: str) -> Label:  # noqa: N802
    return create("status: ", name, STATUS_COLOR)


def IN_LABEL(name: str) -> Label:  # noqa: N802
    return create("in: ", name, IN_COLOR)


def HAS_LABEL(name: str) -> Label:  # noqa: N802
    return create("has: ", name, HAS_COLOR)
