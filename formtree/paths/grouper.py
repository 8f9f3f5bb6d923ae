"""Partition flat properties by their top-level path segment."""

from __future__ import annotations

from collections import defaultdict
from typing import TYPE_CHECKING

from formtree.types import GroupedProperties, Property

from .translator import to_dot_path


if TYPE_CHECKING:
    from collections.abc import Iterable


def top_level_key(dot_path: str) -> str:
    """Return the first segment of a dot path."""
    return dot_path.partition(".")[0]


def group_properties(properties: Iterable[Property]) -> GroupedProperties:
    """Group properties by first path segment, rewriting paths to dot form.

    Order inside each group follows input order.
    """
    grouped: defaultdict[str, list[Property]] = defaultdict(list)
    for prop in properties:
        dot_path = to_dot_path(prop.path)
        grouped[top_level_key(dot_path)].append(Property(dot_path, prop.value))
    return dict(grouped)
