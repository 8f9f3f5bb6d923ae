"""Collapse integer-keyed mappings into ordered sequences."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from .coercion import INT64_MAX


if TYPE_CHECKING:
    from formtree.types import Value


_INDEX_PATTERN = re.compile(r"[+-]?[0-9]+")


def _indices(mapping: dict[str, Value]) -> dict[str, int] | None:
    indices: dict[str, int] = {}
    for key in mapping:
        if not _INDEX_PATTERN.fullmatch(key):
            return None
        if len(key.lstrip("+-").lstrip("0")) > len(str(INT64_MAX)):
            return None
        index = int(key)
        if not 0 <= index <= INT64_MAX:
            return None
        indices[key] = index
    return indices


def collapse_array(mapping: Value, *, max_index: int | None = None) -> Value:
    """Return ``mapping`` as a list when every key is an array index.

    A key is an index when it parses as a non-negative base-10 integer, so
    ``"01"``, ``"+1"`` and ``"-0"`` count but ``"-1"`` and keys beyond
    the signed 64-bit range do not. The list is
    sized ``max(index) + 1`` and indices that were never written hold ``None``.
    Keys spelling the same index (``"1"`` and ``"01"``) resolve in insertion
    order, the later one winning. Mappings that are empty, have any other key,
    or whose highest index exceeds ``max_index`` are returned unchanged, as is
    any value that is not a mapping.
    """
    if not isinstance(mapping, dict) or not mapping:
        return mapping

    indices = _indices(mapping)
    if indices is None:
        return mapping

    highest = max(indices.values())
    if max_index is not None and highest > max_index:
        return mapping

    sequence: list[Value] = [None] * (highest + 1)
    for key, index in indices.items():
        sequence[index] = mapping[key]
    return sequence
