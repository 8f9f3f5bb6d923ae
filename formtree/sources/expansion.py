"""Expansion of repeated request fields into indexed paths."""

from __future__ import annotations

from typing import TYPE_CHECKING

from formtree.types import FileRef, Property, Scalar


if TYPE_CHECKING:
    from collections.abc import Iterable


def indexed_path(path: str, index: int) -> str:
    """Append an array index in bracket notation: ``files`` -> ``files[2]``."""
    return f"{path}[{index}]"


def _collect(pairs: Iterable[tuple[str, Scalar | FileRef]]) -> dict[str, list[Scalar | FileRef]]:
    collected: dict[str, list[Scalar | FileRef]] = {}
    for name, value in pairs:
        collected.setdefault(name, []).append(value)
    return collected


def expand_multi_values(pairs: Iterable[tuple[str, Scalar | FileRef]]) -> list[Property]:
    """Turn repeated field names into indexed properties.

    ``tags=a&tags=b`` becomes ``tags[0]=a`` and ``tags[1]=b``. A name that is
    used once, or that already carries brackets, keeps its first value.
    """
    properties: list[Property] = []
    for name, values in _collect(pairs).items():
        if "[" in name or len(values) == 1:
            properties.append(Property(name, values[0]))
            continue
        properties.extend(Property(indexed_path(name, index), value) for index, value in enumerate(values))
    return properties


def expand_files(pairs: Iterable[tuple[str, FileRef]]) -> list[Property]:
    """Index repeated file fields, bracketed or not.

    ``docs[0][files]`` uploaded twice becomes ``docs[0][files][0]`` and
    ``docs[0][files][1]``; a single upload keeps its field name.
    """
    properties: list[Property] = []
    for name, files in _collect(pairs).items():
        if len(files) == 1:
            properties.append(Property(name, files[0]))
            continue
        properties.extend(Property(indexed_path(name, index), file) for index, file in enumerate(files))
    return properties
