"""Value types shared by the path, tree and source layers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, slots=True)
class FileRef:
    """Opaque handle for an uploaded file.

    The tree layers never look inside a ``FileRef``; it is placed into the
    tree, or into a sequence of file references, exactly as received.
    """

    filename: str
    size: int
    content_type: str | None = None
    stream: Any = field(default=None, repr=False, compare=False)


type Scalar = str | bool | int | float | None
type Value = Scalar | FileRef | dict[str, Value] | list[Value]
type ValueTree = dict[str, Value]


@dataclass(frozen=True, slots=True)
class Property:
    """A single ``(path, value)`` pair as extracted from a request."""

    path: str
    value: Scalar | FileRef


type GroupedProperties = dict[str, list[Property]]
