"""Turn flat request properties into a nested, typed value tree."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from formtree.paths import group_properties
from formtree.tree import coerce_scalar, collapse_array, insert
from formtree.types import FileRef, Property, Scalar, Value, ValueTree


if TYPE_CHECKING:
    from collections.abc import Iterable


logger = logging.getLogger(__name__)

type PropertyLike = Property | tuple[str, Scalar | FileRef]


def _as_property(item: PropertyLike) -> Property:
    if isinstance(item, Property):
        return item
    path, value = item
    return Property(path, value)


class Materializer:
    """Build value trees from ``(path, value)`` properties.

    Parameters
    ----------
    coerce
        When True (the default) string leaves are converted with
        :func:`formtree.tree.coerce_scalar`. Pass False for values that are
        already typed.
    max_array_index
        Highest index an integer-keyed mapping may use and still become a list.
        Mappings above the bound stay mappings. ``None`` means unbounded.
    """

    def __init__(self, *, coerce: bool = True, max_array_index: int | None = None) -> None:
        super().__init__()
        if max_array_index is not None:
            if isinstance(max_array_index, bool) or not isinstance(max_array_index, int):
                msg = "max_array_index must be an int or None"
                raise ValueError(msg)
            if max_array_index < 0:
                msg = "max_array_index must not be negative"
                raise ValueError(msg)

        self.coerce = coerce
        self.max_array_index = max_array_index

    def build(self, properties: Iterable[PropertyLike]) -> ValueTree:
        """Merge properties into a tree without coercion or collapse."""
        tree: ValueTree = {}
        grouped = group_properties(_as_property(item) for item in properties)
        for key, group in grouped.items():
            subtree: dict[str, Value] = {}
            for prop in group:
                insert(subtree, prop.path, prop.value)
            tree[key] = subtree[key]
        return tree

    def resolve(self, tree: ValueTree) -> ValueTree:
        """Coerce string leaves and collapse array mappings, innermost first.

        The walk uses an explicit stack so nesting depth is not limited by the
        interpreter's recursion limit. ``tree`` itself always stays a mapping.
        """
        visited: list[tuple[dict[str, Value], dict[str, Value] | None, str]] = []
        pending: list[tuple[dict[str, Value], dict[str, Value] | None, str]] = [(tree, None, "")]
        while pending:
            node, parent, key = pending.pop()
            visited.append((node, parent, key))
            for child_key, child in list(node.items()):
                match child:
                    case dict():
                        pending.append((child, node, child_key))
                    case str() if self.coerce:
                        node[child_key] = coerce_scalar(child)
                    case _:
                        pass

        for node, parent, key in reversed(visited):
            if parent is not None:
                parent[key] = collapse_array(node, max_index=self.max_array_index)
        return tree

    def materialize(self, properties: Iterable[PropertyLike]) -> ValueTree:
        """Return the finished value tree for ``properties``."""
        items = list(properties)
        tree = self.resolve(self.build(items))
        logger.debug("materialized %d properties into %d top-level keys", len(items), len(tree))
        return tree


_DEFAULT = Materializer()

REQUEST_MAX_ARRAY_INDEX = 10_000
"""Highest array index request sources collapse into a list by default."""

REQUEST_MATERIALIZER = Materializer(max_array_index=REQUEST_MAX_ARRAY_INDEX)


def materialize(properties: Iterable[PropertyLike]) -> ValueTree:
    """Materialize ``properties`` with the default settings."""
    return _DEFAULT.materialize(properties)
