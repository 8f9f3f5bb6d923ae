"""Insertion of dot paths into a nested mapping."""

from __future__ import annotations

from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from formtree.types import Value


def insert(tree: dict[str, Value], dot_path: str, value: Value) -> None:
    """Place ``value`` in ``tree`` at the location named by ``dot_path``.

    Intermediate mappings are created as needed. Any earlier value in the way,
    scalar or subtree, is replaced rather than merged: the last write wins.
    """
    *parents, leaf = dot_path.split(".")
    node = tree
    for segment in parents:
        child = node.get(segment)
        if not isinstance(child, dict):
            child = {}
            node[segment] = child
        node = child
    node[leaf] = value
