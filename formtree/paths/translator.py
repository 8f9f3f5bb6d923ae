"""Bracket-notation to dot-path translation."""

from __future__ import annotations


_BRACKET_TABLE = str.maketrans({"[": ".", "]": None})


def to_dot_path(path: str) -> str:
    """Rewrite ``items[0][name]`` style paths as ``items.0.name``.

    Leading and trailing dots are trimmed. Unmatched brackets are not an error;
    every ``[`` becomes a dot and every ``]`` is dropped.
    """
    if "[" not in path and "]" not in path:
        return path.strip(".")
    return path.translate(_BRACKET_TABLE).strip(".")
