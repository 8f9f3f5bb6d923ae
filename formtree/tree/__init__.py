"""Tree building, scalar coercion and array collapse."""

from .builder import insert
from .coercion import coerce_scalar
from .collapse import collapse_array


__all__ = ["coerce_scalar", "collapse_array", "insert"]
