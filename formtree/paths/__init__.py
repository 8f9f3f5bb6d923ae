"""Path translation and grouping utilities."""

from .grouper import group_properties, top_level_key
from .translator import to_dot_path


__all__ = ["group_properties", "to_dot_path", "top_level_key"]
