"""Request adapters that feed the materializer."""

from .detect import parse
from .expansion import expand_files, expand_multi_values
from .form import FormSource
from .json_body import JsonSource
from .protocol import RequestSource
from .query import QuerySource


__all__ = [
    "FormSource",
    "JsonSource",
    "QuerySource",
    "RequestSource",
    "expand_files",
    "expand_multi_values",
    "parse",
]
