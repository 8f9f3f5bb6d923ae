"""formtree - nested, typed value trees from flat form and query fields"""

from ._version import version as __version__
from .errors import FormTreeError, ParseError
from .materializer import Materializer, materialize
from .sources import FormSource, JsonSource, QuerySource, RequestSource, parse
from .types import FileRef, Property


__all__ = [
    "FileRef",
    "FormSource",
    "FormTreeError",
    "JsonSource",
    "Materializer",
    "ParseError",
    "Property",
    "QuerySource",
    "RequestSource",
    "__version__",
    "materialize",
    "parse",
]
