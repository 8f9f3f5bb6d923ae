"""Content-type based source selection."""

from __future__ import annotations

from typing import TYPE_CHECKING

from formtree.errors import ParseError

from .form import FormSource
from .json_body import JsonSource
from .query import QuerySource


if TYPE_CHECKING:
    from formtree.materializer import Materializer

    from .protocol import RequestSource


def media_type(content_type: str | None) -> str:
    """Return the lower-cased media type without parameters."""
    if not content_type:
        return ""
    return content_type.partition(";")[0].strip().lower()


def parse(
    content_type: str | None,
    body: str | bytes = b"",
    query: str | bytes = "",
    *,
    materializer: Materializer | None = None,
) -> RequestSource:
    """Pick the request source matching ``content_type``.

    JSON and URL-encoded bodies are decoded from ``body``. Any other or missing
    content type falls back to the query string. Multipart bodies must be
    decoded by the caller and passed to :class:`FormSource`. Without an explicit
    ``materializer`` the sources use the bounded ``REQUEST_MATERIALIZER``.
    """
    kind = media_type(content_type)
    if kind == "application/json":
        return JsonSource(body)
    if kind == "application/x-www-form-urlencoded":
        return FormSource.from_urlencoded(body, materializer=materializer)
    if kind == "multipart/form-data":
        msg = "multipart bodies must be decoded by the caller and passed to FormSource"
        raise ParseError("multipart", msg)
    return QuerySource(query, materializer=materializer)
