"""URL query string source."""

from __future__ import annotations

import logging
from typing import override
from urllib.parse import parse_qsl

from formtree.errors import ParseError
from formtree.materializer import REQUEST_MATERIALIZER, Materializer
from formtree.types import ValueTree

from .expansion import expand_multi_values
from .protocol import RequestSource


logger = logging.getLogger(__name__)


def decode_pairs(encoded: str | bytes, source: str) -> list[tuple[str, str]]:
    """Decode ``application/x-www-form-urlencoded`` text into name/value pairs.

    Blank values are kept. Undecodable bytes raise :class:`ParseError`.
    """
    if isinstance(encoded, bytes):
        try:
            encoded = encoded.decode()
        except UnicodeDecodeError as error:
            msg = "payload is not valid UTF-8"
            raise ParseError(source, msg) from error
    return parse_qsl(encoded.removeprefix("?"), keep_blank_values=True)


class QuerySource(RequestSource):
    """Value tree built from a URL query string.

    Array indices above ``REQUEST_MAX_ARRAY_INDEX`` keep their mapping unless a
    differently configured ``materializer`` is given.
    """

    def __init__(self, query: str | bytes, *, materializer: Materializer | None = None) -> None:
        super().__init__()
        self._pairs = decode_pairs(query, "query")
        self._materializer = materializer or REQUEST_MATERIALIZER

    @override
    def to_dict(self) -> ValueTree:
        """Return the materialized query parameters."""
        logger.debug("materializing %d query parameters", len(self._pairs))
        return self._materializer.materialize(expand_multi_values(self._pairs))
