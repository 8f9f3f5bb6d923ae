"""JSON request body source."""

from __future__ import annotations

import json
from typing import override

from formtree.errors import ParseError
from formtree.types import ValueTree

from .protocol import RequestSource


class JsonSource(RequestSource):
    """Value tree decoded from a JSON object body.

    JSON values are already typed, so no coercion or array collapse applies.
    An empty body decodes to an empty tree.
    """

    def __init__(self, body: str | bytes) -> None:
        super().__init__()
        self._tree = self._decode(body)

    @staticmethod
    def _decode(body: str | bytes) -> ValueTree:
        if not body.strip():
            return {}
        try:
            decoded = json.loads(body)
        except (json.JSONDecodeError, UnicodeDecodeError) as error:
            msg = f"invalid JSON body: {error}"
            raise ParseError("json", msg) from error
        if not isinstance(decoded, dict):
            msg = f"JSON body must be an object, got {type(decoded).__name__}"
            raise ParseError("json", msg)
        return decoded

    @override
    def to_dict(self) -> ValueTree:
        """Return the decoded JSON object."""
        return self._tree
