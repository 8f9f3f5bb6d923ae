"""Request source interface."""

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from typing import Any

from formtree.types import FileRef, ValueTree


def _encode_default(value: Any) -> Any:
    if isinstance(value, FileRef):
        return {"filename": value.filename, "size": value.size, "content_type": value.content_type}
    msg = f"Object of type {type(value).__name__} is not JSON serializable"
    raise TypeError(msg)


class RequestSource(ABC):
    """A request payload that can be read as a value tree."""

    @abstractmethod
    def to_dict(self) -> ValueTree:
        """Return the value tree for this request."""

    def to_json(self, **kwargs: Any) -> str:
        """Render the value tree as JSON text.

        Uploaded files are rendered by name, size and content type.
        """
        return json.dumps(self.to_dict(), default=_encode_default, **kwargs)

    def to_json_bytes(self, **kwargs: Any) -> bytes:
        """Render the value tree as UTF-8 encoded JSON."""
        return self.to_json(**kwargs).encode()
