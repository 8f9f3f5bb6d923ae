"""Form field and uploaded-file source."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, override

from formtree.materializer import REQUEST_MATERIALIZER, Materializer

from .expansion import expand_files, expand_multi_values
from .protocol import RequestSource
from .query import decode_pairs


if TYPE_CHECKING:
    from collections.abc import Iterable

    from formtree.types import FileRef, ValueTree


logger = logging.getLogger(__name__)


class FormSource(RequestSource):
    """Value tree built from decoded form fields and uploaded files.

    Parameters
    ----------
    fields
        ``(name, value)`` pairs in request order, for example the fields of a
        multipart body already decoded by the web framework.
    files
        ``(name, FileRef)`` pairs for uploaded files.
    materializer
        Optional :class:`Materializer` carrying non-default settings. Defaults
        to ``REQUEST_MATERIALIZER``, which leaves mappings with an index above
        ``REQUEST_MAX_ARRAY_INDEX`` uncollapsed.
    """

    def __init__(
        self,
        fields: Iterable[tuple[str, str]],
        files: Iterable[tuple[str, FileRef]] = (),
        *,
        materializer: Materializer | None = None,
    ) -> None:
        super().__init__()
        self._fields = list(fields)
        self._files = list(files)
        self._materializer = materializer or REQUEST_MATERIALIZER

    @classmethod
    def from_urlencoded(cls, body: str | bytes, *, materializer: Materializer | None = None) -> FormSource:
        """Create a source from an ``application/x-www-form-urlencoded`` body."""
        return cls(decode_pairs(body, "form"), materializer=materializer)

    @override
    def to_dict(self) -> ValueTree:
        """Return the materialized form fields and files."""
        properties = expand_multi_values(self._fields)
        properties.extend(expand_files(self._files))
        logger.debug("materializing %d form fields and %d files", len(self._fields), len(self._files))
        return self._materializer.materialize(properties)
