"""Exceptions raised by the request adapters."""

from __future__ import annotations


class FormTreeError(Exception):
    """Base class for formtree errors."""


class ParseError(FormTreeError, ValueError):
    """A request body or content type could not be turned into a value tree."""

    def __init__(self, source: str, message: str) -> None:
        super().__init__(f"{source} parse error: {message}")
        self.source = source
        self.message = message
