"""Scalar type inference for raw form and query values.

Values arrive as text. ``coerce_scalar`` returns the most specific scalar the
text spells out, falling back to the text itself:

* ``""`` stays ``""``
* ``"true"`` / ``"false"`` become booleans
* multi-character values starting with ``0`` (other than ``0.x``) stay strings,
  so phone numbers, zip codes and zero-padded identifiers keep their digits;
  a bare ``"0"`` is still the integer zero
* values containing ``.`` become floats when they are decimal numbers
* base-10 integers within the signed 64-bit range become ints
"""

from __future__ import annotations

import math
import re

from formtree.types import Scalar


INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
_FLOAT_PATTERN = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")

_BOOLEANS = {"true": True, "false": False}


def _parse_float(text: str) -> float | None:
    if not _FLOAT_PATTERN.fullmatch(text):
        return None
    value = float(text)
    if math.isinf(value):
        return None
    return value


def _parse_int64(text: str) -> int | None:
    if not _INT_PATTERN.fullmatch(text):
        return None
    if len(text.lstrip("+-").lstrip("0")) > len(str(INT64_MAX)):
        return None
    value = int(text)
    if not INT64_MIN <= value <= INT64_MAX:
        return None
    return value


def has_leading_zero(text: str) -> bool:
    """Return True for zero-padded text such as ``"007"`` but not ``"0.5"``."""
    return len(text) > 1 and text[0] == "0" and text[1] != "."


def coerce_scalar(text: str) -> Scalar:
    """Return the most specific scalar for ``text``; never raises."""
    if not text:
        return text
    if text in _BOOLEANS:
        return _BOOLEANS[text]
    if has_leading_zero(text):
        return text
    if "." in text:
        float_value = _parse_float(text)
        if float_value is not None:
            return float_value
    int_value = _parse_int64(text)
    if int_value is not None:
        return int_value
    return text
