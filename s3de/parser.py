"""Small helpers for reading bracketed and comma separated values."""

from __future__ import annotations

import re

__all__ = ["ParseError", "extract_match", "find_triple", "find_couple"]

_FLOAT_PREFIX = re.compile(
    r"\s*[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan)",
    re.IGNORECASE,
)
_INT_PREFIX = re.compile(r"\s*[+-]?\d+")


class ParseError(ValueError):
    """Raised when a piece of text does not have the expected shape."""


def _to_float(text: str) -> float:
    """Read the leading number of ``text``; trailing characters are ignored."""
    match = _FLOAT_PREFIX.match(text)
    if match is None:
        raise ParseError(f"no floating point value in {text!r}")
    return float(match.group().strip())


def _to_int(text: str) -> int:
    """Read the leading integer of ``text``; trailing characters are ignored."""
    match = _INT_PREFIX.match(text)
    if match is None:
        raise ParseError(f"no integer value in {text!r}")
    return int(match.group().strip())


def extract_match(text: str, start: str = "(", end: str = ")") -> tuple[int, str]:
    """Return the index of ``end`` and the text between ``start`` and ``end``."""
    first = text.find(start)
    last = text.find(end)
    if first < 0 or last < 0 or first > last:
        raise ParseError(f"Error, {start} or {end} are not match")
    return last, text[first + 1 : last]


def find_triple(text: str, sep: str = ",") -> tuple[float, float, float]:
    """Parse three floating point values separated by ``sep``."""
    index = text.find(sep)
    if index <= 0:
        raise ParseError("Error could not get the first parameter of 3-uple")
    head, text = text[:index], text[index + 1 :]
    x = _to_float(head)

    index = text.find(sep)
    if index <= 0:
        raise ParseError("Error could not get the second parameter of 3-uple")
    y = _to_float(text[:index])
    text = text[index + 1 :]

    if not text:
        raise ParseError("Error could not get the third parameter of 3-uple")
    z = _to_float(text)
    return x, y, z


def find_couple(text: str, sep: str = ",") -> tuple[int, int]:
    """Parse two integers separated by ``sep``."""
    index = text.find(sep)
    if index <= 0:
        raise ParseError("Error could not get the first parameter of couple")
    head, text = text[:index], text[index + 1 :]
    if not text:
        raise ParseError("Error could not get the second parameter of couple")
    return _to_int(head), _to_int(text)