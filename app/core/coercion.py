"""Lenient numeric coercion for request input.

Values that cannot be read as a number become ``NaN`` instead of raising;
callers treat that as accepted input.
"""

import math
import re
from typing import Any

NAN = float("nan")

_INT_PREFIX = re.compile(r"[+-]?\d+")
_HEX_PREFIX = re.compile(r"([+-]?)0[xX]([0-9a-fA-F]+)")
_FLOAT_PREFIX = re.compile(r"[+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")
_DECIMAL = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_RADIX = {"x": 16, "o": 8, "b": 2}


def _text(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _from_float(text: str) -> float:
    if "Infinity" in text:
        return -math.inf if text.startswith("-") else math.inf
    return float(text)


def parse_int(value: Any) -> int | float:
    """Read the leading integer of ``value``; ``NaN`` when there is none.

    >>> parse_int("12abc"), parse_int(2.9), parse_int(" -0x1f")
    (12, 2, -31)
    """
    text = _text(value).lstrip()
    match = _HEX_PREFIX.match(text)
    if match:
        sign, digits = match.groups()
        number = int(digits, 16)
        return -number if sign == "-" else number
    match = _INT_PREFIX.match(text)
    if not match:
        return NAN
    return int(match.group())


def parse_float(value: Any) -> float:
    """Read the leading decimal number of ``value``; ``NaN`` when there is none."""
    match = _FLOAT_PREFIX.match(_text(value).lstrip())
    if not match:
        return NAN
    return _from_float(match.group())


def to_number(value: Any) -> float:
    """Convert a whole token to a number the way loose equality does.

    Surrounding whitespace is ignored, an empty token is 0, and any token that
    is not entirely numeric is ``NaN``.
    """
    if isinstance(value, bool):
        return float(value)
    if isinstance(value, (int, float)):
        return float(value)

    text = str(value).strip()
    if not text:
        return 0.0
    if "_" in text:
        return NAN
    if len(text) > 2 and text[0] == "0" and text[1].lower() in _RADIX:
        digits = text[2:]
        if not digits.isalnum():
            return NAN
        try:
            return float(int(digits, _RADIX[text[1].lower()]))
        except ValueError:
            return NAN
    if text.lstrip("+-") == "Infinity" and len(text) - len(text.lstrip("+-")) <= 1:
        return _from_float(text)
    if _DECIMAL.fullmatch(text):
        return float(text)
    return NAN
