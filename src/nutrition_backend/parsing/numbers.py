"""Parsers for leading numeric literals such as "1.5", "3/4" or "1 1/2"."""

import math
import re

from nutrition_backend.domain.quantities import ParseFailure

_COMPOUND_FRACTION = re.compile(r"(\d+)\s+(\d+)\s*/\s*(\d+)\s*")
_FRACTION = re.compile(r"(\d+)\s*/\s*(\d+)\s*")
_FLOAT = re.compile(r"(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")


def parse_number(text: str) -> tuple[float, str] | ParseFailure:
    """Parse a number at the start of text.

    Compound fractions are tried before simple fractions, and both before
    plain decimals, so "1 1/2" is never read as just "1". A zero
    denominator or a value too large for a float fails the parse.
    """
    match = _COMPOUND_FRACTION.match(text)
    if match:
        whole, numerator, denominator = match.groups()
        if _is_zero(denominator):
            return ParseFailure(text)
        value = float(whole) + float(numerator) / float(denominator)
        return _finite(value, text, match.end())

    match = _FRACTION.match(text)
    if match:
        numerator, denominator = match.groups()
        if _is_zero(denominator):
            return ParseFailure(text)
        return _finite(float(numerator) / float(denominator), text, match.end())

    match = _FLOAT.match(text)
    if match:
        return _finite(float(match.group()), text, match.end())
    return ParseFailure(text)


def _is_zero(digits: str) -> bool:
    return digits.strip("0") == ""


def _finite(value: float, text: str, end: int) -> tuple[float, str] | ParseFailure:
    if not math.isfinite(value):
        return ParseFailure(text)
    return value, text[end:]
