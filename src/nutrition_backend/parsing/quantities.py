"""Parser turning serving descriptions like "1 1/2 cups" into quantities."""

import re

from nutrition_backend.domain.quantities import (
    Mass,
    Nominal,
    ParseFailure,
    Quantity,
    UnitEntry,
    UnitKind,
    Volume,
)
from nutrition_backend.parsing.numbers import parse_number
from nutrition_backend.parsing.units import normalize_unit

MAX_UNIT_WORDS = 16

_WORD = re.compile(r"[A-Za-z]+|\.")
_NEXT_WORD = re.compile(r"\s*([A-Za-z]+|\.)")


def parse_quantity(text: str) -> tuple[Quantity, str] | ParseFailure:
    """Parse a leading "<number> <unit words>" quantity from text.

    Words are appended to the unit phrase one at a time and the lexicon is
    checked after each one; the earliest phrase that names a unit wins, even
    if a longer phrase would name a different one. When no word sequence
    names a unit, the whole phrase becomes a nominal serving name. Only the
    number and the words used are consumed.
    """
    number = parse_number(text.lstrip())
    if isinstance(number, ParseFailure):
        return ParseFailure(text)
    amount, rest = number
    rest = rest.lstrip()

    match = _WORD.match(rest)
    if match is None:
        return ParseFailure(text)
    phrase = match.group().lower()
    rest = rest[match.end() :]

    word_count = 1
    while True:
        unit = normalize_unit(phrase)
        if unit is not None:
            return _physical_quantity(unit, amount), rest
        if word_count >= MAX_UNIT_WORDS:
            break
        match = _NEXT_WORD.match(rest)
        if match is None:
            break
        word = match.group(1).lower()
        # periods attach to the preceding word, e.g. "fl. oz."
        phrase = phrase + word if word == "." else f"{phrase} {word}"
        rest = rest[match.end() :]
        word_count += 1

    return Nominal(amount, phrase), rest


def _physical_quantity(unit: UnitEntry, amount: float) -> Quantity:
    match unit.kind:
        case UnitKind.MASS:
            return Mass(amount, unit.name)
        case UnitKind.VOLUME:
            return Volume(amount, unit.name)
