"""Serving quantity models."""

from dataclasses import dataclass
from enum import StrEnum


class UnitKind(StrEnum):
    """Physical dimension of a unit."""

    MASS = "mass"
    VOLUME = "volume"


@dataclass(frozen=True)
class UnitEntry:
    """A canonical unit with its size in grams (mass) or liters (volume)."""

    name: str
    kind: UnitKind
    size: float


@dataclass(frozen=True)
class Mass:
    """A mass measured in a canonical mass unit."""

    amount: float
    unit: str


@dataclass(frozen=True)
class Volume:
    """A volume measured in a canonical volume unit."""

    amount: float
    unit: str


@dataclass(frozen=True)
class Nominal:
    """A named serving such as "2 slices" with no physical unit."""

    amount: float
    name: str


Quantity = Mass | Volume | Nominal


@dataclass(frozen=True)
class ParseFailure:
    """A failed parse, carrying the input that could not be consumed."""

    remainder: str
