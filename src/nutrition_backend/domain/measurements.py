"""Measurement domain models."""

from dataclasses import dataclass, field
from enum import StrEnum


@dataclass(frozen=True)
class NominalServing:
    """A named serving with a fixed mass, e.g. "packet" weighing 15.75 g."""

    name: str
    mass_grams: float


@dataclass(frozen=True)
class MassDensity:
    """Mass density of a food in grams per liter."""

    grams_per_liter: float


@dataclass(frozen=True)
class Masslike:
    """A measure restating a mass unit; it carries no new information."""


MeasurementClass = NominalServing | MassDensity | Masslike


@dataclass(frozen=True)
class MeasureSummary:
    """Density and nominal servings collected from a food's measures."""

    density_g_per_l: float | None = None
    nominal_servings: list[NominalServing] = field(default_factory=list)


class MeasurementKind(StrEnum):
    """Kind of a measurement row."""

    MASS = "mass"
    VOLUME = "volume"
    NOMINAL = "nominal"


@dataclass(frozen=True)
class Measurement:
    """One unit a food can be measured in, with its mass in grams."""

    kind: MeasurementKind
    name: str
    mass_equivalent_grams: float
