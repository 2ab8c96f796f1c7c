"""Classification of serving measures and the derived measurement table."""

import math
from collections.abc import Iterable

from nutrition_backend.domain.foods import NutritionixMeasure
from nutrition_backend.domain.measurements import (
    MassDensity,
    Masslike,
    Measurement,
    MeasurementClass,
    MeasurementKind,
    MeasureSummary,
    NominalServing,
)
from nutrition_backend.parsing.units import unit_by_name

_MASSLIKE_NAMES = frozenset(
    {"gram", "kilogram", "pound", "ounce", "wt. oz", "oz", "lb", "g", "kg"}
)

# Ordered; the first matching rule decides the volume unit.
_VOLUME_NAMES: tuple[tuple[frozenset[str], str], ...] = (
    (frozenset({"pint"}), "pint"),
    (frozenset({"quart"}), "quart"),
    (frozenset({"gallon", "gal"}), "gallon"),
    (frozenset({"tablespoon", "tbsp"}), "tablespoon"),
    (frozenset({"teaspoon", "tsp"}), "teaspoon"),
    (frozenset({"cubic inch"}), "cubic inch"),
    (frozenset({"fl oz"}), "fluid ounce"),
)

_MASS_TABLE = ("milligram", "gram", "kilogram")
_VOLUME_TABLE = (
    "milliliter",
    "liter",
    "cup",
    "pint",
    "quart",
    "gallon",
    "tablespoon",
    "teaspoon",
    "fluid ounce",
)


def classify_measure(
    name: str, serving_weight: float, quantity: float
) -> MeasurementClass:
    """Classify a serving measure as masslike, a density hint, or nominal.

    Rules are checked in a fixed order. Only the masslike check ignores case
    and surrounding whitespace; volume names must match exactly. Any name
    containing "cup" counts as a cup measure. Unrecognized names always
    become nominal servings.
    """
    if name.strip().lower() in _MASSLIKE_NAMES:
        return Masslike()

    unit_name = _volume_unit_for(name)
    if unit_name is not None and math.isfinite(quantity):
        liters = quantity * unit_by_name(unit_name).size
        if liters > 0:
            return MassDensity(grams_per_liter=serving_weight / liters)

    if quantity > 1 and math.isfinite(quantity):
        return NominalServing(name=f"{int(quantity)} {name}", mass_grams=serving_weight)
    return NominalServing(name=name, mass_grams=serving_weight)


def _volume_unit_for(name: str) -> str | None:
    """Return the volume unit a measure name refers to, if any."""
    if name == "ml":
        return "milliliter"
    if name in {"liter", "l"}:
        return "liter"
    if "cup" in name:
        return "cup"
    for names, unit_name in _VOLUME_NAMES:
        if name in names:
            return unit_name
    return None


def summarize_measures(measures: Iterable[NutritionixMeasure]) -> MeasureSummary:
    """Fold a food's measures into a density and a list of nominal servings.

    Only the first density is kept. Nominal servings keep their order and
    duplicates.
    """
    density: float | None = None
    servings: list[NominalServing] = []
    for measure in measures:
        match classify_measure(measure.measure, measure.serving_weight, measure.qty):
            case Masslike():
                pass
            case MassDensity(grams_per_liter=grams_per_liter):
                if density is None:
                    density = grams_per_liter
            case NominalServing() as serving:
                servings.append(serving)
    return MeasureSummary(density_g_per_l=density, nominal_servings=servings)


def build_measurement_table(
    density_g_per_l: float | None, nominal_servings: Iterable[NominalServing]
) -> list[Measurement]:
    """Build the list of units a food can be measured in.

    Mass units always come first, volume units follow when the density is
    known, and nominal servings are appended in their stored order.
    """
    table = [
        Measurement(MeasurementKind.MASS, name, unit_by_name(name).size)
        for name in _MASS_TABLE
    ]
    if density_g_per_l is not None:
        table.extend(
            Measurement(
                MeasurementKind.VOLUME,
                name,
                density_g_per_l * unit_by_name(name).size,
            )
            for name in _VOLUME_TABLE
        )
    table.extend(
        Measurement(MeasurementKind.NOMINAL, serving.name, serving.mass_grams)
        for serving in nominal_servings
    )
    return table
