"""Unit lexicon mapping unit names and abbreviations to canonical units.

Sizes are expressed in grams for mass units and liters for volume units,
using US customary definitions for cups, pints, quarts and gallons.
"""

from nutrition_backend.domain.quantities import Mass, UnitEntry, UnitKind, Volume

_UNITS: tuple[tuple[UnitEntry, tuple[str, ...]], ...] = (
    # volumes
    (
        UnitEntry("milliliter", UnitKind.VOLUME, 0.001),
        ("ml", "milliliter", "milliliters"),
    ),
    (
        UnitEntry("centiliter", UnitKind.VOLUME, 0.01),
        ("cl", "centiliter", "centiliters"),
    ),
    (
        UnitEntry("liter", UnitKind.VOLUME, 1.0),
        ("l", "liter", "liters"),
    ),
    (
        UnitEntry("cup", UnitKind.VOLUME, 0.2365882365),
        ("cup", "cups"),
    ),
    (
        UnitEntry("pint", UnitKind.VOLUME, 0.473176473),
        ("pint", "pints"),
    ),
    (
        UnitEntry("quart", UnitKind.VOLUME, 0.946352946),
        ("quart", "quarts"),
    ),
    (
        UnitEntry("gallon", UnitKind.VOLUME, 3.785411784),
        ("gal", "gals", "gallon", "gallons"),
    ),
    (
        UnitEntry("tablespoon", UnitKind.VOLUME, 0.01478676478125),
        ("tbsp", "tablespoon", "tablespoons"),
    ),
    (
        UnitEntry("teaspoon", UnitKind.VOLUME, 0.00492892159375),
        ("tsp", "teaspoon", "teaspoons"),
    ),
    (
        UnitEntry("fluid ounce", UnitKind.VOLUME, 0.0295735295625),
        (
            "fl oz",
            "fl.oz.",
            "fl. oz.",
            "fluid oz",
            "fluid ounce",
            "fluid ounces",
            "oza",
        ),
    ),
    (
        UnitEntry("cubic inch", UnitKind.VOLUME, 0.016387064),
        ("cubic inch", "cubic inches"),
    ),
    (
        UnitEntry("cubic centimeter", UnitKind.VOLUME, 0.001),
        ("cubic centimeter", "cubic centimeters"),
    ),
    # masses
    (
        UnitEntry("milligram", UnitKind.MASS, 0.001),
        ("mg", "milligram", "milligrams"),
    ),
    (
        UnitEntry("centigram", UnitKind.MASS, 0.01),
        ("cg", "centigram", "centigrams"),
    ),
    (
        UnitEntry("gram", UnitKind.MASS, 1.0),
        ("g", "gr", "grm", "gram", "grams"),
    ),
    (
        UnitEntry("kilogram", UnitKind.MASS, 1000.0),
        ("kg", "kilogram", "kilograms"),
    ),
    (
        UnitEntry("ounce", UnitKind.MASS, 28.349523125),
        ("oz", "oz.", "onz", "ounce", "ounces", "wt oz", "wt. oz.", "wt.oz."),
    ),
    (
        UnitEntry("pound", UnitKind.MASS, 453.59237),
        ("lb", "lbs", "pound", "pounds"),
    ),
)

_BY_SYNONYM: dict[str, UnitEntry] = {
    synonym: entry for entry, synonyms in _UNITS for synonym in synonyms
}
_BY_NAME: dict[str, UnitEntry] = {entry.name: entry for entry, _ in _UNITS}

CANONICAL_UNITS: tuple[str, ...] = tuple(entry.name for entry, _ in _UNITS)


def normalize_unit(phrase: str) -> UnitEntry | None:
    """Return the canonical unit for a unit phrase, or None if it is unknown."""
    return _BY_SYNONYM.get(phrase.strip().lower())


def unit_by_name(name: str) -> UnitEntry:
    """Return the unit with the given canonical name."""
    return _BY_NAME[name]


def unit_synonyms(name: str) -> tuple[str, ...]:
    """Return every surface form that resolves to the given canonical unit."""
    for entry, synonyms in _UNITS:
        if entry.name == name:
            return synonyms
    raise KeyError(name)


def to_grams(mass: Mass) -> float:
    """Convert a mass quantity to grams."""
    return mass.amount * unit_by_name(mass.unit).size


def to_liters(volume: Volume) -> float:
    """Convert a volume quantity to liters."""
    return volume.amount * unit_by_name(volume.unit).size
