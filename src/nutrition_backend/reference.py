"""Nutrient reference table loaded from the packaged CSV file."""

import csv
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

DEFAULT_NUTRIENTS_PATH = Path(__file__).resolve().parent / "data" / "nutrients.csv"

_COLUMNS = ["id", "name", "unit"]


class ReferenceTableError(RuntimeError):
    """Raised when the nutrient reference table cannot be loaded."""


@dataclass(frozen=True)
class NutrientInfo:
    """Display name and unit of a nutrient."""

    name: str
    unit: str


@dataclass(frozen=True)
class NutrientAmount:
    """A nutrient amount ready for display."""

    id: int
    name: str
    unit: str
    value: float


@dataclass(frozen=True)
class NutrientNames:
    """Read-only mapping of nutrient ids to display names."""

    entries: Mapping[int, NutrientInfo]

    def name_for(self, nutrient_id: int) -> str | None:
        """Return the display name for a nutrient id, if known."""
        info = self.entries.get(nutrient_id)
        return info.name if info else None

    def describe(self, nutrition: list[float]) -> list[NutrientAmount]:
        """Expand a flat [id, value, id, value, ...] list, skipping unknown ids."""
        amounts: list[NutrientAmount] = []
        for raw_id, value in zip(nutrition[::2], nutrition[1::2], strict=False):
            nutrient_id = int(raw_id)
            info = self.entries.get(nutrient_id)
            if info is None:
                continue
            amounts.append(
                NutrientAmount(
                    id=nutrient_id, name=info.name, unit=info.unit, value=float(value)
                )
            )
        return amounts


def load_nutrient_names(path: Path | str | None = None) -> NutrientNames:
    """Load the nutrient reference table, raising ReferenceTableError on failure."""
    resolved = Path(path) if path else DEFAULT_NUTRIENTS_PATH
    try:
        with resolved.open(newline="", encoding="utf-8") as handle:
            reader = csv.DictReader(handle)
            if reader.fieldnames != _COLUMNS:
                raise ReferenceTableError(
                    f"Unexpected nutrient table header in {resolved}: "
                    f"{reader.fieldnames}"
                )
            entries = {
                int(row["id"]): NutrientInfo(name=row["name"], unit=row["unit"])
                for row in reader
            }
    except OSError as exc:
        raise ReferenceTableError(f"Cannot read nutrient table {resolved}") from exc
    except (TypeError, ValueError) as exc:
        raise ReferenceTableError(f"Malformed nutrient table {resolved}") from exc
    if not entries:
        raise ReferenceTableError(f"Nutrient table {resolved} is empty")
    return NutrientNames(entries=entries)
