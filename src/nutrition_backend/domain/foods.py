"""Food domain models."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class NutritionixMeasure:
    """An alternative serving measure reported by Nutritionix."""

    measure: str
    serving_weight: float
    qty: float


@dataclass(frozen=True)
class NutritionixNutrient:
    """A nutrient amount keyed by Nutritionix attribute id."""

    attr_id: int
    value: float


@dataclass(frozen=True)
class NutritionixFood:
    """A food as returned by the Nutritionix API."""

    food_name: str
    brand_name: str | None
    serving_qty: float
    serving_unit: str
    serving_weight_grams: float
    full_nutrients: list[NutritionixNutrient]
    upc: str | None = None
    alt_measures: list[NutritionixMeasure] = field(default_factory=list)


@dataclass(frozen=True)
class FoodForm:
    """Insert payload for a new food."""

    name: str
    mass: float
    nutrition: list[float]
    g2l_density: float | None
    brand: str | None
    upc: str | None
    img: str | None = None


@dataclass(frozen=True)
class FoodRecord:
    """A stored food.

    `mass` is the weight in grams of one unit serving and `nutrition` is a
    flat list of alternating nutrient ids and amounts.
    """

    id: int
    name: str
    mass: float
    nutrition: list[float]
    g2l_density: float | None
    img: str | None
    brand: str | None
    upc: str | None


@dataclass(frozen=True)
class ServingRecord:
    """A stored nominal serving of a food."""

    id: int
    food_id: int
    name: str
    mass: float


def parse_nutritionix_food(
    payload: dict[str, object], upc: str | None = None
) -> NutritionixFood:
    """Parse a raw Nutritionix food payload."""
    nutrients = [
        NutritionixNutrient(attr_id=int(item["attr_id"]), value=float(item["value"]))
        for item in payload.get("full_nutrients") or []
    ]
    measures = [
        NutritionixMeasure(
            measure=str(item.get("measure", "")),
            serving_weight=float(item.get("serving_weight", 0.0)),
            qty=float(item.get("qty", 0.0)),
        )
        for item in payload.get("alt_measures") or []
    ]
    return NutritionixFood(
        food_name=str(payload.get("food_name", "")),
        brand_name=payload.get("brand_name"),
        serving_qty=float(payload.get("serving_qty") or 1.0),
        serving_unit=str(payload.get("serving_unit", "")),
        serving_weight_grams=float(payload.get("serving_weight_grams") or 0.0),
        full_nutrients=nutrients,
        upc=upc or payload.get("upc"),
        alt_measures=measures,
    )
