"""Food lookup and ingestion backed by Nutritionix and the food store."""

import asyncio
import logging
from dataclasses import asdict, dataclass
from typing import TYPE_CHECKING, Protocol

from nutrition_backend.adapters.nutritionix_client import NutritionixClient
from nutrition_backend.domain.foods import (
    FoodForm,
    FoodRecord,
    NutritionixFood,
    ServingRecord,
    parse_nutritionix_food,
)
from nutrition_backend.domain.measurements import NominalServing
from nutrition_backend.reference import NutrientNames
from nutrition_backend.services.cache import Cache
from nutrition_backend.services.measurements import (
    build_measurement_table,
    summarize_measures,
)

_logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable


class FoodRepository(Protocol):
    """Persistence interface for foods and their servings."""

    def get_by_upc(self, upc: str) -> FoodRecord | None:
        """Return the food with the given UPC, if stored."""

    def search_by_name(self, query: str, limit: int) -> list[FoodRecord]:
        """Return foods whose name matches the query."""

    def create_food(
        self, form: FoodForm, servings: list[NominalServing]
    ) -> FoodRecord:
        """Store a food with its nominal servings and return it."""

    def list_servings(self, food_id: int) -> list[ServingRecord]:
        """Return a food's nominal servings in insertion order."""


def build_food_form(food: NutritionixFood) -> tuple[FoodForm, list[NominalServing]]:
    """Map a Nutritionix food to an insert form and its nominal servings."""
    mass = food.serving_weight_grams / food.serving_qty if food.serving_qty else 0.0
    nutrition: list[float] = []
    for nutrient in food.full_nutrients:
        nutrition.extend([float(nutrient.attr_id), nutrient.value])
    summary = summarize_measures(food.alt_measures)
    form = FoodForm(
        name=food.food_name,
        mass=mass,
        nutrition=nutrition,
        g2l_density=summary.density_g_per_l,
        brand=food.brand_name,
        upc=food.upc,
    )
    return form, summary.nominal_servings


@dataclass
class FoodService:
    """Service for food lookups, ingestion and rendering."""

    client: NutritionixClient
    repository: FoodRepository
    cache: Cache
    nutrient_names: NutrientNames
    natural_ttl_seconds: int = 3600
    debug: bool = False
    retry_attempts: int = 1
    retry_delay_seconds: float = 0.3

    async def lookup_upc(self, upc: str) -> FoodRecord | None:
        """Return a food by UPC, fetching it from Nutritionix when not stored."""
        existing = self.repository.get_by_upc(upc)
        if existing is not None:
            return existing

        payloads = await self._call_with_retry(
            lambda: self.client.request_upc(upc), action=f"upc:{upc}"
        )
        foods = self._ingest([parse_nutritionix_food(p, upc=upc) for p in payloads])
        if self.debug:
            _logger.info("Nutritionix UPC lookup: upc=%s results=%s", upc, len(foods))
        return foods[0] if foods else None

    def search(self, query: str, limit: int = 20) -> list[FoodRecord]:
        """Search stored foods by name."""
        return self.repository.search_by_name(query, limit)

    async def natural(self, query: str) -> list[FoodRecord]:
        """Resolve a natural-language query through Nutritionix and store results."""
        cache_key = f"nix:natural:{query.lower()}"
        cached = self.cache.get(cache_key)
        if isinstance(cached, list):
            return cached

        payloads = await self._call_with_retry(
            lambda: self.client.request_natural(query), action="natural"
        )
        foods = self._ingest([parse_nutritionix_food(p) for p in payloads])
        self.cache.set(cache_key, foods, ttl_seconds=self.natural_ttl_seconds)
        if self.debug:
            _logger.info("Nutritionix natural: query=%s results=%s", query, len(foods))
        return foods

    def render(self, food: FoodRecord) -> dict[str, object]:
        """Render a stored food with named nutrients and its measurement table."""
        servings = [
            NominalServing(name=serving.name, mass_grams=serving.mass)
            for serving in self.repository.list_servings(food.id)
        ]
        measurements = build_measurement_table(food.g2l_density, servings)
        return {
            "id": food.id,
            "name": food.name,
            "brand": food.brand,
            "upc": food.upc,
            "img": food.img,
            "mass": food.mass,
            "nutrients": [
                asdict(amount)
                for amount in self.nutrient_names.describe(food.nutrition)
            ],
            "measurements": [asdict(measurement) for measurement in measurements],
        }

    def _ingest(self, foods: list[NutritionixFood]) -> list[FoodRecord]:
        """Store Nutritionix foods and return the stored records."""
        records = []
        for food in foods:
            form, servings = build_food_form(food)
            records.append(self.repository.create_food(form, servings))
        return records

    async def _call_with_retry(
        self,
        func: "Callable[[], Awaitable[list[dict[str, object]]]]",
        *,
        action: str,
    ) -> list[dict[str, object]]:
        """Call an async function with a short retry."""
        attempt = 0
        while True:
            try:
                return await func()
            except Exception as exc:
                attempt += 1
                if self.debug:
                    _logger.warning(
                        "Nutritionix %s failed (attempt %s/%s, status=%s): %s",
                        action,
                        attempt,
                        self.retry_attempts + 1,
                        _status_code_from_exception(exc),
                        exc,
                    )
                if attempt > self.retry_attempts:
                    raise
                await asyncio.sleep(self.retry_delay_seconds)


def _status_code_from_exception(exc: Exception) -> str:
    """Extract HTTP status code from an exception, if available."""
    response = getattr(exc, "response", None)
    status_code = getattr(response, "status_code", None)
    if isinstance(status_code, int):
        return str(status_code)
    return "n/a"
