"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from nutrition_backend.adapters.nutritionix_client import HttpxNutritionixClient
from nutrition_backend.adapters.supabase_food_repository import SupabaseFoodRepository
from nutrition_backend.config import Settings
from nutrition_backend.reference import NutrientNames, load_nutrient_names
from nutrition_backend.services.cache import InMemoryCache
from nutrition_backend.services.foods import FoodService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    nutrient_names: NutrientNames
    food_service: FoodService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container.

    The nutrient reference table is loaded here so a missing or broken table
    stops the application before it serves requests.
    """
    resolved_settings = settings or Settings()
    nutrient_names = load_nutrient_names(resolved_settings.nutrient_table_path)
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    nutritionix_client = HttpxNutritionixClient.create(
        app_id=resolved_settings.nutritionix_app_id,
        app_key=resolved_settings.nutritionix_app_key,
        base_url=resolved_settings.nutritionix_base_url,
    )
    food_service = FoodService(
        client=nutritionix_client,
        repository=SupabaseFoodRepository(supabase_client),
        cache=InMemoryCache(),
        nutrient_names=nutrient_names,
        debug=resolved_settings.debug,
    )

    async def close_resources() -> None:
        await nutritionix_client.close()

    return AppContainer(
        settings=resolved_settings,
        nutrient_names=nutrient_names,
        food_service=food_service,
        close_resources=close_resources,
    )
