"""Supabase implementation for foods and servings."""

from dataclasses import dataclass

from supabase import Client

from nutrition_backend.domain.foods import FoodForm, FoodRecord, ServingRecord
from nutrition_backend.domain.measurements import NominalServing
from nutrition_backend.services.foods import FoodRepository


@dataclass
class SupabaseFoodRepository(FoodRepository):
    """Supabase-backed repository for foods."""

    client: Client

    def get_by_upc(self, upc: str) -> FoodRecord | None:
        """Return the food with the given UPC, if stored."""
        response = (
            self.client.table("foods").select("*").eq("upc", upc).limit(1).execute()
        )
        if not response.data:
            return None
        return _parse_food(response.data[0])

    def search_by_name(self, query: str, limit: int) -> list[FoodRecord]:
        """Return foods whose name contains the query."""
        response = (
            self.client.table("foods")
            .select("*")
            .ilike("name", f"%{query}%")
            .limit(limit)
            .execute()
        )
        return [_parse_food(row) for row in response.data or []]

    def create_food(
        self, form: FoodForm, servings: list[NominalServing]
    ) -> FoodRecord:
        """Insert a food and its servings, returning the stored food."""
        response = (
            self.client.table("foods")
            .insert(
                {
                    "name": form.name,
                    "mass": form.mass,
                    "nutrition": form.nutrition,
                    "g2l_density": form.g2l_density,
                    "img": form.img,
                    "brand": form.brand,
                    "upc": form.upc,
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create food")
        food = _parse_food(response.data[0])
        if servings:
            inserted = (
                self.client.table("servings")
                .insert(
                    [
                        {
                            "food_id": food.id,
                            "name": serving.name,
                            "mass": serving.mass_grams,
                        }
                        for serving in servings
                    ]
                )
                .execute()
            )
            if not inserted.data:
                self.client.table("foods").delete().eq("id", food.id).execute()
                raise RuntimeError("Failed to create servings")
        return food

    def list_servings(self, food_id: int) -> list[ServingRecord]:
        """Return a food's servings in insertion order."""
        response = (
            self.client.table("servings")
            .select("*")
            .eq("food_id", food_id)
            .order("id")
            .execute()
        )
        return [
            ServingRecord(
                id=int(row["id"]),
                food_id=int(row["food_id"]),
                name=str(row.get("name", "")),
                mass=float(row.get("mass", 0.0)),
            )
            for row in response.data or []
        ]


def _parse_food(row: dict[str, object]) -> FoodRecord:
    """Parse a foods row into a domain model."""
    density = row.get("g2l_density")
    return FoodRecord(
        id=int(row["id"]),
        name=str(row.get("name", "")),
        mass=float(row.get("mass", 0.0)),
        nutrition=[float(value) for value in row.get("nutrition") or []],
        g2l_density=float(density) if density is not None else None,
        img=row.get("img"),
        brand=row.get("brand"),
        upc=row.get("upc"),
    )
