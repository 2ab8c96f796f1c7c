"""Food and quantity API endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, HTTPException, Request, status

from nutrition_backend.api.models import FoodQuery, QuantityText
from nutrition_backend.domain.quantities import Mass, Nominal, ParseFailure, Volume
from nutrition_backend.parsing.quantities import parse_quantity
from nutrition_backend.parsing.units import to_grams, to_liters

if TYPE_CHECKING:
    from nutrition_backend.containers import AppContainer

router = APIRouter(prefix="/api/v1", tags=["foods"])


@router.get("/upc")
async def food_by_upc(request: Request, upc: str | None = None) -> dict[str, object]:
    """Return a food by UPC, fetching it from Nutritionix if needed."""
    if not upc:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail="NEED UPC QUERY"
        )
    container: AppContainer = request.app.state.container
    food = await container.food_service.lookup_upc(upc)
    if food is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="NO UPC MATCH"
        )
    return container.food_service.render(food)


@router.post("/foods")
async def search_foods(body: FoodQuery, request: Request) -> dict[str, object]:
    """Search stored foods by name."""
    query = _require_query(body)
    container: AppContainer = request.app.state.container
    service = container.food_service
    return {"foods": [service.render(food) for food in service.search(query)]}


@router.post("/nutritionix")
async def natural_foods(body: FoodQuery, request: Request) -> dict[str, object]:
    """Resolve a natural-language query through Nutritionix."""
    query = _require_query(body)
    container: AppContainer = request.app.state.container
    service = container.food_service
    foods = await service.natural(query)
    return {"foods": [service.render(food) for food in foods]}


@router.post("/quantities/parse")
async def parse_quantity_text(body: QuantityText) -> dict[str, object]:
    """Parse a free-text serving description."""
    result = parse_quantity(body.text)
    if isinstance(result, ParseFailure):
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail={"error": "NO QUANTITY", "remainder": result.remainder},
        )
    quantity, remainder = result
    match quantity:
        case Mass():
            payload: dict[str, object] = {
                "kind": "mass",
                "amount": quantity.amount,
                "unit": quantity.unit,
                "grams": to_grams(quantity),
            }
        case Volume():
            payload = {
                "kind": "volume",
                "amount": quantity.amount,
                "unit": quantity.unit,
                "liters": to_liters(quantity),
            }
        case Nominal():
            payload = {
                "kind": "nominal",
                "amount": quantity.amount,
                "name": quantity.name,
            }
    return {**payload, "remainder": remainder}


def _require_query(body: FoodQuery) -> str:
    if not body.query:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail="NEED QUERY FIELD"
        )
    return body.query
