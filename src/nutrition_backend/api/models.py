"""Pydantic models for API request payloads."""

from pydantic import BaseModel


class FoodQuery(BaseModel):
    """Body of food search and Nutritionix lookup requests."""

    query: str | None = None


class QuantityText(BaseModel):
    """Body of a quantity parse request."""

    text: str
