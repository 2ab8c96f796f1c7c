"""Tests for the food service."""

import asyncio

import pytest

from nutrition_backend.domain.foods import parse_nutritionix_food
from nutrition_backend.domain.measurements import NominalServing
from nutrition_backend.services.foods import build_food_form
from tests.conftest import egg_payload, kernels_payload

CUP_LITERS = 0.2365882365


def test_build_food_form_from_egg() -> None:
    form, servings = build_food_form(parse_nutritionix_food(egg_payload()))

    assert form.name == "egg"
    assert form.mass == 50.0
    assert form.nutrition[:4] == [203.0, 6.28, 204.0, 4.76]
    assert form.g2l_density == pytest.approx(243.0 / CUP_LITERS)
    assert servings == [
        NominalServing("small", 38.0),
        NominalServing("large", 50.0),
        NominalServing("3 slices", 34.5),
    ]


def test_build_food_form_divides_mass_by_serving_qty() -> None:
    form, servings = build_food_form(
        parse_nutritionix_food(kernels_payload(), upc="0001")
    )

    assert form.mass == 16.5
    assert form.upc == "0001"
    assert form.g2l_density is None
    assert servings == []


def test_natural_stores_and_caches(food_service, nutritionix_client) -> None:
    foods = asyncio.run(food_service.natural("1 Egg"))
    again = asyncio.run(food_service.natural("1 egg"))

    assert [food.name for food in foods] == ["egg"]
    assert again == foods
    assert nutritionix_client.natural_calls == 1
    assert len(food_service.repository.foods) == 1


def test_natural_retries_once(food_service, nutritionix_client) -> None:
    nutritionix_client.failures = 1

    foods = asyncio.run(food_service.natural("egg"))

    assert len(foods) == 1
    assert nutritionix_client.natural_calls == 2


def test_natural_gives_up_after_retries(food_service, nutritionix_client) -> None:
    nutritionix_client.failures = 5

    with pytest.raises(RuntimeError):
        asyncio.run(food_service.natural("egg"))


def test_lookup_upc_prefers_store(food_service, nutritionix_client) -> None:
    nutritionix_client.upc_foods["0001"] = [kernels_payload()]

    first = asyncio.run(food_service.lookup_upc("0001"))
    second = asyncio.run(food_service.lookup_upc("0001"))

    assert first is not None
    assert first.upc == "0001"
    assert second == first
    assert nutritionix_client.upc_calls == 1


def test_lookup_upc_without_match(food_service) -> None:
    assert asyncio.run(food_service.lookup_upc("404")) is None


def test_render_includes_measurements_and_nutrients(food_service) -> None:
    food = asyncio.run(food_service.natural("egg"))[0]

    rendered = food_service.render(food)

    assert rendered["name"] == "egg"
    assert [n["name"] for n in rendered["nutrients"]] == [
        "Protein",
        "Total lipid (fat)",
        "Carbohydrate, by difference",
        "Energy",
    ]
    measurements = rendered["measurements"]
    assert [m["name"] for m in measurements[:3]] == ["milligram", "gram", "kilogram"]
    assert measurements[5]["name"] == "cup"
    assert measurements[5]["mass_equivalent_grams"] == pytest.approx(243.0)
    assert [(m["kind"], m["name"]) for m in measurements[-3:]] == [
        ("nominal", "small"),
        ("nominal", "large"),
        ("nominal", "3 slices"),
    ]
