"""Tests for numeric literal parsing."""

import pytest

from nutrition_backend.domain.quantities import ParseFailure
from nutrition_backend.parsing.numbers import parse_number


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("1.123 blah", (1.123, " blah")),
        ("1.123blah", (1.123, "blah")),
        ("1/2.", (0.5, ".")),
        ("1 1/2.", (1.5, ".")),
        ("3 / 4 cup", (0.75, "cup")),
        ("2 3/4 cups", (2.75, "cups")),
        (".5 tsp", (0.5, " tsp")),
        ("12", (12.0, "")),
        ("1e3g", (1000.0, "g")),
        ("2 cups", (2.0, " cups")),
    ],
)
def test_parse_number(text: str, expected: tuple[float, str]) -> None:
    value, remainder = parse_number(text)

    assert value == pytest.approx(expected[0])
    assert remainder == expected[1]


def test_compound_fraction_takes_priority_over_whole_number() -> None:
    assert parse_number("1 1/2 cup") == (1.5, "cup")


_HUGE = "1" + "0" * 400


@pytest.mark.parametrize(
    "text",
    [
        "cup",
        "",
        " 1 cup",
        "-1 cup",
        "1/0 cup",
        "2 1/0",
        "1/000",
        f"{_HUGE}/3 cup",
        f"{_HUGE} 1/2 cup",
        f"{_HUGE}/{_HUGE}",
        f"{_HUGE} cups",
    ],
)
def test_parse_number_failures_keep_input(text: str) -> None:
    assert parse_number(text) == ParseFailure(text)


def test_long_denominator_is_parsed_without_error() -> None:
    text = "1/" + "1" * 5000 + " cup"

    assert parse_number(text) == (0.0, "cup")
