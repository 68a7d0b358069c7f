import pytest

from kitchen.domain.catalogue import (
    DEFAULT_UNIT,
    INGREDIENTS,
    NOT_APPLICABLE,
    UNITS,
    default_unit,
    suggest,
)


def test_units() -> None:
    assert UNITS[0] == DEFAULT_UNIT
    assert NOT_APPLICABLE in UNITS


@pytest.mark.parametrize("query", ["", "   "])
def test_blank_query_suggests_nothing(query: str) -> None:
    assert suggest(query) == []


def test_suggest_is_case_insensitive_substring() -> None:
    assert suggest("OIL") == ["Olive oil"]
    assert suggest("pepper") == ["Pepper", "Peppers"]


def test_suggest_keeps_catalogue_order() -> None:
    got = suggest("e")
    assert got == [name for name in INGREDIENTS if "e" in name.lower()]


@pytest.mark.parametrize(
    "name,expected",
    (
        ("Salt", NOT_APPLICABLE),
        ("Pepper", NOT_APPLICABLE),
        ("Milk", "ml"),
        ("Cream", "ml"),
        ("Sour Cream", "ml"),
        ("Cooking cream", None),
        ("Water", "ml"),
        ("Rice", "g"),
        ("Pasta", "g"),
        ("Eggs", None),
        ("salt", None),
    ),
)
def test_default_unit(name: str, expected: str | None) -> None:
    assert default_unit(name) == expected
