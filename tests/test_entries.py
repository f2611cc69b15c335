"""Tests for quick meal entry parsing."""

import pytest

from nutrilog.domain.entries import parse_meal_entry
from nutrilog.domain.errors import InvalidArgumentError


def test_parse_entry_with_protein_only() -> None:
    entry = parse_meal_entry("Chicken Breast #protein 40p 200cal")

    assert entry.name == "Chicken Breast"
    assert entry.category_tag == "#protein"
    assert entry.protein == 40
    assert entry.carbs == 0
    assert entry.fat == 0
    assert entry.calories == 200


def test_parse_entry_with_all_macros_and_decimals() -> None:
    entry = parse_meal_entry("  Oat Porridge #Breakfast 12.5p 54c 7.25f 330.5cal  ")

    assert entry.name == "Oat Porridge"
    assert entry.category_tag == "#breakfast"
    assert (entry.protein, entry.carbs, entry.fat, entry.calories) == (
        12.5,
        54.0,
        7.25,
        330.5,
    )


def test_parse_entry_ignores_case_of_units() -> None:
    entry = parse_meal_entry("apple #SNACK 25C 95CAL")

    assert entry.name == "apple"
    assert entry.category_tag == "#snack"
    assert entry.carbs == 25
    assert entry.calories == 95


@pytest.mark.parametrize(
    "text",
    [
        "not a valid entry",
        "Chicken #protein 40p",
        "Chicken 40p 200cal",
        "Chicken #protein 10f 40p 200cal",
        "Chicken #protein abcp 200cal",
        "#protein 200cal",
        "",
    ],
)
def test_malformed_entries_are_rejected(text: str) -> None:
    with pytest.raises(InvalidArgumentError) as excinfo:
        parse_meal_entry(text)

    assert text in str(excinfo.value)


def test_none_entry_is_rejected() -> None:
    with pytest.raises(InvalidArgumentError):
        parse_meal_entry(None)
