"""Parsing of free-text quick meal entries.

A quick entry looks like ``Chicken Breast #protein 40p 200cal``: a name made of
letters and spaces, a ``#category`` tag, optional protein/carbs/fat amounts in
that order and a mandatory calorie amount. Matching ignores case and the
surrounding whitespace.
"""

import re
from dataclasses import dataclass

from nutrilog.domain.errors import InvalidArgumentError

_NUMBER = r"\d+(?:\.\d+)?"

MEAL_ENTRY_PATTERN = re.compile(
    r"^\s*(?P<name>[A-Za-z][A-Za-z\s]*)\s+#(?P<category>\w+)\s*"
    rf"(?:(?P<protein>{_NUMBER})p\s*)?"
    rf"(?:(?P<carbs>{_NUMBER})c\s*)?"
    rf"(?:(?P<fat>{_NUMBER})f\s*)?"
    rf"(?P<calories>{_NUMBER})cal\s*$",
    re.IGNORECASE,
)


@dataclass(frozen=True)
class MealEntry:
    """Structured result of a parsed quick entry."""

    name: str
    category_tag: str
    protein: float
    carbs: float
    fat: float
    calories: float


def parse_meal_entry(text: str | None) -> MealEntry:
    """Parse a quick entry, raising InvalidArgumentError if it does not match."""
    if text is None:
        raise InvalidArgumentError("Meal entry cannot be null.")
    match = MEAL_ENTRY_PATTERN.match(text.strip())
    if match is None:
        raise InvalidArgumentError(f"Meal entry format is invalid: {text}")
    return MealEntry(
        name=match.group("name").strip(),
        category_tag="#" + match.group("category").lower(),
        protein=_to_amount(match.group("protein")),
        carbs=_to_amount(match.group("carbs")),
        fat=_to_amount(match.group("fat")),
        calories=_to_amount(match.group("calories")),
    )


def _to_amount(raw: str | None) -> float:
    return 0.0 if raw is None else float(raw)
