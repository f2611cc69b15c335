"""Shared checks for entities holding macronutrient values."""

import math
from datetime import date

from nutrilog.domain.errors import InvalidArgumentError

NUTRIENT_FIELDS = ("protein", "carbs", "fat", "calories")


def require_name(name: str | None, label: str = "Name") -> str:
    """Return the name if it is a non-blank string."""
    if name is None or not isinstance(name, str) or not name.strip():
        raise InvalidArgumentError(f"{label} cannot be blank.")
    return name


def require_nutrient(value: float | None, label: str) -> float:
    """Return the value as a float if it is a non-negative number."""
    if not isinstance(value, int | float) or isinstance(value, bool):
        raise InvalidArgumentError(f"{label} must be a number.")
    number = float(value)
    if not math.isfinite(number):
        raise InvalidArgumentError(f"{label} must be a number.")
    if number < 0:
        raise InvalidArgumentError(f"{label} must be non-negative.")
    return number


def require_nutrients(
    protein: float, carbs: float, fat: float, calories: float
) -> tuple[float, float, float, float]:
    """Validate all four macro values at once."""
    return (
        require_nutrient(protein, "Protein"),
        require_nutrient(carbs, "Carbs"),
        require_nutrient(fat, "Fat"),
        require_nutrient(calories, "Calories"),
    )


def require_date(value: date | None, label: str = "Date") -> date:
    """Return the value if it is a calendar date."""
    if value is None or not isinstance(value, date):
        raise InvalidArgumentError(f"{label} must be provided.")
    return value
