"""Reusable custom foods and the food database."""

from dataclasses import dataclass
from datetime import date

from nutrilog.domain.errors import InvalidArgumentError, InvariantViolationError
from nutrilog.domain.meals import Meal
from nutrilog.domain.validation import (
    NUTRIENT_FIELDS,
    require_name,
    require_nutrients,
)


@dataclass(frozen=True, eq=False)
class Food:
    """Immutable nutrient template identified by its case-insensitive name."""

    name: str
    protein: float
    carbs: float
    fat: float
    calories: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "name", require_name(self.name, "Food name").strip())
        values = require_nutrients(self.protein, self.carbs, self.fat, self.calories)
        for field_name, value in zip(NUTRIENT_FIELDS, values, strict=True):
            object.__setattr__(self, field_name, value)

    @property
    def key(self) -> str:
        return self.name.lower()

    @classmethod
    def from_meal(cls, meal: Meal) -> "Food":
        """Create a template carrying a logged meal's name and macros."""
        if meal is None:
            raise InvalidArgumentError("Meal cannot be null.")
        return cls(
            name=meal.name,
            protein=meal.protein,
            carbs=meal.carbs,
            fat=meal.fat,
            calories=meal.calories,
        )

    def to_meal(self, consumed_on: date | None = None) -> Meal:
        """Create a fresh uncategorized meal from this template."""
        return Meal(
            name=self.name,
            protein=self.protein,
            carbs=self.carbs,
            fat=self.fat,
            calories=self.calories,
            consumed_on=consumed_on,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Food):
            return NotImplemented
        return self.key == other.key

    def __hash__(self) -> int:
        return hash(self.key)

    def __str__(self) -> str:
        return (
            f"{self.name} (P:{self.protein:.1f}g, C:{self.carbs:.1f}g, "
            f"F:{self.fat:.1f}g, Cal:{self.calories:.0f})"
        )


class FoodDatabase:
    """Custom foods keyed by lower-cased name."""

    def __init__(self) -> None:
        self._foods: dict[str, Food] = {}

    def add_food(self, food: Food) -> None:
        """Insert a food, replacing any food with the same name in any casing."""
        if food is None:
            raise InvalidArgumentError("Food cannot be null.")
        self._foods[food.key] = food
        self._check_rep()

    def remove_food(self, name: str) -> bool:
        """Remove a food by name and report whether it existed."""
        removed = self._foods.pop(_key(name), None) is not None
        self._check_rep()
        return removed

    def get_food(self, name: str) -> Food | None:
        return self._foods.get(_key(name))

    def has_food(self, name: str) -> bool:
        return _key(name) in self._foods

    def get_all_foods(self) -> list[Food]:
        return list(self._foods.values())

    def size(self) -> int:
        return len(self._foods)

    def is_empty(self) -> bool:
        return not self._foods

    def __len__(self) -> int:
        return len(self._foods)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.strip().lower() in self._foods

    def _check_rep(self) -> None:
        for key, food in self._foods.items():
            if not key or not key.strip():
                raise InvariantViolationError("Food key cannot be blank.")
            if food is None:
                raise InvariantViolationError("Food value cannot be null.")


def _key(name: str | None) -> str:
    if name is None:
        raise InvalidArgumentError("Food name cannot be null.")
    return name.strip().lower()
