"""Logged meals and the single-day meal log."""

from collections.abc import Iterable
from datetime import date

from nutrilog.domain.entries import parse_meal_entry
from nutrilog.domain.errors import InvalidArgumentError, InvariantViolationError
from nutrilog.domain.identifiers import MealId
from nutrilog.domain.requirements import DailyRequirements
from nutrilog.domain.validation import (
    require_date,
    require_name,
    require_nutrient,
    require_nutrients,
)

DEFAULT_CATEGORY = "#uncategorized"


def _require_category(category_tag: str | None) -> str:
    if category_tag is None or not isinstance(category_tag, str):
        raise InvalidArgumentError("Category tag must not be null.")
    return category_tag


class Meal:
    """A logged nutrient record tied to one calendar date.

    Identity is the ``id``; every other field may change. Each setter validates
    the new value before storing it, so a rejected assignment keeps the prior
    value.
    """

    def __init__(  # noqa: PLR0913
        self,
        name: str,
        protein: float,
        carbs: float,
        fat: float,
        calories: float,
        consumed_on: date | None = None,
        category_tag: str = DEFAULT_CATEGORY,
        meal_id: MealId | None = None,
    ) -> None:
        self._name = require_name(name, "Meal name")
        self._category_tag = _require_category(category_tag)
        (
            self._protein,
            self._carbs,
            self._fat,
            self._calories,
        ) = require_nutrients(protein, carbs, fat, calories)
        self._consumed_on = require_date(
            date.today() if consumed_on is None else consumed_on,
            "Consumption date",
        )
        self._id = meal_id if meal_id is not None else MealId.random()

    @property
    def id(self) -> MealId:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, value: str) -> None:
        self._name = require_name(value, "Meal name")

    @property
    def category_tag(self) -> str:
        return self._category_tag

    @category_tag.setter
    def category_tag(self, value: str) -> None:
        self._category_tag = _require_category(value)

    @property
    def protein(self) -> float:
        return self._protein

    @protein.setter
    def protein(self, value: float) -> None:
        self._protein = require_nutrient(value, "Protein")

    @property
    def carbs(self) -> float:
        return self._carbs

    @carbs.setter
    def carbs(self, value: float) -> None:
        self._carbs = require_nutrient(value, "Carbs")

    @property
    def fat(self) -> float:
        return self._fat

    @fat.setter
    def fat(self, value: float) -> None:
        self._fat = require_nutrient(value, "Fat")

    @property
    def calories(self) -> float:
        return self._calories

    @calories.setter
    def calories(self, value: float) -> None:
        self._calories = require_nutrient(value, "Calories")

    @property
    def consumed_on(self) -> date:
        return self._consumed_on

    @consumed_on.setter
    def consumed_on(self, value: date) -> None:
        self._consumed_on = require_date(value, "Consumption date")

    def update(  # noqa: PLR0913
        self,
        *,
        name: str | None = None,
        protein: float | None = None,
        carbs: float | None = None,
        fat: float | None = None,
        calories: float | None = None,
        category_tag: str | None = None,
    ) -> None:
        """Replace several fields at once; nothing changes if any value is invalid."""
        new_name = self._name if name is None else require_name(name, "Meal name")
        new_category = (
            self._category_tag
            if category_tag is None
            else _require_category(category_tag)
        )
        values = require_nutrients(
            self._protein if protein is None else protein,
            self._carbs if carbs is None else carbs,
            self._fat if fat is None else fat,
            self._calories if calories is None else calories,
        )
        self._name = new_name
        self._category_tag = new_category
        self._protein, self._carbs, self._fat, self._calories = values

    def scale_by(self, portion_multiplier: float) -> "Meal":
        """Return this meal scaled to a portion.

        A multiplier of exactly 1.0 returns the same instance. Any other
        positive multiplier returns a new meal with a new id.
        """
        if (
            portion_multiplier is None
            or isinstance(portion_multiplier, bool)
            or not portion_multiplier > 0
        ):
            raise InvalidArgumentError("Portion multiplier must be positive.")
        if portion_multiplier == 1.0:
            return self
        return Meal(
            name=self._name,
            category_tag=self._category_tag,
            protein=self._protein * portion_multiplier,
            carbs=self._carbs * portion_multiplier,
            fat=self._fat * portion_multiplier,
            calories=self._calories * portion_multiplier,
            consumed_on=self._consumed_on,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Meal):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"Meal(id={self._id.value!r}, name={self._name!r})"

    def __str__(self) -> str:
        return (
            f"{self._name} {self._category_tag} "
            f"(P:{self._protein:.1f}, C:{self._carbs:.1f}, "
            f"F:{self._fat:.1f}, Cal:{self._calories:.1f})"
        )


class MealLog:
    """Meals consumed on one calendar date.

    Invariant: every meal is dated ``log_date``, ids are pairwise distinct and
    all nutrient values are non-negative. Mutations build the candidate meal
    list, check it, and only then commit it.
    """

    def __init__(self, log_date: date | None = None) -> None:
        self._log_date = require_date(
            date.today() if log_date is None else log_date, "Log date"
        )
        self._meals: list[Meal] = []
        self._check_rep(self._meals)

    @property
    def log_date(self) -> date:
        return self._log_date

    @property
    def meals(self) -> tuple[Meal, ...]:
        """Read-only view of the logged meals in insertion order."""
        return tuple(self._meals)

    def get_meals(self) -> tuple[Meal, ...]:
        return self.meals

    def get_meal(self, meal_id: MealId) -> Meal | None:
        """Return the meal carrying the id, if logged."""
        if meal_id is None:
            raise InvalidArgumentError("Meal id cannot be null.")
        for meal in self._meals:
            if meal.id == meal_id:
                return meal
        return None

    def add_meal(self, meal: Meal) -> None:
        """Append a meal dated on the log date."""
        if meal is None:
            raise InvalidArgumentError("Meal cannot be null.")
        if meal.consumed_on != self._log_date:
            raise InvalidArgumentError("Meal date does not match log date.")
        candidate = [*self._meals, meal]
        self._check_rep(candidate)
        self._meals = candidate

    def add_meal_from_entry(self, meal_entry: str) -> Meal:
        """Parse a quick entry into a meal dated on the log date and append it."""
        entry = parse_meal_entry(meal_entry)
        meal = Meal(
            name=entry.name,
            category_tag=entry.category_tag,
            protein=entry.protein,
            carbs=entry.carbs,
            fat=entry.fat,
            calories=entry.calories,
            consumed_on=self._log_date,
        )
        self.add_meal(meal)
        return meal

    def remove_meal(self, meal_id: MealId) -> None:
        """Remove the meal with the id; unknown ids are ignored."""
        if meal_id is None:
            raise InvalidArgumentError("Meal id cannot be null.")
        candidate = [meal for meal in self._meals if meal.id != meal_id]
        self._check_rep(candidate)
        self._meals = candidate

    def update_meal(  # noqa: PLR0913
        self,
        meal_id: MealId,
        name: str,
        protein: float,
        carbs: float,
        fat: float,
        calories: float,
    ) -> None:
        """Overwrite the name and macros of a logged meal."""
        if meal_id is None:
            raise InvalidArgumentError("Meal id cannot be null.")
        name = require_name(name, "Meal name")
        values = require_nutrients(protein, carbs, fat, calories)
        meal = self.get_meal(meal_id)
        if meal is None:
            raise InvalidArgumentError(f"Meal with id {meal_id} not found.")
        meal.update(
            name=name.strip(),
            protein=values[0],
            carbs=values[1],
            fat=values[2],
            calories=values[3],
        )
        self._check_rep(self._meals)

    @property
    def total_protein(self) -> float:
        return sum(meal.protein for meal in self._meals)

    @property
    def total_carbs(self) -> float:
        return sum(meal.carbs for meal in self._meals)

    @property
    def total_fat(self) -> float:
        return sum(meal.fat for meal in self._meals)

    @property
    def total_calories(self) -> float:
        return sum(meal.calories for meal in self._meals)

    def remaining_calories(self, requirements: DailyRequirements) -> float:
        """Calories left against the target; negative once over it."""
        if requirements is None:
            raise InvalidArgumentError("Daily requirements are required.")
        return requirements.calories - self.total_calories

    @classmethod
    def restore(cls, log_date: date, meals: Iterable[Meal]) -> "MealLog":
        """Rebuild a log from stored meals, re-running every invariant."""
        log = cls(log_date)
        candidate = list(meals)
        log._check_rep(candidate)
        log._meals = candidate
        return log

    def __len__(self) -> int:
        return len(self._meals)

    def _check_rep(self, meals: list[Meal]) -> None:
        seen: set[MealId] = set()
        for meal in meals:
            if meal is None:
                raise InvariantViolationError("Meal cannot be null.")
            if meal.id is None:
                raise InvariantViolationError("Meal id cannot be null.")
            if meal.category_tag is None:
                raise InvariantViolationError("Meal category cannot be null.")
            if meal.id in seen:
                raise InvariantViolationError(f"Duplicate meal id found: {meal.id}")
            seen.add(meal.id)
            if meal.consumed_on != self._log_date:
                raise InvariantViolationError(
                    f"Meal date does not match log date: {meal.consumed_on}"
                )
            if min(meal.protein, meal.carbs, meal.fat, meal.calories) < 0:
                raise InvariantViolationError(
                    "Nutritional values must be non-negative."
                )
