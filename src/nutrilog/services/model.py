"""Aggregate root for the nutrition model and its change notifications."""

import logging
from datetime import date
from pathlib import Path
from typing import Protocol

from nutrilog.domain.errors import ExportError, InvalidArgumentError
from nutrilog.domain.foods import Food, FoodDatabase
from nutrilog.domain.identifiers import MealId
from nutrilog.domain.meals import Meal, MealLog
from nutrilog.domain.profile import UserProfile
from nutrilog.domain.requirements import DailyRequirements, RequirementCalculator

_logger = logging.getLogger(__name__)


class ModelObserver(Protocol):
    """Receives the whole model after every visible change; must not mutate it."""

    def update(self, model: "AppModel") -> None:
        """React to a model change."""


class NutritionExporter(Protocol):
    """Export interface for the day's meal log and profile."""

    def export(self, meal_log: MealLog, profile: UserProfile, target: Path) -> None:
        """Write the data to the target path."""


class AppModel:
    """Owns the user profile, the meal log and the custom food database.

    Every mutating operation delegates to the owning component and then
    notifies all registered observers once. A rejected mutation raises before
    any observer is called.
    """

    def __init__(
        self,
        user_profile: UserProfile | None = None,
        meal_log: MealLog | None = None,
        food_database: FoodDatabase | None = None,
        exporter: NutritionExporter | None = None,
        calculator: RequirementCalculator | None = None,
    ) -> None:
        self._user_profile = (
            user_profile if user_profile is not None else UserProfile()
        )
        self._meal_log = meal_log if meal_log is not None else MealLog()
        self._food_database = (
            food_database if food_database is not None else FoodDatabase()
        )
        self._exporter = exporter
        self._calculator = (
            calculator if calculator is not None else RequirementCalculator()
        )
        self._observers: list[ModelObserver] = []

    @property
    def user_profile(self) -> UserProfile:
        return self._user_profile

    @property
    def meal_log(self) -> MealLog:
        return self._meal_log

    @property
    def food_database(self) -> FoodDatabase:
        return self._food_database

    @property
    def log_date(self) -> date:
        return self._meal_log.log_date

    def set_exporter(self, exporter: NutritionExporter | None) -> None:
        self._exporter = exporter

    def update_user_profile(self, profile: UserProfile) -> None:
        """Replace the user profile."""
        if profile is None:
            raise InvalidArgumentError("User profile cannot be null.")
        profile.validate()
        self._user_profile = profile
        self.notify_observers()

    def add_meal(self, meal: Meal) -> None:
        self._meal_log.add_meal(meal)
        self.notify_observers()

    def add_meal_from_entry(self, meal_entry: str) -> Meal:
        """Log a meal from quick-entry text such as ``Oats #breakfast 5p 150cal``."""
        meal = self._meal_log.add_meal_from_entry(meal_entry)
        self.notify_observers()
        return meal

    def remove_meal(self, meal_id: MealId) -> None:
        self._meal_log.remove_meal(meal_id)
        self.notify_observers()

    def update_meal(  # noqa: PLR0913
        self,
        meal_id: MealId,
        name: str,
        protein: float,
        carbs: float,
        fat: float,
        calories: float,
    ) -> None:
        self._meal_log.update_meal(meal_id, name, protein, carbs, fat, calories)
        self.notify_observers()

    def add_custom_food(self, food: Food) -> None:
        self._food_database.add_food(food)
        self.notify_observers()

    def remove_custom_food(self, food_name: str) -> bool:
        """Remove a custom food; observers hear about it only if it existed."""
        removed = self._food_database.remove_food(food_name)
        if removed:
            self.notify_observers()
        return removed

    def log_custom_food(self, food_name: str, portion: float = 1.0) -> Meal:
        """Log a portion of a custom food as a meal on the log date."""
        food = self._food_database.get_food(food_name)
        if food is None:
            raise InvalidArgumentError(f"Custom food {food_name!r} not found.")
        meal = food.to_meal(self._meal_log.log_date).scale_by(portion)
        self._meal_log.add_meal(meal)
        self.notify_observers()
        return meal

    def save_meal_as_food(self, meal_id: MealId) -> Food:
        """Store a logged meal's name and macros as a custom food."""
        meal = self._meal_log.get_meal(meal_id)
        if meal is None:
            raise InvalidArgumentError(f"Meal with id {meal_id} not found.")
        food = Food.from_meal(meal)
        self._food_database.add_food(food)
        self.notify_observers()
        return food

    def get_daily_requirements(self) -> DailyRequirements:
        return self._calculator.calculate(self._user_profile)

    def remaining_calories(self) -> float:
        return self._meal_log.remaining_calories(self.get_daily_requirements())

    def export_nutrition_data(self, target: Path) -> None:
        """Hand the meal log and profile to the export collaborator."""
        if target is None:
            raise InvalidArgumentError("Export target is required.")
        if self._exporter is None:
            raise ExportError("No exporter is configured.")
        self._exporter.export(self._meal_log, self._user_profile, Path(target))

    def add_observer(self, observer: ModelObserver) -> None:
        if observer is None:
            raise InvalidArgumentError("Observer cannot be null.")
        self._observers.append(observer)

    def remove_observer(self, observer: ModelObserver) -> None:
        if observer in self._observers:
            self._observers.remove(observer)

    @property
    def observer_count(self) -> int:
        return len(self._observers)

    def notify_observers(self) -> None:
        """Call every observer with this model, in registration order."""
        observers = list(self._observers)
        _logger.debug("Notifying %s observers", len(observers))
        for observer in observers:
            observer.update(self)
