"""Pydantic models for HTTP requests and responses."""

from datetime import date

from pydantic import BaseModel

from nutrilog.domain.foods import Food
from nutrilog.domain.meals import DEFAULT_CATEGORY, Meal
from nutrilog.domain.profile import ActivityLevel, Goal, UserProfile
from nutrilog.domain.requirements import DailyRequirements


class ProfilePayload(BaseModel):
    """User profile payload."""

    weight_kg: float
    height_cm: float
    age: int
    activity_level: ActivityLevel
    goal: Goal

    @classmethod
    def from_domain(cls, profile: UserProfile) -> "ProfilePayload":
        return cls(
            weight_kg=profile.weight_kg,
            height_cm=profile.height_cm,
            age=profile.age,
            activity_level=profile.activity_level,
            goal=profile.goal,
        )

    def to_domain(self) -> UserProfile:
        return UserProfile(
            weight_kg=self.weight_kg,
            height_cm=self.height_cm,
            age=self.age,
            activity_level=self.activity_level,
            goal=self.goal,
        )


class MealRequest(BaseModel):
    """Meal entered field by field."""

    name: str
    category_tag: str = DEFAULT_CATEGORY
    protein: float = 0.0
    carbs: float = 0.0
    fat: float = 0.0
    calories: float = 0.0
    portion: float = 1.0


class MealEntryRequest(BaseModel):
    """Quick-entry text such as ``Chicken Breast #protein 40p 200cal``."""

    entry: str


class MealUpdateRequest(BaseModel):
    """New name and macros for a logged meal."""

    name: str
    protein: float
    carbs: float
    fat: float
    calories: float


class FoodPayload(BaseModel):
    """Custom food payload."""

    name: str
    protein: float
    carbs: float
    fat: float
    calories: float

    @classmethod
    def from_domain(cls, food: Food) -> "FoodPayload":
        return cls(
            name=food.name,
            protein=food.protein,
            carbs=food.carbs,
            fat=food.fat,
            calories=food.calories,
        )

    def to_domain(self) -> Food:
        return Food(
            name=self.name,
            protein=self.protein,
            carbs=self.carbs,
            fat=self.fat,
            calories=self.calories,
        )


class PortionRequest(BaseModel):
    """Portion multiplier for logging a custom food."""

    portion: float = 1.0


class ExportRequest(BaseModel):
    """Target file name inside the export directory."""

    filename: str | None = None


class MealResponse(BaseModel):
    """Logged meal."""

    id: str
    name: str
    category_tag: str
    protein: float
    carbs: float
    fat: float
    calories: float
    consumed_on: date

    @classmethod
    def from_domain(cls, meal: Meal) -> "MealResponse":
        return cls(
            id=meal.id.value,
            name=meal.name,
            category_tag=meal.category_tag,
            protein=meal.protein,
            carbs=meal.carbs,
            fat=meal.fat,
            calories=meal.calories,
            consumed_on=meal.consumed_on,
        )


class TotalsResponse(BaseModel):
    """Summed or target macros."""

    calories: float
    protein: float
    carbs: float
    fat: float

    @classmethod
    def from_requirements(cls, requirements: DailyRequirements) -> "TotalsResponse":
        return cls(
            calories=requirements.calories,
            protein=requirements.protein,
            carbs=requirements.carbs,
            fat=requirements.fat,
        )


class StateResponse(BaseModel):
    """Everything a view needs to render the day."""

    log_date: date
    profile: ProfilePayload
    meals: list[MealResponse]
    totals: TotalsResponse
    requirements: TotalsResponse
    remaining_calories: float
    foods: list[FoodPayload]
