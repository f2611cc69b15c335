"""Pydantic models for the stored model snapshot."""

from datetime import date

from pydantic import BaseModel, Field

from nutrilog.domain.foods import Food, FoodDatabase
from nutrilog.domain.identifiers import MealId
from nutrilog.domain.meals import DEFAULT_CATEGORY, Meal, MealLog
from nutrilog.domain.profile import ActivityLevel, Goal, UserProfile
from nutrilog.services.model import AppModel

SNAPSHOT_VERSION = 1


class ProfileSnapshot(BaseModel):
    """Stored user profile."""

    weight_kg: float = 70.0
    height_cm: float = 175.0
    age: int = 30
    activity_level: ActivityLevel = ActivityLevel.MODERATELY_ACTIVE
    goal: Goal = Goal.MAINTAIN_WEIGHT


class MealSnapshot(BaseModel):
    """Stored meal; missing category and date fall back to constructor defaults."""

    id: str
    name: str
    category_tag: str | None = None
    protein: float
    carbs: float
    fat: float
    calories: float
    consumed_on: date | None = None


class MealLogSnapshot(BaseModel):
    """Stored meal log."""

    log_date: date | None = None
    meals: list[MealSnapshot] = Field(default_factory=list)


class FoodSnapshot(BaseModel):
    """Stored custom food."""

    name: str
    protein: float
    carbs: float
    fat: float
    calories: float


class ModelSnapshot(BaseModel):
    """Full stored model, excluding observers and derived values."""

    version: int = SNAPSHOT_VERSION
    profile: ProfileSnapshot = Field(default_factory=ProfileSnapshot)
    meal_log: MealLogSnapshot = Field(default_factory=MealLogSnapshot)
    foods: list[FoodSnapshot] = Field(default_factory=list)


def snapshot_from_model(model: AppModel) -> ModelSnapshot:
    """Capture the persistent state of a model."""
    profile = model.user_profile
    meal_log = model.meal_log
    return ModelSnapshot(
        profile=ProfileSnapshot(
            weight_kg=profile.weight_kg,
            height_cm=profile.height_cm,
            age=profile.age,
            activity_level=profile.activity_level,
            goal=profile.goal,
        ),
        meal_log=MealLogSnapshot(
            log_date=meal_log.log_date,
            meals=[
                MealSnapshot(
                    id=meal.id.value,
                    name=meal.name,
                    category_tag=meal.category_tag,
                    protein=meal.protein,
                    carbs=meal.carbs,
                    fat=meal.fat,
                    calories=meal.calories,
                    consumed_on=meal.consumed_on,
                )
                for meal in meal_log.meals
            ],
        ),
        foods=[
            FoodSnapshot(
                name=food.name,
                protein=food.protein,
                carbs=food.carbs,
                fat=food.fat,
                calories=food.calories,
            )
            for food in model.food_database.get_all_foods()
        ],
    )


def model_from_snapshot(snapshot: ModelSnapshot) -> AppModel:
    """Rebuild a model, running the same defaults and checks as the constructors."""
    profile = UserProfile(
        weight_kg=snapshot.profile.weight_kg,
        height_cm=snapshot.profile.height_cm,
        age=snapshot.profile.age,
        activity_level=snapshot.profile.activity_level,
        goal=snapshot.profile.goal,
    )
    meals = [
        Meal(
            meal_id=MealId(item.id),
            name=item.name,
            category_tag=(
                DEFAULT_CATEGORY if item.category_tag is None else item.category_tag
            ),
            protein=item.protein,
            carbs=item.carbs,
            fat=item.fat,
            calories=item.calories,
            consumed_on=item.consumed_on,
        )
        for item in snapshot.meal_log.meals
    ]
    log_date = snapshot.meal_log.log_date or date.today()
    meal_log = MealLog.restore(log_date, meals)
    food_database = FoodDatabase()
    for item in snapshot.foods:
        food_database.add_food(
            Food(
                name=item.name,
                protein=item.protein,
                carbs=item.carbs,
                fat=item.fat,
                calories=item.calories,
            )
        )
    return AppModel(
        user_profile=profile,
        meal_log=meal_log,
        food_database=food_database,
    )
