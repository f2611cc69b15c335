"""User profile driving the requirement calculation."""

import math
from dataclasses import dataclass
from enum import Enum

from nutrilog.domain.errors import InvalidArgumentError


class ActivityLevel(str, Enum):
    """Habitual activity level."""

    SEDENTARY = "SEDENTARY"
    LIGHTLY_ACTIVE = "LIGHTLY_ACTIVE"
    MODERATELY_ACTIVE = "MODERATELY_ACTIVE"
    VERY_ACTIVE = "VERY_ACTIVE"
    EXTRA_ACTIVE = "EXTRA_ACTIVE"


class Goal(str, Enum):
    """Body weight goal."""

    LOSE_WEIGHT = "LOSE_WEIGHT"
    MAINTAIN_WEIGHT = "MAINTAIN_WEIGHT"
    GAIN_WEIGHT = "GAIN_WEIGHT"


ACTIVITY_MULTIPLIERS: dict[ActivityLevel, float] = {
    ActivityLevel.SEDENTARY: 1.2,
    ActivityLevel.LIGHTLY_ACTIVE: 1.375,
    ActivityLevel.MODERATELY_ACTIVE: 1.55,
    ActivityLevel.VERY_ACTIVE: 1.725,
    ActivityLevel.EXTRA_ACTIVE: 1.9,
}

GOAL_CALORIE_MODIFIERS: dict[Goal, int] = {
    Goal.LOSE_WEIGHT: -500,
    Goal.MAINTAIN_WEIGHT: 0,
    Goal.GAIN_WEIGHT: 500,
}


@dataclass
class UserProfile:
    """Physical attributes and goals of the user."""

    weight_kg: float = 70.0
    height_cm: float = 175.0
    age: int = 30
    activity_level: ActivityLevel = ActivityLevel.MODERATELY_ACTIVE
    goal: Goal = Goal.MAINTAIN_WEIGHT

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """Raise InvalidArgumentError unless every attribute is in range."""
        if not _is_positive_number(self.weight_kg):
            raise InvalidArgumentError("Weight must be a positive number.")
        if not _is_positive_number(self.height_cm):
            raise InvalidArgumentError("Height must be a positive number.")
        if not isinstance(self.age, int) or isinstance(self.age, bool) or self.age < 0:
            raise InvalidArgumentError("Age must be a non-negative integer.")
        if not isinstance(self.activity_level, ActivityLevel):
            raise InvalidArgumentError("Activity level is required.")
        if not isinstance(self.goal, Goal):
            raise InvalidArgumentError("Goal is required.")

    @property
    def activity_multiplier(self) -> float:
        return ACTIVITY_MULTIPLIERS[self.activity_level]

    @property
    def calorie_modifier(self) -> int:
        return GOAL_CALORIE_MODIFIERS[self.goal]


def _is_positive_number(value: object) -> bool:
    if not isinstance(value, int | float) or isinstance(value, bool):
        return False
    return math.isfinite(value) and value > 0
