"""Daily calorie and macronutrient targets."""

from dataclasses import dataclass

from nutrilog.domain.errors import InvalidArgumentError
from nutrilog.domain.profile import UserProfile

PROTEIN_SHARE = 0.30
CARBS_SHARE = 0.40
FAT_SHARE = 0.30
KCAL_PER_GRAM_PROTEIN = 4
KCAL_PER_GRAM_CARBS = 4
KCAL_PER_GRAM_FAT = 9


@dataclass(frozen=True)
class DailyRequirements:
    """Computed daily targets; callers round for display."""

    calories: float
    protein: float
    carbs: float
    fat: float


class RequirementCalculator:
    """Derives daily targets from a user profile."""

    def calculate(self, profile: UserProfile) -> DailyRequirements:
        """Return targets using the Mifflin-St Jeor BMR with the male constant."""
        if profile is None:
            raise InvalidArgumentError("User profile is required for calculations.")
        bmr = (
            10 * profile.weight_kg
            + 6.25 * profile.height_cm
            - 5 * profile.age
            + 5
        )
        maintenance_calories = bmr * profile.activity_multiplier
        target_calories = maintenance_calories + profile.calorie_modifier
        return DailyRequirements(
            calories=target_calories,
            protein=(target_calories * PROTEIN_SHARE) / KCAL_PER_GRAM_PROTEIN,
            carbs=(target_calories * CARBS_SHARE) / KCAL_PER_GRAM_CARBS,
            fat=(target_calories * FAT_SHARE) / KCAL_PER_GRAM_FAT,
        )


_DEFAULT_CALCULATOR = RequirementCalculator()


def calculate_requirements(profile: UserProfile) -> DailyRequirements:
    """Calculate targets with the default calculator."""
    return _DEFAULT_CALCULATOR.calculate(profile)
