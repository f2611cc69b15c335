"""CSV export of the day's meal log and user profile."""

import csv
import logging
import math
from dataclasses import dataclass
from decimal import ROUND_HALF_EVEN, Decimal, localcontext
from pathlib import Path

from nutrilog.domain.errors import ExportError, InvalidArgumentError
from nutrilog.domain.meals import MealLog
from nutrilog.domain.profile import UserProfile

_logger = logging.getLogger(__name__)

MEAL_HEADER = [
    "Log Date",
    "Meal ID",
    "Meal Name",
    "Category",
    "Protein (g)",
    "Carbs (g)",
    "Fat (g)",
    "Calories",
]
PROFILE_HEADER = ["Weight (kg)", "Height (cm)", "Age", "Activity Level", "Goal"]
TOTALS_LABEL = "Totals"

# Enough digits for the integer part of any finite float plus the decimals.
_DECIMAL_PRECISION = 400


@dataclass
class CsvNutritionExporter:
    """Writes meal rows, a totals row and the profile to a CSV file."""

    encoding: str = "utf-8"

    def export(self, meal_log: MealLog, profile: UserProfile, target: Path) -> None:
        """Write the export, creating parent directories as needed."""
        if meal_log is None:
            raise InvalidArgumentError("Meal log is required.")
        if profile is None:
            raise InvalidArgumentError("User profile is required.")
        if target is None:
            raise InvalidArgumentError("Target path is required.")
        target = Path(target)
        rows = build_rows(meal_log, profile)
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            with target.open("w", encoding=self.encoding, newline="") as handle:
                writer = csv.writer(handle, lineterminator="\n")
                writer.writerows(rows)
        except OSError as exc:
            raise ExportError(f"Failed to export to {target}: {exc}") from exc
        _logger.info("Exported %s meals to %s", len(meal_log), target)


def build_rows(meal_log: MealLog, profile: UserProfile) -> list[list[str]]:
    """Return every CSV row of an export, blank separator row included."""
    log_date = meal_log.log_date.isoformat()
    rows = [MEAL_HEADER]
    for meal in meal_log.meals:
        rows.append(
            [
                log_date,
                str(meal.id),
                meal.name,
                meal.category_tag,
                format_grams(meal.protein),
                format_grams(meal.carbs),
                format_grams(meal.fat),
                format_calories(meal.calories),
            ]
        )
    rows.append(
        [
            "",
            TOTALS_LABEL,
            "",
            "",
            format_grams(meal_log.total_protein),
            format_grams(meal_log.total_carbs),
            format_grams(meal_log.total_fat),
            format_calories(meal_log.total_calories),
        ]
    )
    rows.append([])
    rows.append(PROFILE_HEADER)
    rows.append(
        [
            format_grams(profile.weight_kg),
            format_grams(profile.height_cm),
            str(profile.age),
            profile.activity_level.value,
            profile.goal.value,
        ]
    )
    return rows


def format_grams(value: float) -> str:
    """Format with at least one and at most four decimals."""
    return _format_number(value, min_places=1, max_places=4)


def format_calories(value: float) -> str:
    """Format with no forced decimals and at most three."""
    return _format_number(value, min_places=0, max_places=3)


def _format_number(value: float, min_places: int, max_places: int) -> str:
    if not math.isfinite(value):
        raise ExportError(f"Cannot export non-finite value {value!r}.")
    quantum = Decimal(1).scaleb(-max_places)
    with localcontext() as context:
        context.prec = _DECIMAL_PRECISION
        rounded = Decimal(repr(float(value))).quantize(
            quantum, rounding=ROUND_HALF_EVEN
        )
    whole, _, fraction = f"{rounded:f}".partition(".")
    fraction = fraction.rstrip("0").ljust(min_places, "0")
    return f"{whole}.{fraction}" if fraction else whole
