"""Profile domain models and daily targets."""

from dataclasses import dataclass
from enum import StrEnum


class Goal(StrEnum):
    LOSE = "lose"
    MAINTAIN = "maintain"
    GAIN = "gain"


class ActivityLevel(StrEnum):
    SEDENTARY = "sedentary"
    LIGHT = "light"
    MODERATE = "moderate"
    VERY_ACTIVE = "very_active"


_ACTIVITY_MULTIPLIERS = {
    ActivityLevel.SEDENTARY: 1.2,
    ActivityLevel.LIGHT: 1.375,
    ActivityLevel.MODERATE: 1.55,
    ActivityLevel.VERY_ACTIVE: 1.725,
}

_GOAL_FACTORS = {
    Goal.LOSE: 0.8,
    Goal.MAINTAIN: 1.0,
    Goal.GAIN: 1.15,
}

DEFAULT_CALORIE_GOAL = 2000


@dataclass(frozen=True)
class UserProfile:
    """Body and goal profile captured during onboarding."""

    name: str
    goal: Goal
    daily_calorie_goal: int = DEFAULT_CALORIE_GOAL
    age: int | None = None
    height_cm: float | None = None
    weight_kg: float | None = None
    gender: str | None = None
    activity_level: ActivityLevel | None = None


@dataclass(frozen=True)
class MacroTargets:
    """Daily macro targets in grams."""

    protein_g: float
    carbs_g: float
    fat_g: float


def estimate_daily_calories(  # noqa: PLR0913
    *,
    age: int,
    height_cm: float,
    weight_kg: float,
    gender: str,
    activity_level: ActivityLevel,
    goal: Goal,
) -> int:
    """Estimate a calorie target with the Mifflin-St Jeor equation."""
    bmr = 10 * weight_kg + 6.25 * height_cm - 5 * age
    bmr += 5 if gender == "male" else -161
    calories = bmr * _ACTIVITY_MULTIPLIERS[activity_level] * _GOAL_FACTORS[goal]
    return round(calories)


def macro_targets(calorie_goal: float) -> MacroTargets:
    """Split a calorie goal 30/45/25 across protein, carbs and fat."""
    return MacroTargets(
        protein_g=calorie_goal * 0.3 / 4,
        carbs_g=calorie_goal * 0.45 / 4,
        fat_g=calorie_goal * 0.25 / 9,
    )


@dataclass(frozen=True)
class DailyProgress:
    """Consumption for a day measured against the profile's targets."""

    calorie_goal: float
    consumed_calories: float
    remaining_calories: float
    calorie_percentage: float
    consumed: MacroTargets
    targets: MacroTargets
