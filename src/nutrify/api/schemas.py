"""Pydantic models for API requests."""

from pydantic import BaseModel, ConfigDict, Field

from nutrify.domain.catalog import FoodRecord
from nutrify.domain.profile import ActivityLevel, Goal


class RecognizeRequest(BaseModel):
    """Image submitted for recognition."""

    model_config = ConfigDict(populate_by_name=True)

    image_data_url: str = Field(alias="imageDataUrl", pattern=r"^data:image/")


class ProfileRequest(BaseModel):
    """Onboarding profile. Body metrics, when complete, drive the calorie goal."""

    model_config = ConfigDict(populate_by_name=True)

    name: str
    goal: Goal = Goal.MAINTAIN
    age: int | None = Field(default=None, gt=0)
    height_cm: float | None = Field(default=None, alias="heightCm", gt=0)
    weight_kg: float | None = Field(default=None, alias="weightKg", gt=0)
    gender: str | None = None
    activity_level: ActivityLevel | None = Field(default=None, alias="activityLevel")
    daily_calorie_goal: int | None = Field(
        default=None, alias="dailyCalorieGoal", gt=0
    )


def food_record_payload(record: FoodRecord) -> dict[str, object]:
    """Serialize a catalog record for search results."""
    return {
        "name": record.name,
        "calories": record.calories,
        "protein": record.protein_g,
        "carbs": record.carbs_g,
        "fat": record.fat_g,
        "portion": record.portion,
        "tags": sorted(record.tags),
    }
