"""Domain models for the daily food log."""

from dataclasses import dataclass
from datetime import date, datetime
from uuid import UUID


@dataclass(frozen=True)
class FoodItem:
    """Food entry logged by the user."""

    id: UUID
    name: str
    calories: float
    protein_g: float
    carbs_g: float
    fat_g: float
    portion: str
    timestamp: datetime
    image_url: str | None = None
    confidence: float | None = None


@dataclass(frozen=True)
class DailyLog:
    """Food entries for one calendar day with running totals."""

    day: date
    food_items: tuple[FoodItem, ...]
    total_calories: float
    total_protein_g: float
    total_carbs_g: float
    total_fat_g: float
