"""Persisted shapes for food items and daily logs."""

from datetime import UTC, date, datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from nutrify.domain.logs import DailyLog, FoodItem


class CorruptLogError(ValueError):
    """Raised when a persisted daily log cannot be trusted."""


class FoodItemPayload(BaseModel):
    """Serialized food entry."""

    model_config = ConfigDict(populate_by_name=True)

    id: UUID
    name: str
    calories: float
    protein: float
    carbs: float
    fat: float
    portion: str
    timestamp: int = Field(description="Epoch milliseconds")
    image_url: str | None = Field(default=None, alias="imageUrl")
    confidence: float | None = None

    @classmethod
    def from_domain(cls, item: FoodItem) -> "FoodItemPayload":
        return cls(
            id=item.id,
            name=item.name,
            calories=item.calories,
            protein=item.protein_g,
            carbs=item.carbs_g,
            fat=item.fat_g,
            portion=item.portion,
            timestamp=int(item.timestamp.timestamp() * 1000),
            image_url=item.image_url,
            confidence=item.confidence,
        )

    def to_domain(self) -> FoodItem:
        return FoodItem(
            id=self.id,
            name=self.name,
            calories=self.calories,
            protein_g=self.protein,
            carbs_g=self.carbs,
            fat_g=self.fat,
            portion=self.portion,
            timestamp=datetime.fromtimestamp(self.timestamp / 1000, tz=UTC),
            image_url=self.image_url,
            confidence=self.confidence,
        )


class DailyLogPayload(BaseModel):
    """Serialized daily log. Totals are required and must be numeric."""

    model_config = ConfigDict(populate_by_name=True)

    day: date = Field(alias="date")
    food_items: list[FoodItemPayload] = Field(alias="foodItems")
    total_calories: float = Field(alias="totalCalories", strict=True)
    total_protein: float = Field(alias="totalProtein", strict=True)
    total_carbs: float = Field(alias="totalCarbs", strict=True)
    total_fat: float = Field(alias="totalFat", strict=True)


def daily_log_to_payload(log: DailyLog) -> dict[str, object]:
    """Serialize a daily log into its persisted JSON shape."""
    payload = DailyLogPayload(
        day=log.day,
        food_items=[FoodItemPayload.from_domain(item) for item in log.food_items],
        total_calories=log.total_calories,
        total_protein=log.total_protein_g,
        total_carbs=log.total_carbs_g,
        total_fat=log.total_fat_g,
    )
    return payload.model_dump(mode="json", by_alias=True, exclude_none=True)


def daily_log_from_payload(data: dict[str, object]) -> DailyLog:
    """Load a daily log, failing loudly on missing or malformed totals."""
    try:
        payload = DailyLogPayload.model_validate(data)
    except ValidationError as exc:
        raise CorruptLogError(f"Invalid daily log payload: {exc}") from exc
    return DailyLog(
        day=payload.day,
        food_items=tuple(item.to_domain() for item in payload.food_items),
        total_calories=payload.total_calories,
        total_protein_g=payload.total_protein,
        total_carbs_g=payload.total_carbs,
        total_fat_g=payload.total_fat,
    )
