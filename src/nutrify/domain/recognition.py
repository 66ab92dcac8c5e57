"""Domain models for food recognition results."""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import StrEnum
from uuid import UUID

from nutrify.domain.logs import FoodItem


@dataclass(frozen=True)
class FoodAlternative:
    """Plausible candidate that was not picked as the main result."""

    id: UUID
    name: str
    calories: float
    protein_g: float
    carbs_g: float
    fat_g: float
    portion: str
    confidence: float

    def promote(self, timestamp: datetime | None = None) -> "RecognizedFood":
        """Turn the alternative into a recognized food chosen by the user."""
        return RecognizedFood(
            id=self.id,
            name=self.name,
            calories=self.calories,
            protein_g=self.protein_g,
            carbs_g=self.carbs_g,
            fat_g=self.fat_g,
            portion=self.portion,
            timestamp=timestamp or datetime.now(tz=UTC),
            confidence=self.confidence,
        )

    def to_payload(self) -> dict[str, object]:
        return {
            "id": str(self.id),
            "name": self.name,
            "calories": self.calories,
            "protein": self.protein_g,
            "carbs": self.carbs_g,
            "fat": self.fat_g,
            "portion": self.portion,
            "confidence": self.confidence,
        }


@dataclass(frozen=True)
class RecognizedFood:
    """Scored catalog match materialized for a single recognition attempt."""

    id: UUID
    name: str
    calories: float
    protein_g: float
    carbs_g: float
    fat_g: float
    portion: str
    timestamp: datetime
    confidence: float

    def to_alternative(self) -> FoodAlternative:
        """Drop the capture timestamp, keeping nutrition and confidence."""
        return FoodAlternative(
            id=self.id,
            name=self.name,
            calories=self.calories,
            protein_g=self.protein_g,
            carbs_g=self.carbs_g,
            fat_g=self.fat_g,
            portion=self.portion,
            confidence=self.confidence,
        )

    def to_food_item(self, image_url: str | None = None) -> FoodItem:
        """Convert into a loggable food entry."""
        return FoodItem(
            id=self.id,
            name=self.name,
            calories=self.calories,
            protein_g=self.protein_g,
            carbs_g=self.carbs_g,
            fat_g=self.fat_g,
            portion=self.portion,
            timestamp=self.timestamp,
            image_url=image_url,
            confidence=self.confidence,
        )

    def to_payload(self) -> dict[str, object]:
        payload = self.to_alternative().to_payload()
        payload["timestamp"] = int(self.timestamp.timestamp() * 1000)
        return payload


class FailureReason(StrEnum):
    """Why a recognition attempt produced no result."""

    NO_TAGS = "no_tags"
    NO_MATCH = "no_match"
    BACKEND_ERROR = "backend_error"
    TIMEOUT = "timeout"


@dataclass(frozen=True)
class RecognitionSuccess:
    """Recognition outcome with a primary match and ranked alternatives."""

    main_result: RecognizedFood
    alternatives: list[FoodAlternative] = field(default_factory=list)

    def to_payload(self) -> dict[str, object]:
        return {
            "mainResult": self.main_result.to_payload(),
            "alternatives": [alt.to_payload() for alt in self.alternatives],
        }


@dataclass(frozen=True)
class RecognitionFailure:
    """Recognition outcome carrying a user-facing, retry-suggesting message."""

    error: str
    reason: FailureReason

    def to_payload(self) -> dict[str, object]:
        return {"error": self.error, "reason": str(self.reason)}


RecognitionResult = RecognitionSuccess | RecognitionFailure
