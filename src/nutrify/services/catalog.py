"""Food catalog with built-in reference foods."""

import json
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path

from pydantic import BaseModel, Field, TypeAdapter

from nutrify.domain.catalog import FoodRecord


class FoodRecordPayload(BaseModel):
    """Seed file entry for a catalog record."""

    name: str
    calories: float = Field(ge=0)
    protein: float = Field(ge=0)
    carbs: float = Field(ge=0)
    fat: float = Field(ge=0)
    portion: str
    tags: list[str] = Field(min_length=1)

    def to_domain(self) -> FoodRecord:
        return FoodRecord(
            name=self.name,
            calories=self.calories,
            protein_g=self.protein,
            carbs_g=self.carbs,
            fat_g=self.fat,
            portion=self.portion,
            tags=frozenset(tag.strip().lower() for tag in self.tags),
        )


_SEED_ADAPTER = TypeAdapter(list[FoodRecordPayload])


def _record(  # noqa: PLR0913
    name: str,
    calories: float,
    protein_g: float,
    carbs_g: float,
    fat_g: float,
    portion: str,
    tags: list[str],
) -> FoodRecord:
    return FoodRecord(
        name=name,
        calories=calories,
        protein_g=protein_g,
        carbs_g=carbs_g,
        fat_g=fat_g,
        portion=portion,
        tags=frozenset(tags),
    )


DEFAULT_FOODS: tuple[FoodRecord, ...] = (
    _record("Apple", 95, 0.5, 25, 0.3, "1 medium (182g)",
            ["fruit", "apple", "red", "green", "fresh"]),
    _record("Banana", 105, 1.3, 27, 0.4, "1 medium (118g)",
            ["fruit", "banana", "yellow", "fresh"]),
    _record("Grilled Chicken Breast", 165, 31, 0, 3.6, "100g",
            ["meat", "chicken", "protein", "grilled", "cooked"]),
    _record("Salmon", 206, 22, 0, 13, "100g",
            ["fish", "seafood", "protein", "salmon", "cooked"]),
    _record("Greek Yogurt", 100, 10, 4, 5, "100g",
            ["dairy", "yogurt", "protein", "white"]),
    _record("Mixed Salad with Grilled Chicken", 350, 25, 12, 18, "1 bowl (300g)",
            ["salad", "chicken", "vegetable", "mixed", "green", "healthy"]),
    _record("Pasta with Tomato Sauce", 285, 10, 54, 2.5, "1 cup (200g)",
            ["pasta", "carbs", "tomato", "sauce", "italian"]),
    _record("Steak with Vegetables", 450, 40, 15, 22, "1 plate (350g)",
            ["meat", "beef", "steak", "protein", "vegetable", "cooked"]),
    _record("Chocolate Cake", 370, 5, 50, 18, "1 slice (100g)",
            ["dessert", "cake", "chocolate", "sweet", "brown"]),
    _record("Pizza Slice", 285, 12, 36, 12, "1 slice (100g)",
            ["pizza", "fast food", "cheese", "italian"]),
    _record("Burger with Fries", 750, 25, 65, 40, "1 meal (400g)",
            ["burger", "fast food", "fries", "meat", "potato"]),
    _record("Sushi Roll", 350, 15, 65, 3, "8 pieces (230g)",
            ["sushi", "japanese", "rice", "fish", "seafood"]),
)  # fmt: skip


@dataclass(frozen=True)
class FoodCatalog:
    """Read-only set of reference foods used for matching and search."""

    records: tuple[FoodRecord, ...] = DEFAULT_FOODS

    @classmethod
    def from_json(cls, path: str | Path) -> "FoodCatalog":
        """Load catalog records from a JSON seed file."""
        raw = json.loads(Path(path).read_text(encoding="utf-8"))
        payloads = _SEED_ADAPTER.validate_python(raw)
        return cls(records=tuple(payload.to_domain() for payload in payloads))

    def __iter__(self) -> Iterator[FoodRecord]:
        return iter(self.records)

    def __len__(self) -> int:
        return len(self.records)

    def search(self, query: str | None, limit: int = 10) -> list[FoodRecord]:
        """Return records whose name contains the query, ignoring case."""
        if not query or not query.strip():
            return []
        needle = query.strip().lower()
        matches = [record for record in self.records if needle in record.name.lower()]
        return matches[:limit]

    def vocabulary(self) -> frozenset[str]:
        """Return every tag used across the catalog."""
        return frozenset(tag for record in self.records for tag in record.tags)
