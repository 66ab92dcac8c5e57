"""Catalog domain models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class FoodRecord:
    """Reference food with nutrition facts and descriptive tags."""

    name: str
    calories: float
    protein_g: float
    carbs_g: float
    fat_g: float
    portion: str
    tags: frozenset[str]

    def __post_init__(self) -> None:
        if not self.tags:
            raise ValueError(f"Food record {self.name!r} has no tags")
        for tag in self.tags:
            if tag != tag.lower():
                raise ValueError(f"Tag {tag!r} on {self.name!r} must be lowercase")
        for field_name in ("calories", "protein_g", "carbs_g", "fat_g"):
            if getattr(self, field_name) < 0:
                raise ValueError(f"{field_name} on {self.name!r} must be non-negative")
