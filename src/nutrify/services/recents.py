"""Small ordered collections of food items keyed by id."""

from collections import OrderedDict
from dataclasses import dataclass
from uuid import UUID

from nutrify.domain.logs import FoodItem

RECENT_FOODS_LIMIT = 10


@dataclass
class RecentFoods:
    """Most-recently-used foods, newest first, evicting the oldest."""

    capacity: int
    _entries: "OrderedDict[UUID, FoodItem]"

    def __init__(self, capacity: int = RECENT_FOODS_LIMIT) -> None:
        if capacity < 1:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self._entries = OrderedDict()

    def add(self, item: FoodItem) -> None:
        """Move or insert the item at the front."""
        self._entries[item.id] = item
        self._entries.move_to_end(item.id, last=False)
        while len(self._entries) > self.capacity:
            self._entries.popitem(last=True)

    def items(self) -> list[FoodItem]:
        return list(self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)


@dataclass
class Favorites:
    """Favorite foods in the order they were added."""

    _entries: dict[UUID, FoodItem]

    def __init__(self) -> None:
        self._entries = {}

    def add(self, item: FoodItem) -> bool:
        """Add the item unless already present. Returns whether it was added."""
        if item.id in self._entries:
            return False
        self._entries[item.id] = item
        return True

    def remove(self, food_id: UUID) -> None:
        self._entries.pop(food_id, None)

    def items(self) -> list[FoodItem]:
        return list(self._entries.values())

    def __contains__(self, food_id: object) -> bool:
        return food_id in self._entries

    def __len__(self) -> int:
        return len(self._entries)
