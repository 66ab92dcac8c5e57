"""Explicit application state for profile, logs and food lists."""

import asyncio
import logging
from dataclasses import dataclass
from datetime import UTC, date, datetime

from nutrify.domain.logs import DailyLog, FoodItem
from nutrify.domain.profile import (
    DailyProgress,
    MacroTargets,
    UserProfile,
    macro_targets,
)
from nutrify.services.daily_log import append_entry, new_daily_log
from nutrify.services.recents import Favorites, RecentFoods

_logger = logging.getLogger(__name__)


@dataclass
class NutritionState:
    """State container handed to whichever layer needs it.

    Appends go through a lock so two concurrent adds never compute totals
    off the same stale log.
    """

    profile: UserProfile | None
    logs: dict[date, DailyLog]
    recent_foods: RecentFoods
    favorites: Favorites
    _lock: asyncio.Lock

    def __init__(self, profile: UserProfile | None = None) -> None:
        self.profile = profile
        self.logs = {}
        self.recent_foods = RecentFoods()
        self.favorites = Favorites()
        self._lock = asyncio.Lock()

    def log_for(self, day: date | None = None) -> DailyLog:
        """Return the log for a day, creating an empty one on first sight."""
        resolved = day or _today()
        log = self.logs.get(resolved)
        if log is None:
            log = new_daily_log(resolved)
            self.logs[resolved] = log
        return log

    def load_log(self, log: DailyLog) -> None:
        """Install a log restored from storage."""
        self.logs[log.day] = log

    async def add_food_item(self, item: FoodItem, day: date | None = None) -> DailyLog:
        """Append an item to a day's log and record it as recently used."""
        async with self._lock:
            updated = append_entry(self.log_for(day), item)
            self.logs[updated.day] = updated
            self.recent_foods.add(item)
        _logger.info(
            "Logged %s for %s (total %.1f kcal)",
            item.name,
            updated.day.isoformat(),
            updated.total_calories,
        )
        return updated

    def progress(self, day: date | None = None) -> DailyProgress:
        """Measure a day's log against the profile's calorie goal."""
        if self.profile is None:
            raise LookupError("No profile has been set")
        log = self.log_for(day)
        goal = float(self.profile.daily_calorie_goal)
        percentage = min(100.0, log.total_calories / goal * 100) if goal > 0 else 0.0
        consumed = MacroTargets(
            protein_g=log.total_protein_g,
            carbs_g=log.total_carbs_g,
            fat_g=log.total_fat_g,
        )
        return DailyProgress(
            calorie_goal=goal,
            consumed_calories=log.total_calories,
            remaining_calories=goal - log.total_calories,
            calorie_percentage=percentage,
            consumed=consumed,
            targets=macro_targets(goal),
        )


def _today() -> date:
    return datetime.now(tz=UTC).date()
