"""Daily log aggregation."""

from dataclasses import replace
from datetime import date

from nutrify.domain.logs import DailyLog, FoodItem


def new_daily_log(day: date) -> DailyLog:
    """Return an empty log for a calendar day."""
    return DailyLog(
        day=day,
        food_items=(),
        total_calories=0.0,
        total_protein_g=0.0,
        total_carbs_g=0.0,
        total_fat_g=0.0,
    )


def append_entry(log: DailyLog, item: FoodItem) -> DailyLog:
    """Return a new log with the item appended and totals advanced.

    Values are summed as given; range checks belong to whoever built the item.
    """
    return replace(
        log,
        food_items=(*log.food_items, item),
        total_calories=log.total_calories + item.calories,
        total_protein_g=log.total_protein_g + item.protein_g,
        total_carbs_g=log.total_carbs_g + item.carbs_g,
        total_fat_g=log.total_fat_g + item.fat_g,
    )
