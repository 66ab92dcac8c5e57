"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from datetime import date
from uuid import UUID

from fastapi import FastAPI, HTTPException, Request, status

from nutrify.api.schemas import ProfileRequest, RecognizeRequest, food_record_payload
from nutrify.app_logging import configure_logging
from nutrify.containers import AppContainer
from nutrify.domain.logs import FoodItem
from nutrify.domain.payloads import FoodItemPayload, daily_log_to_payload
from nutrify.domain.profile import (
    DEFAULT_CALORIE_GOAL,
    DailyProgress,
    UserProfile,
    estimate_daily_calories,
)


def create_app(container: AppContainer) -> FastAPI:  # noqa: C901
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        try:
            await app.state.container.close_resources()
        except Exception:
            logger.exception("Failed to close backend clients")

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.post("/recognize")
    async def recognize(body: RecognizeRequest, request: Request) -> dict[str, object]:
        """Recognize the food in an uploaded image."""
        state_container: AppContainer = request.app.state.container
        result = await state_container.recognition_service.recognize(
            body.image_data_url
        )
        return result.to_payload()

    @app.get("/foods/search")
    async def search_foods(
        request: Request, q: str = "", limit: int = 10
    ) -> dict[str, object]:
        """Search the catalog by food name."""
        state_container: AppContainer = request.app.state.container
        records = state_container.catalog.search(q, limit=limit)
        return {"foods": [food_record_payload(record) for record in records]}

    @app.get("/log/{day}")
    async def get_log(day: date, request: Request) -> dict[str, object]:
        """Return the log for a calendar day."""
        state_container: AppContainer = request.app.state.container
        return daily_log_to_payload(state_container.state.log_for(day))

    @app.post("/log/{day}/entries")
    async def add_entry(
        day: date, body: FoodItemPayload, request: Request
    ) -> dict[str, object]:
        """Append a food entry to a day's log."""
        state_container: AppContainer = request.app.state.container
        updated = await state_container.state.add_food_item(body.to_domain(), day)
        return daily_log_to_payload(updated)

    @app.get("/recent")
    async def recent_foods(request: Request) -> dict[str, object]:
        """Return recently logged foods, newest first."""
        state_container: AppContainer = request.app.state.container
        items = state_container.state.recent_foods.items()
        return {"foods": [_item_payload(item) for item in items]}

    @app.get("/favorites")
    async def list_favorites(request: Request) -> dict[str, object]:
        """Return favorite foods."""
        state_container: AppContainer = request.app.state.container
        items = state_container.state.favorites.items()
        return {"foods": [_item_payload(item) for item in items]}

    @app.post("/favorites")
    async def add_favorite(
        body: FoodItemPayload, request: Request
    ) -> dict[str, object]:
        """Add a food to favorites."""
        state_container: AppContainer = request.app.state.container
        added = state_container.state.favorites.add(body.to_domain())
        return {"added": added}

    @app.delete("/favorites/{food_id}")
    async def remove_favorite(food_id: UUID, request: Request) -> dict[str, str]:
        """Remove a food from favorites."""
        state_container: AppContainer = request.app.state.container
        state_container.state.favorites.remove(food_id)
        return {"status": "ok"}

    @app.put("/profile")
    async def put_profile(body: ProfileRequest, request: Request) -> dict[str, object]:
        """Store the onboarding profile and its calorie goal."""
        state_container: AppContainer = request.app.state.container
        profile = _build_profile(body)
        state_container.state.profile = profile
        logger.info("Profile set with daily goal %s kcal", profile.daily_calorie_goal)
        return {
            "name": profile.name,
            "goal": str(profile.goal),
            "dailyCalorieGoal": profile.daily_calorie_goal,
        }

    @app.get("/progress/{day}")
    async def get_progress(day: date, request: Request) -> dict[str, object]:
        """Return a day's consumption against the profile's targets."""
        state_container: AppContainer = request.app.state.container
        try:
            progress = state_container.state.progress(day)
        except LookupError as exc:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)
            ) from exc
        return _progress_payload(progress)

    return app


def _build_profile(body: ProfileRequest) -> UserProfile:
    metrics = (
        body.age,
        body.height_cm,
        body.weight_kg,
        body.gender,
        body.activity_level,
    )
    if body.daily_calorie_goal is not None:
        goal_calories = body.daily_calorie_goal
    elif all(value is not None for value in metrics):
        goal_calories = estimate_daily_calories(
            age=body.age,
            height_cm=body.height_cm,
            weight_kg=body.weight_kg,
            gender=body.gender,
            activity_level=body.activity_level,
            goal=body.goal,
        )
    else:
        goal_calories = DEFAULT_CALORIE_GOAL
    return UserProfile(
        name=body.name,
        goal=body.goal,
        daily_calorie_goal=goal_calories,
        age=body.age,
        height_cm=body.height_cm,
        weight_kg=body.weight_kg,
        gender=body.gender,
        activity_level=body.activity_level,
    )


def _item_payload(item: FoodItem) -> dict[str, object]:
    return FoodItemPayload.from_domain(item).model_dump(
        mode="json", by_alias=True, exclude_none=True
    )


def _progress_payload(progress: DailyProgress) -> dict[str, object]:
    return {
        "calorieGoal": progress.calorie_goal,
        "consumedCalories": progress.consumed_calories,
        "remainingCalories": progress.remaining_calories,
        "caloriePercentage": progress.calorie_percentage,
        "consumed": {
            "protein": progress.consumed.protein_g,
            "carbs": progress.consumed.carbs_g,
            "fat": progress.consumed.fat_g,
        },
        "targets": {
            "protein": progress.targets.protein_g,
            "carbs": progress.targets.carbs_g,
            "fat": progress.targets.fat_g,
        },
    }
