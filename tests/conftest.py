"""Shared test fixtures."""

import asyncio
from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import uuid4

import pytest

from nutrify.config import Settings
from nutrify.containers import AppContainer
from nutrify.domain.logs import FoodItem
from nutrify.services.catalog import FoodCatalog
from nutrify.services.recognition import RecognitionService
from nutrify.services.state import NutritionState
from nutrify.services.tagging import (
    ClassifierClient,
    ImageInput,
    StaticTagExtractor,
    TagExtractor,
    VisionClient,
)


@dataclass
class FakeVisionClient(VisionClient):
    """Fake vision client returning a fixed payload."""

    payload: dict[str, object] = field(
        default_factory=lambda: {"tags": ["Fruit", "apple ", "fresh"]}
    )
    requests: list[dict[str, object]] = field(default_factory=list)

    async def extract(  # noqa: PLR0913
        self,
        *,
        model: str,
        reasoning_effort: str | None,
        store: bool,
        image_data_url: str,
        schema: dict[str, object],
        prompt: str,
    ) -> dict[str, object]:
        self.requests.append(
            {"model": model, "image_data_url": image_data_url, "prompt": prompt}
        )
        return self.payload


@dataclass
class FakeClassifierClient(ClassifierClient):
    """Fake classifier that records what it was sent."""

    payload: dict[str, object] = field(
        default_factory=lambda: {"tags": ["protein", "chicken", "cooked"]}
    )
    received: list[tuple[bytes, str]] = field(default_factory=list)

    async def classify(self, image_bytes: bytes, mime_type: str) -> dict[str, object]:
        self.received.append((image_bytes, mime_type))
        return self.payload


@dataclass
class FailingTagExtractor(TagExtractor):
    """Extractor whose backend always breaks."""

    error: Exception = field(default_factory=lambda: ConnectionError("backend down"))

    async def extract(self, image: ImageInput) -> frozenset[str]:
        raise self.error


@dataclass
class SlowTagExtractor(TagExtractor):
    """Extractor that takes longer than any sensible timeout."""

    delay_seconds: float = 5.0

    async def extract(self, image: ImageInput) -> frozenset[str]:
        await asyncio.sleep(self.delay_seconds)
        return frozenset({"fruit"})


def make_food_item(  # noqa: PLR0913
    name: str = "Apple",
    calories: float = 95,
    protein_g: float = 0.5,
    carbs_g: float = 25,
    fat_g: float = 0.3,
    portion: str = "1 medium (182g)",
) -> FoodItem:
    return FoodItem(
        id=uuid4(),
        name=name,
        calories=calories,
        protein_g=protein_g,
        carbs_g=carbs_g,
        fat_g=fat_g,
        portion=portion,
        timestamp=datetime.now(tz=UTC),
    )


@pytest.fixture
def settings() -> Settings:
    return Settings(
        tagger_backend="static",
        static_tags="fruit,apple,fresh",
        recognition_timeout_seconds=2.0,
    )


@pytest.fixture
def catalog() -> FoodCatalog:
    return FoodCatalog()


@pytest.fixture
def tag_extractor() -> StaticTagExtractor:
    return StaticTagExtractor(["fruit", "apple", "fresh"])


@pytest.fixture
def container(
    settings: Settings,
    catalog: FoodCatalog,
    tag_extractor: StaticTagExtractor,
) -> AppContainer:
    recognition_service = RecognitionService(
        extractor=tag_extractor,
        catalog=catalog,
        timeout_seconds=settings.recognition_timeout_seconds,
    )

    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        catalog=catalog,
        tag_extractor=tag_extractor,
        recognition_service=recognition_service,
        state=NutritionState(),
        close_resources=close_resources,
    )
