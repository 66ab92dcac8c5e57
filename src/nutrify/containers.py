"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from nutrify.adapters.classifier_client import HttpxClassifierClient
from nutrify.adapters.openai_vision_client import OpenAIVisionClient
from nutrify.config import Settings, parse_tag_list
from nutrify.services.catalog import FoodCatalog
from nutrify.services.recognition import RecognitionService
from nutrify.services.state import NutritionState
from nutrify.services.tagging import (
    ClassifierTagExtractor,
    StaticTagExtractor,
    TagExtractor,
    VisionTagExtractor,
)


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    catalog: FoodCatalog
    tag_extractor: TagExtractor
    recognition_service: RecognitionService
    state: NutritionState
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    if resolved_settings.catalog_path:
        catalog = FoodCatalog.from_json(resolved_settings.catalog_path)
    else:
        catalog = FoodCatalog()

    closers: list[Callable[[], Awaitable[None]]] = []
    backend = resolved_settings.tagger_backend.lower()
    tag_extractor: TagExtractor
    if backend == "openai":
        if not resolved_settings.openai_api_key:
            raise ValueError("OPENAI_API_KEY is required for the openai tagger")
        openai_client = OpenAIVisionClient.create(resolved_settings.openai_api_key)
        closers.append(openai_client.close)
        tag_extractor = VisionTagExtractor(
            client=openai_client,
            model=resolved_settings.openai_model,
            reasoning_effort=resolved_settings.openai_reasoning_effort,
            store=resolved_settings.openai_store,
            vocabulary=catalog.vocabulary(),
        )
    elif backend == "http":
        if not resolved_settings.classifier_url:
            raise ValueError("CLASSIFIER_URL is required for the http tagger")
        classifier_client = HttpxClassifierClient.create(
            url=resolved_settings.classifier_url,
            api_key=resolved_settings.classifier_api_key,
            timeout_seconds=resolved_settings.recognition_timeout_seconds,
        )
        closers.append(classifier_client.close)
        tag_extractor = ClassifierTagExtractor(client=classifier_client)
    elif backend == "static":
        static_tags = parse_tag_list(resolved_settings.static_tags)
        tag_extractor = StaticTagExtractor(static_tags)
    else:
        raise ValueError(f"Unknown tagger backend: {resolved_settings.tagger_backend}")

    recognition_service = RecognitionService(
        extractor=tag_extractor,
        catalog=catalog,
        timeout_seconds=resolved_settings.recognition_timeout_seconds,
    )

    async def close_resources() -> None:
        for close in closers:
            await close()

    return AppContainer(
        settings=resolved_settings,
        catalog=catalog,
        tag_extractor=tag_extractor,
        recognition_service=recognition_service,
        state=NutritionState(),
        close_resources=close_resources,
    )
