"""Tag extraction from food images."""

import base64
import binascii
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Protocol

from nutrify.domain.vision import TagExtract

ImageInput = bytes | str

TAGS_SCHEMA: dict[str, object] = {
    "type": "object",
    "properties": {
        "tags": {
            "type": "array",
            "items": {"type": "string"},
        }
    },
    "required": ["tags"],
    "additionalProperties": False,
}


class NoTagsDetectedError(RuntimeError):
    """Raised when an extractor cannot describe the image with any tag."""


class TagExtractor(Protocol):
    """Derives descriptive lowercase tags from an image."""

    async def extract(self, image: ImageInput) -> frozenset[str]:
        """Return the tags detected in the image."""


class VisionClient(Protocol):
    """Interface for LLM vision extraction."""

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
        """Return structured vision extraction data."""


class ClassifierClient(Protocol):
    """Interface for a self-hosted image tagging endpoint."""

    async def classify(self, image_bytes: bytes, mime_type: str) -> dict[str, object]:
        """Return the raw classifier response."""


def normalize_tags(tags: Iterable[str]) -> frozenset[str]:
    """Lowercase and trim tags, dropping blanks."""
    return frozenset(tag.strip().lower() for tag in tags if tag and tag.strip())


@dataclass
class StaticTagExtractor(TagExtractor):
    """Extractor that always reports the same tags."""

    tags: frozenset[str]
    calls: int

    def __init__(self, tags: Iterable[str] = ()) -> None:
        self.tags = normalize_tags(tags)
        self.calls = 0

    async def extract(self, image: ImageInput) -> frozenset[str]:
        self.calls += 1
        return self.tags


@dataclass
class VisionTagExtractor(TagExtractor):
    """Extractor that asks a vision LLM to describe the image with tags."""

    client: VisionClient
    model: str
    reasoning_effort: str | None
    store: bool
    vocabulary: frozenset[str] = frozenset()

    async def extract(self, image: ImageInput) -> frozenset[str]:
        """Extract tags via the configured client."""
        raw = await self.client.extract(
            model=self.model,
            reasoning_effort=self.reasoning_effort,
            store=self.store,
            image_data_url=to_data_url(image),
            schema=TAGS_SCHEMA,
            prompt=self._prompt(),
        )
        tags = normalize_tags(TagExtract.model_validate(raw).tags)
        if not tags:
            raise NoTagsDetectedError("Vision model returned no tags")
        return tags

    def _prompt(self) -> str:
        prompt = (
            "Describe the food in the image with short lowercase tags "
            "(food type, ingredients, cooking method, colour)."
        )
        if self.vocabulary:
            prompt += " Prefer tags from this list: " + ", ".join(
                sorted(self.vocabulary)
            )
        return prompt


@dataclass
class ClassifierTagExtractor(TagExtractor):
    """Extractor backed by an HTTP image classifier."""

    client: ClassifierClient

    async def extract(self, image: ImageInput) -> frozenset[str]:
        image_bytes = to_image_bytes(image)
        raw = await self.client.classify(image_bytes, _detect_mime_type(image_bytes))
        tags = normalize_tags(TagExtract.model_validate(raw).tags)
        if not tags:
            raise NoTagsDetectedError("Classifier returned no tags")
        return tags


def to_data_url(image: ImageInput) -> str:
    """Return the image as a base64 data URL."""
    if isinstance(image, str):
        if not image.startswith("data:"):
            raise ValueError("Image string must be a data URL")
        return image
    mime_type = _detect_mime_type(image)
    encoded = base64.b64encode(image).decode("utf-8")
    return f"data:{mime_type};base64,{encoded}"


def to_image_bytes(image: ImageInput) -> bytes:
    """Return raw image bytes, decoding base64 data URLs."""
    if isinstance(image, bytes):
        return image
    header, sep, data = image.partition(",")
    if not sep or not header.startswith("data:") or not header.endswith(";base64"):
        raise ValueError("Image string must be a base64 data URL")
    try:
        return base64.b64decode(data, validate=True)
    except binascii.Error as exc:
        raise ValueError("Image data URL is not valid base64") from exc


def _detect_mime_type(image_bytes: bytes) -> str:
    """Infer a basic image MIME type from file signatures."""
    if image_bytes.startswith(b"\xff\xd8\xff"):
        return "image/jpeg"
    if image_bytes.startswith(b"\x89PNG\r\n\x1a\n"):
        return "image/png"
    if image_bytes[:4] == b"RIFF" and image_bytes[8:12] == b"WEBP":
        return "image/webp"
    return "image/jpeg"
