"""Tests for tag extractors."""

import asyncio
import base64

import pytest

from nutrify.services.tagging import (
    ClassifierTagExtractor,
    NoTagsDetectedError,
    StaticTagExtractor,
    VisionTagExtractor,
    normalize_tags,
    to_data_url,
    to_image_bytes,
)
from tests.conftest import FakeClassifierClient, FakeVisionClient

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"rest"


def test_normalize_tags_lowercases_and_drops_blanks() -> None:
    tags = normalize_tags(["Fruit", " apple ", "", "  "])

    assert tags == frozenset({"fruit", "apple"})


def test_static_extractor_returns_configured_tags() -> None:
    extractor = StaticTagExtractor(["Fruit", "Apple"])

    tags = asyncio.run(extractor.extract(b"image"))

    assert tags == frozenset({"fruit", "apple"})
    assert extractor.calls == 1


def test_vision_extractor_normalizes_tags_and_lists_vocabulary() -> None:
    client = FakeVisionClient()
    extractor = VisionTagExtractor(
        client=client,
        model="gpt-5.2",
        reasoning_effort="low",
        store=False,
        vocabulary=frozenset({"fruit", "apple"}),
    )

    tags = asyncio.run(extractor.extract(PNG_BYTES))

    assert tags == frozenset({"fruit", "apple", "fresh"})
    request = client.requests[0]
    assert str(request["image_data_url"]).startswith("data:image/png;base64,")
    assert "apple, fruit" in str(request["prompt"])


def test_vision_extractor_raises_on_empty_tags() -> None:
    extractor = VisionTagExtractor(
        client=FakeVisionClient(payload={"tags": []}),
        model="gpt-5.2",
        reasoning_effort=None,
        store=False,
    )

    with pytest.raises(NoTagsDetectedError):
        asyncio.run(extractor.extract(b"image"))


def test_classifier_extractor_sends_decoded_bytes() -> None:
    client = FakeClassifierClient()
    extractor = ClassifierTagExtractor(client=client)
    data_url = "data:image/png;base64," + base64.b64encode(PNG_BYTES).decode()

    tags = asyncio.run(extractor.extract(data_url))

    assert tags == frozenset({"protein", "chicken", "cooked"})
    assert client.received == [(PNG_BYTES, "image/png")]


def test_classifier_extractor_raises_on_empty_tags() -> None:
    client = FakeClassifierClient(payload={"tags": [" "]})
    extractor = ClassifierTagExtractor(client=client)

    with pytest.raises(NoTagsDetectedError):
        asyncio.run(extractor.extract(b"image"))


def test_to_data_url_uses_png_header() -> None:
    assert to_data_url(PNG_BYTES).startswith("data:image/png;base64,")


def test_to_data_url_defaults_to_jpeg() -> None:
    assert to_data_url(b"unknown").startswith("data:image/jpeg;base64,")


def test_to_data_url_passes_data_urls_through() -> None:
    url = "data:image/webp;base64,AAAA"

    assert to_data_url(url) == url


def test_to_data_url_rejects_plain_strings() -> None:
    with pytest.raises(ValueError):
        to_data_url("https://example.com/food.jpg")


def test_to_image_bytes_rejects_invalid_base64() -> None:
    with pytest.raises(ValueError):
        to_image_bytes("data:image/png;base64,***")
