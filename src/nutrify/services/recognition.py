"""Recognition service turning images into ranked food matches."""

import asyncio
import logging
from dataclasses import dataclass

from nutrify.domain.recognition import (
    FailureReason,
    RecognitionFailure,
    RecognitionResult,
    RecognitionSuccess,
)
from nutrify.services.catalog import FoodCatalog
from nutrify.services.matching import rank
from nutrify.services.tagging import ImageInput, NoTagsDetectedError, TagExtractor

NO_MATCH_MESSAGE = (
    "Could not recognize food in image. "
    "Try taking another photo with better lighting."
)
BACKEND_ERROR_MESSAGE = "An error occurred during food recognition."
TIMEOUT_MESSAGE = "Food recognition took too long. Please try again."

_logger = logging.getLogger(__name__)


@dataclass
class RecognitionService:
    """Runs tag extraction and catalog ranking for a single image."""

    extractor: TagExtractor
    catalog: FoodCatalog
    timeout_seconds: float | None = 15.0

    async def recognize(self, image: ImageInput) -> RecognitionResult:
        """Recognize food in an image. Never raises."""
        try:
            tags = await asyncio.wait_for(
                self.extractor.extract(image), timeout=self.timeout_seconds
            )
        except TimeoutError:
            _logger.warning(
                "Tag extraction timed out after %ss", self.timeout_seconds
            )
            return RecognitionFailure(TIMEOUT_MESSAGE, FailureReason.TIMEOUT)
        except NoTagsDetectedError as exc:
            _logger.info("No tags detected: %s", exc)
            return RecognitionFailure(NO_MATCH_MESSAGE, FailureReason.NO_TAGS)
        except Exception:
            _logger.exception("Tag extraction failed")
            return RecognitionFailure(
                BACKEND_ERROR_MESSAGE, FailureReason.BACKEND_ERROR
            )

        if not tags:
            _logger.info("Extractor returned an empty tag set")
            return RecognitionFailure(NO_MATCH_MESSAGE, FailureReason.NO_TAGS)
        _logger.info("Detected tags: %s", sorted(tags))

        try:
            candidates = rank(self.catalog, tags)
        except Exception:
            _logger.exception("Ranking failed")
            return RecognitionFailure(
                BACKEND_ERROR_MESSAGE, FailureReason.BACKEND_ERROR
            )

        if not candidates:
            _logger.info("No catalog food cleared the confidence threshold")
            return RecognitionFailure(NO_MATCH_MESSAGE, FailureReason.NO_MATCH)

        main_result, *rest = candidates
        return RecognitionSuccess(
            main_result=main_result,
            alternatives=[candidate.to_alternative() for candidate in rest],
        )
