"""Tag-based scoring and ranking of catalog foods."""

from collections.abc import Collection, Iterable
from datetime import UTC, datetime
from uuid import uuid4

from nutrify.domain.catalog import FoodRecord
from nutrify.domain.recognition import RecognizedFood

CONFIDENCE_THRESHOLD = 30.0
MAX_CANDIDATES = 5


def score(record_tags: Collection[str], detected_tags: Collection[str]) -> float:
    """Return a 0-100 confidence that a record matches the detected tags.

    The match count is divided by the size of the smaller tag set, so a
    record is not penalized for tags the detector never mentioned.
    """
    denominator = min(len(record_tags), len(detected_tags))
    if denominator == 0:
        return 0.0
    match_count = sum(1 for tag in detected_tags if tag in record_tags)
    return match_count / denominator * 100


def rank(
    catalog: Iterable[FoodRecord], detected_tags: Collection[str]
) -> list[RecognizedFood]:
    """Score every record and return the best candidates, highest first.

    Candidates at or below the confidence threshold are dropped. Ties keep
    catalog order. Each candidate gets a fresh id and the current timestamp.
    """
    detected = frozenset(detected_tags)
    now = datetime.now(tz=UTC)
    scored = [(record, score(record.tags, detected)) for record in catalog]
    kept = [(record, value) for record, value in scored if value > CONFIDENCE_THRESHOLD]
    # sorted() is stable, so equal scores stay in catalog order.
    kept = sorted(kept, key=lambda pair: pair[1], reverse=True)[:MAX_CANDIDATES]
    return [
        RecognizedFood(
            id=uuid4(),
            name=record.name,
            calories=record.calories,
            protein_g=record.protein_g,
            carbs_g=record.carbs_g,
            fat_g=record.fat_g,
            portion=record.portion,
            timestamp=now,
            confidence=value,
        )
        for record, value in kept
    ]
