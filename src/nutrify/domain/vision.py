"""Models for tag extraction results."""

from pydantic import BaseModel, Field


class TagExtract(BaseModel):
    """Structured output returned by a tagging backend."""

    tags: list[str] = Field(default_factory=list)
