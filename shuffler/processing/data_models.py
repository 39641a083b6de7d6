"""Data models returned by the processing pipeline."""

from pydantic import BaseModel, Field


class ShuffleResult(BaseModel):
    """Output from a full shuffle run."""

    variants: list[str] = Field(default_factory=list)
    word_count: int = Field(0, ge=0)
    elapsed_time: float = Field(0.0, ge=0)
