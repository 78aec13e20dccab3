from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class Category(str, Enum):
    taste_profile = "taste_profile"
    dish = "dish"
    quality = "quality"


class SentimentLabel(str, Enum):
    positive = "positive"
    neutral = "neutral"
    negative = "negative"


class TagSuggestion(BaseModel):
    tag: str
    confidence: float = Field(..., ge=0.0, le=1.0)
    category: Category


class AnalysisResult(BaseModel):
    dish_tags: list[str] = Field(default_factory=list)
    taste_profile_tags: list[str] = Field(default_factory=list)
    patterns: list[str] = Field(default_factory=list)
    summary: str = ""

    @classmethod
    def empty(cls) -> AnalysisResult:
        return cls()
