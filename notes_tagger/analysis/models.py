from __future__ import annotations

from pydantic import BaseModel, Field

from ..tagging.models import AnalysisResult, SentimentLabel, TagSuggestion
from .config import DEFAULT_ANALYSIS_CONFIG


class AnalyzeRequest(BaseModel):
    notes: str = Field(..., max_length=5000)
    limit: int = Field(default=5, ge=1, le=20)


class BatchAnalyzeRequest(BaseModel):
    notes: list[str] = Field(
        ..., min_length=1, max_length=DEFAULT_ANALYSIS_CONFIG.max_batch_size,
    )
    limit: int = Field(default=5, ge=1, le=20)


class BatchAnalyzeResponse(BaseModel):
    results: list[AnalysisResult]


class NotesRequest(BaseModel):
    notes: str = Field(..., max_length=5000)


class TagsResponse(BaseModel):
    suggestions: list[TagSuggestion]


class SentimentResponse(BaseModel):
    sentiment: SentimentLabel
