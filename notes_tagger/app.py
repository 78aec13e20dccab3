from __future__ import annotations

from fastapi import FastAPI

from .analysis.models import (
    AnalyzeRequest,
    BatchAnalyzeRequest,
    BatchAnalyzeResponse,
    NotesRequest,
    SentimentResponse,
    TagsResponse,
)
from .analysis.service import analyze_batch, analyze_notes
from .tagging.extractor import get_tag_extractor
from .tagging.models import AnalysisResult

app = FastAPI(title="Visit Notes Tagging API", version="1.0.0")


# ── Public endpoints ─────────────────────────────────────────────────────


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


# ── Analysis endpoints ───────────────────────────────────────────────────


@app.post("/analyze", response_model=AnalysisResult)
def analyze(body: AnalyzeRequest) -> AnalysisResult:
    return analyze_notes(body.notes, body.limit)


@app.post("/analyze/batch", response_model=BatchAnalyzeResponse)
def analyze_many(body: BatchAnalyzeRequest) -> BatchAnalyzeResponse:
    return BatchAnalyzeResponse(results=analyze_batch(body.notes, body.limit))


@app.post("/tags", response_model=TagsResponse)
def tags(body: NotesRequest) -> TagsResponse:
    return TagsResponse(suggestions=get_tag_extractor().extract_tags(body.notes))


@app.post("/sentiment", response_model=SentimentResponse)
def sentiment(body: NotesRequest) -> SentimentResponse:
    return SentimentResponse(sentiment=get_tag_extractor().predict_sentiment(body.notes))
