from __future__ import annotations

import logging

from ..tagging.extractor import get_tag_extractor
from ..tagging.models import AnalysisResult
from .config import DEFAULT_ANALYSIS_CONFIG, AnalysisConfig

logger = logging.getLogger(__name__)


def analyze_notes(
    notes: str | None,
    limit: int = 5,
    config: AnalysisConfig = DEFAULT_ANALYSIS_CONFIG,
) -> AnalysisResult:
    """
    Analyse one visit note for the server-side save flow.

    Returns an empty result for missing or short notes, when analysis is
    disabled, and on any engine failure. Never raises.
    """
    if not config.enabled:
        return AnalysisResult.empty()

    if not isinstance(notes, str):
        if notes is not None:
            logger.warning(
                "Skipping note analysis for non-text notes of type %s",
                type(notes).__name__,
            )
        return AnalysisResult.empty()

    if len(notes) < config.min_note_length:
        return AnalysisResult.empty()

    try:
        return get_tag_extractor().analyze(notes, limit)
    except Exception:
        logger.warning("Note analysis failed, returning empty result", exc_info=True)
        return AnalysisResult.empty()


def analyze_batch(
    notes_list: list[str | None],
    limit: int = 5,
    config: AnalysisConfig = DEFAULT_ANALYSIS_CONFIG,
) -> list[AnalysisResult]:
    """Analyse each note independently; one result per input, in order."""
    return [analyze_notes(notes, limit, config) for notes in notes_list]
