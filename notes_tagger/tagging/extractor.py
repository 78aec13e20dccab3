from __future__ import annotations

import threading

from ..lexicon.entries import StemmedLexicon, get_stemmed_lexicon
from ..nlp.stemmer import stem_tokens
from ..nlp.tokenizer import tokenize
from .config import DEFAULT_ENGINE_CONFIG, EngineConfig
from .matcher import match
from .models import AnalysisResult, Category, SentimentLabel, TagSuggestion
from .patterns import extract_patterns as _extract_patterns
from .sentiment import classify_sentiment
from .summarizer import summarize


def _require_text(text: str) -> None:
    if not isinstance(text, str):
        raise TypeError(f"text must be str, not {type(text).__name__}")


class TagExtractor:
    """
    Analyse restaurant notes against a fixed, pre-stemmed lexicon.

    Instances hold no per-call state and may be shared between threads.
    """

    def __init__(
        self,
        lexicon: StemmedLexicon | None = None,
        config: EngineConfig = DEFAULT_ENGINE_CONFIG,
    ) -> None:
        self.lexicon = lexicon if lexicon is not None else get_stemmed_lexicon()
        self.config = config
        self._quality_lexicon = self.lexicon.for_category(Category.quality)

    def _match(self, tokens: list[str], lexicon: StemmedLexicon) -> list[TagSuggestion]:
        if not tokens:
            return []
        return match(
            tokens,
            stem_tokens(tokens),
            lexicon,
            self.config.category_multipliers,
            negators=self.config.negators,
            negation_window=self.config.negation_window,
        )

    def extract_tags(self, text: str) -> list[TagSuggestion]:
        """All tag suggestions for ``text``, highest confidence first."""
        _require_text(text)
        return self._match(tokenize(text), self.lexicon)

    def _top_tags(
        self,
        suggestions: list[TagSuggestion],
        category: Category,
        limit: int,
    ) -> list[str]:
        picked = [
            s.tag for s in suggestions
            if s.category == category and s.confidence > self.config.min_confidence
        ]
        return picked[:limit]

    def analyze(self, text: str, limit: int | None = None) -> AnalysisResult:
        """
        Tags, phrases and a summary for ``text``.

        At most ``limit`` dish tags and ``limit`` taste tags are returned.
        Blank text gives an empty result.
        """
        _require_text(text)
        if limit is None:
            limit = self.config.default_limit
        if limit < 0:
            raise ValueError("limit must be >= 0")
        if not text.strip():
            return AnalysisResult.empty()

        tokens = tokenize(text)
        suggestions = self._match(tokens, self.lexicon)

        return AnalysisResult(
            dish_tags=self._top_tags(suggestions, Category.dish, limit),
            taste_profile_tags=self._top_tags(suggestions, Category.taste_profile, limit),
            patterns=self._patterns(tokens, len(text)),
            summary=summarize(text, top_terms=self.config.summary_top_terms),
        )

    # Older callers use this name.
    get_top_suggestions = analyze

    def _patterns(self, tokens: list[str], text_length: int) -> list[str]:
        return _extract_patterns(
            tokens,
            text_length=text_length,
            min_text_length=self.config.pattern_min_text_length,
            min_word_length=self.config.pattern_min_word_length,
            max_patterns=self.config.max_patterns,
        )

    def extract_patterns(self, text: str) -> list[str]:
        _require_text(text)
        return self._patterns(tokenize(text), len(text))

    def summarize_notes(self, text: str) -> str:
        _require_text(text)
        return summarize(text, top_terms=self.config.summary_top_terms)

    def predict_sentiment(self, text: str) -> SentimentLabel:
        _require_text(text)
        quality = self._match(tokenize(text), self._quality_lexicon)
        return classify_sentiment(quality, margin=self.config.sentiment_margin)


# ---------------------------------------------------------------------------
# Module-level entry points
# ---------------------------------------------------------------------------

_default: TagExtractor | None = None
_default_lock = threading.Lock()


def get_tag_extractor() -> TagExtractor:
    """Return the shared extractor, creating it exactly once."""
    global _default
    if _default is None:
        with _default_lock:
            if _default is None:
                _default = TagExtractor()
    return _default


def extract_tags(text: str) -> list[TagSuggestion]:
    return get_tag_extractor().extract_tags(text)


def analyze(text: str, limit: int | None = None) -> AnalysisResult:
    return get_tag_extractor().analyze(text, limit)


def get_top_suggestions(text: str, limit: int | None = None) -> AnalysisResult:
    return get_tag_extractor().analyze(text, limit)


def predict_sentiment(text: str) -> SentimentLabel:
    return get_tag_extractor().predict_sentiment(text)


def summarize_notes(text: str) -> str:
    return get_tag_extractor().summarize_notes(text)


def extract_patterns(text: str) -> list[str]:
    return get_tag_extractor().extract_patterns(text)
