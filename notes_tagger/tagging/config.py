from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from .models import Category

NEGATORS: frozenset[str] = frozenset({
    "not", "no", "never", "neither", "nor", "without", "lacked",
    # Stems left behind when "\w+" splits contractions such as "isn't".
    "isn", "wasn", "weren", "aren", "didn", "doesn", "don",
    "hardly", "barely",
})


@dataclass(frozen=True)
class EngineConfig:
    """
    Tunable constants of the tagging engine.

    ``category_multipliers`` is stored as a read-only mapping so a shared
    config cannot be altered through it.
    """

    category_multipliers: Mapping[Category, float] = field(default_factory=lambda: {
        Category.taste_profile: 0.35,
        Category.dish: 0.45,
        Category.quality: 0.55,
    })
    negators: frozenset[str] = NEGATORS
    negation_window: int = 2
    min_confidence: float = 0.3
    default_limit: int = 5
    pattern_min_text_length: int = 20
    pattern_min_word_length: int = 3
    max_patterns: int = 3
    summary_top_terms: int = 5
    sentiment_margin: float = 0.2

    def __post_init__(self) -> None:
        object.__setattr__(
            self,
            "category_multipliers",
            MappingProxyType(dict(self.category_multipliers)),
        )
        object.__setattr__(self, "negators", frozenset(self.negators))


DEFAULT_ENGINE_CONFIG = EngineConfig()
