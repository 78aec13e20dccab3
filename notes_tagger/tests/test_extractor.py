from __future__ import annotations

import inspect
import time
from concurrent.futures import ThreadPoolExecutor

import pytest

from notes_tagger.lexicon.entries import StemmedLexicon, StemmedLexiconEntry
from notes_tagger.tagging import extractor as extractor_module
from notes_tagger.tagging.config import DEFAULT_ENGINE_CONFIG, EngineConfig
from notes_tagger.tagging.extractor import (
    TagExtractor,
    analyze,
    get_tag_extractor,
    get_top_suggestions,
)
from notes_tagger.tagging.matcher import match
from notes_tagger.tagging.models import AnalysisResult, Category
from notes_tagger.tagging.patterns import extract_patterns
from notes_tagger.tagging.sentiment import classify_sentiment
from notes_tagger.tagging.summarizer import summarize

MANY_DISHES = (
    "We shared pasta, seafood, steak, chicken, an appetizer, an entree, "
    "dessert, salad and soup."
)

SAMPLE_NOTES = [
    "The steak was incredibly tender and juicy with a nice smoky flavor",
    "Had the seafood pasta and a chocolate dessert",
    "Sweet dessert, a slice of pie and a pizza pie. Rich creamy sauce.",
    MANY_DISHES,
    "Not spicy at all. The grilled salmon was dry and the rice was bland!",
]


def _default_of(func, name):
    return inspect.signature(func).parameters[name].default


# ── analyze() ────────────────────────────────────────────────────────────


class TestAnalyze:
    def test_empty_input(self):
        assert analyze("") == AnalysisResult.empty()
        assert analyze("   ") == AnalysisResult(
            dish_tags=[], taste_profile_tags=[], patterns=[], summary="",
        )

    def test_fields(self):
        result = analyze("The steak was incredibly tender and juicy with a nice smoky flavor")
        assert "tender" in result.taste_profile_tags
        assert "smoky" in result.taste_profile_tags
        assert "steak" in result.dish_tags
        assert result.summary == "The steak was incredibly tender and juicy with a nice smoky flavor"

    def test_limit_enforced(self):
        result = analyze(MANY_DISHES, limit=3)
        assert len(result.dish_tags) == 3

    def test_default_limit(self):
        result = analyze(MANY_DISHES)
        assert len(result.dish_tags) == 5
        # Two distinct synonyms ("steak", "chicken") score highest.
        assert result.dish_tags[0] == "meat"

    def test_zero_limit(self):
        result = analyze(MANY_DISHES, limit=0)
        assert result.dish_tags == []
        assert result.taste_profile_tags == []

    def test_negative_limit_rejected(self):
        with pytest.raises(ValueError):
            analyze(MANY_DISHES, limit=-1)

    def test_non_string_rejected(self):
        with pytest.raises(TypeError):
            analyze(42)

    def test_alias(self):
        for notes in SAMPLE_NOTES:
            assert get_top_suggestions(notes, 2) == analyze(notes, 2)

    def test_deterministic(self):
        for notes in SAMPLE_NOTES:
            assert analyze(notes) == analyze(notes)

    def test_categories_disjoint(self):
        for notes in SAMPLE_NOTES:
            result = analyze(notes)
            assert not set(result.dish_tags) & set(result.taste_profile_tags)

    def test_patterns_and_summary(self):
        notes = "Slow service again. The slow service ruined the night. Great tacos!"
        result = analyze(notes)
        assert result.patterns[0] == "slow service"
        assert result.summary in {
            "Slow service again.",
            "The slow service ruined the night.",
            "Great tacos!",
        }


# ── Configuration and lexicon injection ──────────────────────────────────


class TestTagExtractor:
    def test_shared_instance(self):
        assert get_tag_extractor() is get_tag_extractor()

    def test_custom_lexicon(self):
        lexicon = StemmedLexicon((
            StemmedLexiconEntry("noodles", Category.dish, (("ramen",), ("udon",))),
        ))
        extractor = TagExtractor(lexicon=lexicon)
        tags = extractor.extract_tags("ramen and udon")
        assert [(s.tag, s.confidence) for s in tags] == [("noodles", pytest.approx(0.9))]

    def test_custom_threshold(self):
        extractor = TagExtractor(config=EngineConfig(min_confidence=0.5))
        result = extractor.analyze("Had the seafood pasta and a chocolate dessert")
        # Single-synonym dish matches score 0.45
        assert result.dish_tags == []

    def test_custom_negation_window(self):
        extractor = TagExtractor(config=EngineConfig(negation_window=3))
        tags = [s.tag for s in extractor.extract_tags("not really very spicy")]
        assert "spicy" not in tags

    def test_default_config_multipliers_read_only(self):
        with pytest.raises(TypeError):
            DEFAULT_ENGINE_CONFIG.category_multipliers[Category.dish] = 1.0
        assert DEFAULT_ENGINE_CONFIG.category_multipliers[Category.dish] == 0.45

    def test_custom_multipliers_copied(self):
        multipliers = {Category.taste_profile: 0.5, Category.dish: 0.5, Category.quality: 0.5}
        config = EngineConfig(category_multipliers=multipliers)
        multipliers[Category.dish] = 0.1
        assert config.category_multipliers[Category.dish] == 0.5
        with pytest.raises(TypeError):
            config.category_multipliers[Category.dish] = 0.1

    def test_module_defaults_follow_engine_config(self):
        config = DEFAULT_ENGINE_CONFIG
        assert _default_of(extract_patterns, "max_patterns") == config.max_patterns
        assert _default_of(extract_patterns, "min_text_length") == config.pattern_min_text_length
        assert _default_of(extract_patterns, "min_word_length") == config.pattern_min_word_length
        assert _default_of(classify_sentiment, "margin") == config.sentiment_margin
        assert _default_of(summarize, "top_terms") == config.summary_top_terms
        assert _default_of(match, "negation_window") == config.negation_window
        assert _default_of(match, "negators") == config.negators

    def test_shared_instance_built_once_across_threads(self, monkeypatch):
        monkeypatch.setattr(extractor_module, "_default", None)
        built: list[int] = []
        original_init = TagExtractor.__init__

        def slow_init(self, *args, **kwargs):
            built.append(1)
            time.sleep(0.05)
            original_init(self, *args, **kwargs)

        monkeypatch.setattr(TagExtractor, "__init__", slow_init)
        with ThreadPoolExecutor(max_workers=8) as pool:
            instances = list(pool.map(lambda _: get_tag_extractor(), range(8)))

        assert len(built) == 1
        assert all(inst is instances[0] for inst in instances)

    def test_instance_alias(self):
        extractor = TagExtractor()
        assert extractor.get_top_suggestions(MANY_DISHES, 2) == extractor.analyze(MANY_DISHES, 2)
