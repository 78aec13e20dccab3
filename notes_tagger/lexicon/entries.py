from __future__ import annotations

import logging
import threading
from collections import defaultdict
from dataclasses import dataclass

from ..nlp.stemmer import stem_tokens
from ..nlp.tokenizer import tokenize
from ..tagging.models import Category
from .data import DISH_TYPES, QUALITY_INDICATORS, TASTE_DESCRIPTORS

logger = logging.getLogger(__name__)

# Iteration order of the categories decides tie order in matcher output.
_DICTIONARIES: tuple[tuple[Category, dict[str, list[str]]], ...] = (
    (Category.taste_profile, TASTE_DESCRIPTORS),
    (Category.dish, DISH_TYPES),
    (Category.quality, QUALITY_INDICATORS),
)


@dataclass(frozen=True)
class LexiconEntry:
    canonical_tag: str
    category: Category
    synonyms: frozenset[str]


@dataclass(frozen=True)
class StemmedLexiconEntry:
    canonical_tag: str
    category: Category
    # One tuple of stems per synonym; multi-word synonyms are runs of stems.
    # Ordered and de-duplicated so scanning is reproducible.
    stems: tuple[tuple[str, ...], ...]


@dataclass(frozen=True)
class StemmedLexicon:
    entries: tuple[StemmedLexiconEntry, ...]

    def for_category(self, category: Category) -> StemmedLexicon:
        return StemmedLexicon(tuple(e for e in self.entries if e.category == category))

    def tags(self, category: Category) -> list[str]:
        return [e.canonical_tag for e in self.entries if e.category == category]

    def __len__(self) -> int:
        return len(self.entries)


def load_entries() -> list[LexiconEntry]:
    """Return every dictionary entry as an immutable ``LexiconEntry``."""
    entries: list[LexiconEntry] = []
    for category, dictionary in _DICTIONARIES:
        for tag, synonyms in dictionary.items():
            entries.append(LexiconEntry(tag, category, frozenset(synonyms)))
    return entries


def _stem_synonyms(synonyms: list[str]) -> tuple[tuple[str, ...], ...]:
    stems: list[tuple[str, ...]] = []
    for phrase in synonyms:
        # Split like note text so "ice cream" and "t-bone" line up with tokens.
        run = tuple(root for root in stem_tokens(tokenize(phrase)) if root)
        if run and run not in stems:
            stems.append(run)
    return tuple(stems)


def build_stemmed_lexicon() -> StemmedLexicon:
    """Stem every synonym of every entry. Empty stems are dropped."""
    entries: list[StemmedLexiconEntry] = []
    for category, dictionary in _DICTIONARIES:
        for tag, synonyms in dictionary.items():
            entries.append(StemmedLexiconEntry(tag, category, _stem_synonyms(synonyms)))
    logger.debug("Built stemmed lexicon with %d entries", len(entries))
    return StemmedLexicon(tuple(entries))


_stemmed: StemmedLexicon | None = None
_stemmed_lock = threading.Lock()


def get_stemmed_lexicon() -> StemmedLexicon:
    """Return the process-wide stemmed lexicon, building it exactly once."""
    global _stemmed
    if _stemmed is None:
        with _stemmed_lock:
            if _stemmed is None:
                _stemmed = build_stemmed_lexicon()
    return _stemmed


def find_synonym_overlaps(entries: list[LexiconEntry] | None = None) -> dict[str, list[str]]:
    """
    Map each surface synonym listed under more than one tag to those tags.

    Tags are reported as ``category:tag``. The dictionaries are hand-authored,
    so overlaps are reported for review rather than resolved here.
    """
    owners: dict[str, list[str]] = defaultdict(list)
    for entry in entries if entries is not None else load_entries():
        for word in sorted(entry.synonyms):
            owners[word].append(f"{entry.category.value}:{entry.canonical_tag}")
    return {word: tags for word, tags in sorted(owners.items()) if len(tags) > 1}
