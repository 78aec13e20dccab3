from __future__ import annotations

from collections.abc import Mapping

from ..lexicon.entries import StemmedLexicon, StemmedLexiconEntry
from .config import DEFAULT_ENGINE_CONFIG
from .models import Category, TagSuggestion


def _is_negated(
    tokens: list[str],
    index: int,
    negators: frozenset[str],
    window: int,
) -> bool:
    """True if one of the ``window`` tokens before ``index`` is a negator."""
    start = max(0, index - window)
    return any(tok in negators for tok in tokens[start:index])


def _find_run(stemmed_tokens: list[str], run: tuple[str, ...]) -> int:
    """Index where ``run`` first appears in ``stemmed_tokens``, or -1."""
    width = len(run)
    if width == 1:
        try:
            return stemmed_tokens.index(run[0])
        except ValueError:
            return -1
    for i in range(len(stemmed_tokens) - width + 1):
        if tuple(stemmed_tokens[i:i + width]) == run:
            return i
    return -1


def _count_matches(
    entry: StemmedLexiconEntry,
    tokens: list[str],
    stemmed_tokens: list[str],
    negators: frozenset[str],
    window: int,
) -> int:
    count = 0
    for run in entry.stems:
        # Only the first occurrence of each synonym is considered.
        index = _find_run(stemmed_tokens, run)
        if index >= 0 and not _is_negated(tokens, index, negators, window):
            count += 1
    return count


def match(
    tokens: list[str],
    stemmed_tokens: list[str],
    lexicon: StemmedLexicon,
    category_multiplier: Mapping[Category, float],
    negators: frozenset[str] = DEFAULT_ENGINE_CONFIG.negators,
    negation_window: int = DEFAULT_ENGINE_CONFIG.negation_window,
) -> list[TagSuggestion]:
    """
    Score every lexicon entry against a tokenised note.

    ``tokens`` and ``stemmed_tokens`` must be aligned index for index.
    Multi-word synonyms match a consecutive run of stems; negation is checked
    before the first word of the run. Confidence is the number of distinct,
    un-negated synonyms found times the entry's category multiplier, capped
    at 1.0. Results are sorted by confidence, highest first; equal scores
    keep lexicon order.
    """
    if len(tokens) != len(stemmed_tokens):
        raise ValueError("tokens and stemmed_tokens must have the same length")
    if not tokens:
        return []

    suggestions: list[TagSuggestion] = []
    for entry in lexicon.entries:
        count = _count_matches(entry, tokens, stemmed_tokens, negators, negation_window)
        if count > 0:
            confidence = min(count * category_multiplier[entry.category], 1.0)
            suggestions.append(TagSuggestion(
                tag=entry.canonical_tag,
                confidence=max(0.0, confidence),
                category=entry.category,
            ))

    suggestions.sort(key=lambda s: s.confidence, reverse=True)
    return suggestions
