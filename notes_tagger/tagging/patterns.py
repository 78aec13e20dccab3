from __future__ import annotations

from collections import Counter

from sklearn.feature_extraction.text import ENGLISH_STOP_WORDS

from .config import DEFAULT_ENGINE_CONFIG


def _keep_word(word: str, min_word_length: int, stop_words: frozenset[str]) -> bool:
    return len(word) >= min_word_length and word not in stop_words


def extract_patterns(
    tokens: list[str],
    text_length: int | None = None,
    min_text_length: int = DEFAULT_ENGINE_CONFIG.pattern_min_text_length,
    min_word_length: int = DEFAULT_ENGINE_CONFIG.pattern_min_word_length,
    max_patterns: int = DEFAULT_ENGINE_CONFIG.max_patterns,
    stop_words: frozenset[str] = ENGLISH_STOP_WORDS,
) -> list[str]:
    """
    Return up to ``max_patterns`` of the most frequent two-word phrases.

    ``text_length`` is the length of the raw note; notes shorter than
    ``min_text_length`` yield no patterns. Bigrams containing a short word or
    a stop word are skipped. Equal counts keep first-seen order.
    """
    if text_length is not None and text_length < min_text_length:
        return []

    counts: Counter[str] = Counter()
    for first, second in zip(tokens, tokens[1:]):
        if _keep_word(first, min_word_length, stop_words) and _keep_word(
            second, min_word_length, stop_words
        ):
            counts[f"{first} {second}"] += 1

    # most_common() orders ties by first insertion.
    return [phrase for phrase, _ in counts.most_common(max_patterns)]
