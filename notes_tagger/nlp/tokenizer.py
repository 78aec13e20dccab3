from __future__ import annotations

import re

from nltk.tokenize import RegexpTokenizer

_word_tokenizer = RegexpTokenizer(r"\w+")

# A run of non-terminal characters followed by its terminator(s), or the
# unterminated tail of the text.
_SENTENCE_RE = re.compile(r"[^.!?]+(?:[.!?]+|$)")


def tokenize(text: str) -> list[str]:
    """Split ``text`` into lowercase word tokens, keeping their order."""
    if not text or not text.strip():
        return []
    return _word_tokenizer.tokenize(text.lower())


def split_sentences(text: str) -> list[str]:
    """Split ``text`` on ``.``, ``!`` and ``?``, keeping the terminators."""
    if not text:
        return []
    return [s.strip() for s in _SENTENCE_RE.findall(text) if s.strip()]
