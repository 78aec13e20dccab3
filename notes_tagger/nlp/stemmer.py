from __future__ import annotations

from nltk.stem import PorterStemmer

# PorterStemmer keeps no per-call state, so one instance is shared.
_porter = PorterStemmer()


def stem(word: str) -> str:
    """Return the Porter stem of ``word`` (lowercased). May be empty."""
    return _porter.stem(word.strip().lower())


def stem_tokens(tokens: list[str]) -> list[str]:
    """Stem a token sequence, memoising repeated words within this call."""
    memo: dict[str, str] = {}
    stems: list[str] = []
    for token in tokens:
        root = memo.get(token)
        if root is None:
            root = memo[token] = stem(token)
        stems.append(root)
    return stems
