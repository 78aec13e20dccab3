from __future__ import annotations

import numpy as np
from sklearn.feature_extraction.text import TfidfVectorizer

from ..nlp.tokenizer import split_sentences
from .config import DEFAULT_ENGINE_CONFIG


def _sentence_scores(sentences: list[str], top_terms: int) -> np.ndarray | None:
    """
    Score each sentence by the sum of its ``top_terms`` highest TF-IDF weights.

    The corpus is the note's own sentences, so terms shared by every sentence
    weigh least. Returns ``None`` when no sentence has a usable term.
    """
    # Raw weights: l2 normalisation would favour short sentences.
    vectorizer = TfidfVectorizer(norm=None)
    try:
        matrix = vectorizer.fit_transform(sentences).tocsr()
    except ValueError:
        # Empty vocabulary, e.g. sentences made only of one-letter words.
        return None

    scores = np.zeros(len(sentences))
    for i in range(len(sentences)):
        weights = matrix.getrow(i).data
        if weights.size:
            scores[i] = np.sort(weights)[::-1][:top_terms].sum()
    return scores


def summarize(text: str, top_terms: int = DEFAULT_ENGINE_CONFIG.summary_top_terms) -> str:
    """
    Return the single most distinctive sentence of ``text``.

    Text with fewer than two sentences is returned trimmed. Ties go to the
    earliest sentence.
    """
    sentences = split_sentences(text)
    if len(sentences) <= 1:
        return text.strip()

    scores = _sentence_scores(sentences, top_terms)
    if scores is None:
        return text.strip()

    # argmax returns the first index among equal maxima.
    return sentences[int(np.argmax(scores))].strip()
