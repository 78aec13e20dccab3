"""
Rule-based note tagging engine.

Responsibilities:
- Match stemmed note tokens against the lexicon with negation awareness.
- Extract frequent two-word phrases and a one-sentence summary.
- Classify coarse sentiment from quality tags.
- Expose the combined analysis through ``TagExtractor``.
"""
