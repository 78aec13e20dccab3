"""
Restaurant visit-note tagging engine.

Responsibilities:
- Suggest dish and taste-profile tags from free-text notes.
- Surface frequent phrases and a one-sentence summary.
- Label coarse sentiment.
"""
