"""
Text normalisation helpers.

Responsibilities:
- Split notes into lowercase word tokens and into sentences.
- Reduce words to Porter stems for lexicon matching.
"""
