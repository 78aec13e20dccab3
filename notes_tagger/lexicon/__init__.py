"""
Static tag dictionaries.

Responsibilities:
- Hold the hand-authored taste, dish and quality dictionaries.
- Stem every synonym once per process and cache the result.
- Report surface words that appear under more than one tag.
"""
