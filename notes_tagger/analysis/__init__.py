"""
Server-side note analysis.

Responsibilities:
- Run the tagging engine over submitted visit notes.
- Skip notes too short to analyse.
- Treat analysis as best effort: any engine failure yields an empty result.
"""
