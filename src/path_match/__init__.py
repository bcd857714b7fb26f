"""
Path Match Module

Incremental fuzzy scoring of a typed query ("pattern") against one fixed
candidate string ("text"), such as a file path in a type-ahead filter.

A Matcher keeps one DP row per typed character, so each keystroke costs a
single pass over the text and backspace is a constant-time undo. The score
rewards contiguous runs and matches at word boundaries (text start, text end,
or right after one of - _ \\ / space) and penalizes broken runs and pattern
characters that had to be skipped.

Matching works on bytes. str input is UTF-8 encoded, so a multi-byte
character is matched as several independent units.

Example Usage:
    from path_match import Matcher

    m = Matcher("src/backend/engine.py")
    for ch in "eng":
        m.append_pchar(ch)
    print(m.score())
    m.remove_pchar()          # backspace
"""

# src/path_match/__init__.py
from .models import Weights, Cell  # re-export
from .grid import Grid
from .matcher import Matcher, score_pattern

__version__ = "1.0.0"
__all__ = ["Weights", "Cell", "Grid", "Matcher", "score_pattern"]
