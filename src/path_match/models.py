# src/path_match/models.py
"""
Data models for the matching engine.

This module defines two small value types:

- Weights: the four scoring coefficients a Matcher is built with.
- Cell: the counters summarizing one alignment path in the DP table.

Both are frozen. A Cell is never edited in place; each transform returns a
new Cell, because several successor cells read the same predecessor.
"""

from dataclasses import dataclass, fields, replace

from . import config as CFG


@dataclass(frozen=True, slots=True)
class Weights:
    """
    Linear coefficients turning Cell counters into a score.

    Attributes
    ----------
    gap_penalty : int
        Applied once per broken streak. Conventionally negative.
    pattern_skip_penalty : int
        Applied per pattern character treated as optional. Conventionally negative.
    match_bonus : int
        Applied per matched character. Conventionally positive.
    first_letter_bonus : int
        Extra bonus per match that lands on a word boundary. Conventionally positive.

    All-zero weights are valid and score every alignment 0.
    """
    gap_penalty: int = CFG.GAP_PENALTY
    pattern_skip_penalty: int = CFG.PATTERN_SKIP_PENALTY
    match_bonus: int = CFG.MATCH_BONUS
    first_letter_bonus: int = CFG.FIRST_LETTER_BONUS

    def __post_init__(self) -> None:
        for f in fields(self):
            v = getattr(self, f.name)
            if isinstance(v, bool) or not isinstance(v, int):
                raise TypeError(f"Weights.{f.name} must be int, got {v!r}")

    @classmethod
    def default(cls) -> "Weights":
        return cls()


@dataclass(frozen=True, slots=True)
class Cell:
    """
    One alignment path ending at a (pattern prefix, text prefix) pair.

    Attributes
    ----------
    match_count : int
        Characters matched so far.
    streak : int
        Length of the active run of consecutive matches; 0 when not mid-run.
    gaps : int
        Times an active streak was broken by an unmatched text character.
    pattern_skip : int
        Pattern characters treated as optional.
    word_boundary : int
        Matched characters that sit on a word boundary.
    """
    match_count: int = 0
    streak: int = 0
    gaps: int = 0
    pattern_skip: int = 0
    word_boundary: int = 0

    # /* ~~~ transforms ~~~ */
    def match(self, boundary: bool) -> "Cell":
        return replace(
            self,
            match_count=self.match_count + 1,
            streak=self.streak + 1,
            word_boundary=self.word_boundary + 1 if boundary else self.word_boundary,
        )

    def skip_pattern(self) -> "Cell":
        return replace(self, pattern_skip=self.pattern_skip + 1)

    def skip_text(self) -> "Cell":
        # only leaving an active streak opens a gap
        if self.streak == 0:
            return self
        return replace(self, streak=0, gaps=self.gaps + 1)

    # /* ~~~ scoring ~~~ */
    def score(self, w: Weights) -> int:
        return (
            w.gap_penalty * self.gaps
            + w.pattern_skip_penalty * self.pattern_skip
            + w.match_bonus * self.match_count
            + w.first_letter_bonus * self.word_boundary
        )


ZERO = Cell()
