# path_match/matcher.py
from __future__ import annotations

import logging
from dataclasses import replace
from typing import Optional

from .grid import Grid
from .models import Cell, Weights
from .normalize import TextLike, UnitLike, is_word_boundary, iter_units, to_bytes, to_unit

log = logging.getLogger(__name__)


def _rank(w: Weights):
    # higher score first, then the longer live streak
    return lambda c: (c.score(w), c.streak)


class Matcher:
    """
    Incremental fuzzy matcher for one fixed text.

    Holds one DP row per typed pattern character, so:
      * append_pchar(k): one left-to-right pass over the text
      * remove_pchar():  drops the newest row (undo)
      * score():         reads the terminal cell of the newest row

    Not safe for concurrent mutation; confine a Matcher to one thread.
    """

    # ------------- lifecycle -------------

    def __init__(self, text: TextLike, weights: Optional[Weights] = None) -> None:
        if weights is None:
            weights = Weights.default()
        elif not isinstance(weights, Weights):
            raise TypeError(f"weights must be Weights, not {type(weights).__name__}")
        self._text = to_bytes(text)
        self._weights = weights
        self._pattern_length = 0
        self._grid = Grid(len(self._text))
        log.debug("Matcher created: text_len=%d weights=%s", len(self._text), weights)

    @classmethod
    def new(cls, text: TextLike) -> "Matcher":
        return cls(text)

    @classmethod
    def with_weights(cls, text: TextLike, weights: Weights) -> "Matcher":
        return cls(text, weights)

    @property
    def text(self) -> bytes:
        return self._text

    @property
    def weights(self) -> Weights:
        return self._weights

    @property
    def pattern_length(self) -> int:
        return self._pattern_length

    def __len__(self) -> int:
        return self._pattern_length

    def __repr__(self) -> str:
        return f"Matcher(text={self._text!r}, pattern_length={self._pattern_length})"

    # ------------- pattern edits -------------

    # /* ~~~ Add one pattern char and fill its DP row ~~~ */
    def append_pchar(self, k: UnitLike) -> None:
        k = to_unit(k)
        text = self._text
        n = len(text)
        grid = self._grid
        rank = _rank(self._weights)

        self._pattern_length += 1
        p = self._pattern_length
        grid.append_row_reserve()

        for i in range(1, n + 1):
            candidates = [grid.get(p - 1, i).skip_pattern()]
            if i >= 2:
                candidates.append(grid.get(p, i - 1).skip_text())
            if text[i - 1] == k:
                prev = self._diagonal(p, i)
                candidates.append(prev.match(is_word_boundary(text, i)))
            # max() keeps the first of equal keys
            grid.push(max(candidates, key=rank))

        grid.end_row()

    def _diagonal(self, p: int, i: int) -> Cell:
        """Predecessor of a match at (p, i)."""
        if i == 1 and p > 1:
            # empty text prefix: every earlier pattern char was skipped
            return Cell(pattern_skip=p - 1)
        return self._grid.get(p - 1, i - 1)

    # /* ~~~ Undo the newest pattern char ~~~ */
    def remove_pchar(self) -> None:
        if self._pattern_length == 0:
            log.debug("remove_pchar() on empty pattern: nothing to undo")
            return
        self._grid.pop_row()
        self._pattern_length -= 1

    def extend(self, pattern: TextLike) -> None:
        """Append every unit of pattern, in order."""
        for k in iter_units(pattern):
            self.append_pchar(k)

    def reset(self) -> None:
        """Drop the whole pattern; the text and weights stay."""
        while self._pattern_length:
            self.remove_pchar()
        log.debug("Matcher reset")

    # ------------- query -------------

    def terminal(self) -> Cell:
        """Cell at (pattern_length, text_length), as stored."""
        n = len(self._text)
        if n == 0:
            # nothing to align against: every pattern char was skipped
            return Cell(pattern_skip=self._pattern_length)
        return self._grid.get(self._pattern_length, n)

    def score(self) -> int:
        cell = self.terminal()
        if cell.streak == 0 and cell.gaps > 0:
            # unmatched tail after the last match is free, like the unmatched head
            cell = replace(cell, gaps=cell.gaps - 1)
        return cell.score(self._weights)


def score_pattern(text: TextLike, pattern: TextLike, weights: Optional[Weights] = None) -> int:
    """One-shot helper: score a whole pattern against text."""
    m = Matcher(text, weights)
    m.extend(pattern)
    return m.score()
