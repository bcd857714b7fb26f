# src/path_match/grid.py
from __future__ import annotations
from typing import List

from .models import Cell, ZERO


class Grid:
    """
    Append-only / pop-from-end DP table over one flat row-major list.

    Row 0 (empty pattern) has text_len + 1 cells; every later row has
    text_len cells (column 0 is never read there). So (row, col) lives at
    row * text_len + col for every valid pair.
    """

    def __init__(self, text_len: int) -> None:
        assert text_len >= 0
        self.text_len = text_len
        self._data: List[Cell] = [ZERO] * (text_len + 1)
        self._rows = 0
        self._open: int | None = None  # flat start of the row being pushed

    @property
    def rows(self) -> int:
        """Completed rows beyond row 0."""
        return self._rows

    # ---- Read ----
    def get(self, row: int, col: int) -> Cell:
        if row == 0:
            assert 0 <= col <= self.text_len, (row, col)
        else:
            assert 1 <= col <= self.text_len, (row, col)
            assert row <= self._rows or (row == self._rows + 1 and self._open is not None), (row, col)
        idx = row * self.text_len + col
        assert idx < len(self._data), (row, col)
        return self._data[idx]

    # ---- Grow ----
    def append_row_reserve(self) -> None:
        assert self._open is None, "previous row still open"
        self._open = len(self._data)

    def push(self, cell: Cell) -> None:
        assert self._open is not None, "append_row_reserve() not called"
        self._data.append(cell)
        if len(self._data) - self._open == self.text_len:
            self._close()

    def _close(self) -> None:
        self._rows += 1
        self._open = None

    def end_row(self) -> None:
        """Close an open row that needs no pushes (empty text)."""
        if self._open is not None:
            assert len(self._data) - self._open == self.text_len
            self._close()

    # ---- Shrink ----
    def pop_row(self) -> None:
        assert self._open is None, "cannot pop while a row is open"
        assert self._rows > 0, "no row to pop"
        del self._data[len(self._data) - self.text_len:]
        self._rows -= 1

    def __len__(self) -> int:
        return len(self._data)
