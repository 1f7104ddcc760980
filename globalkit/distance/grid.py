"""Dense two-dimensional integer table used by the edit-distance routines."""
from __future__ import annotations

from typing import List, Tuple

__all__ = ["Grid", "GridIndexError"]


class GridIndexError(IndexError):
    """Raised when a cell outside ``[0, columns) x [0, rows)`` is addressed."""

    def __init__(self, col: int, row: int, columns: int, rows: int) -> None:
        message = f"cell ({col}, {row}) outside grid of {columns} columns x {rows} rows"
        super().__init__(message)
        self.message = message


class Grid:
    """Fixed-shape table of zero-initialised ints addressed by ``(col, row)``.

    Cells live in one flat list at index ``columns * row + col``. Every access is
    bounds checked so that a bad address fails immediately instead of landing in a
    neighbouring cell (or wrapping around, as negative list indices would).
    """

    __slots__ = ("_columns", "_rows", "_cells")

    def __init__(self, columns: int, rows: int) -> None:
        if columns < 0 or rows < 0:
            raise ValueError(f"Grid dimensions must be non-negative, got {columns}x{rows}")
        self._columns = columns
        self._rows = rows
        self._cells: List[int] = [0] * (columns * rows)

    @property
    def columns(self) -> int:
        return self._columns

    @property
    def rows(self) -> int:
        return self._rows

    def get(self, col: int, row: int) -> int:
        return self._cells[self._offset(col, row)]

    def set(self, col: int, row: int, value: int) -> None:
        self._cells[self._offset(col, row)] = value

    def __getitem__(self, key: Tuple[int, int]) -> int:
        col, row = key
        return self.get(col, row)

    def __setitem__(self, key: Tuple[int, int], value: int) -> None:
        col, row = key
        self.set(col, row, value)

    def __repr__(self) -> str:
        return f"Grid(columns={self._columns}, rows={self._rows})"

    def _offset(self, col: int, row: int) -> int:
        if not (0 <= col < self._columns and 0 <= row < self._rows):
            raise GridIndexError(col, row, self._columns, self._rows)
        return self._columns * row + col
