"""
GridModel: the rows x columns matrix of cell colors.

A cell is either unset (None) or holds an explicit color. Unset cells read as
the current default color. The model never triggers drawing; that is the
widget's job.
"""
from typing import Any, Dict, List, Optional, Tuple

from squaregrid.config import DEFAULT_COLOR
from squaregrid.errors import OutOfBounds

Color = Any


class GridModel:
    def __init__(self, rows: int, columns: int, default_color: Color = DEFAULT_COLOR):
        self._rows = rows
        self._columns = columns
        self._default_color = default_color
        self._cells: List[List[Optional[Color]]] = [
            [None for _ in range(columns)] for _ in range(rows)
        ]

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def columns(self) -> int:
        return self._columns

    @property
    def default_color(self) -> Color:
        return self._default_color

    @default_color.setter
    def default_color(self, color: Color) -> None:
        self._default_color = color

    def check(self, row: int, column: int) -> None:
        """Raise OutOfBounds unless 0 <= row < rows and 0 <= column < columns."""
        if not _is_index(row) or row < 0 or row >= self._rows:
            raise OutOfBounds("row", row, self._rows)
        if not _is_index(column) or column < 0 or column >= self._columns:
            raise OutOfBounds("column", column, self._columns)

    def get(self, row: int, column: int) -> Color:
        self.check(row, column)
        color = self._cells[row][column]
        return self._default_color if color is None else color

    def set(self, row: int, column: int, color: Optional[Color]) -> None:
        self.check(row, column)
        self._cells[row][column] = color

    def clear(self, row: int, column: int) -> None:
        self.set(row, column, None)

    def clear_all(self) -> None:
        for row in range(self._rows):
            for column in range(self._columns):
                self._cells[row][column] = None

    def is_set(self, row: int, column: int) -> bool:
        self.check(row, column)
        return self._cells[row][column] is not None

    def explicit_cells(self) -> Dict[Tuple[int, int], Color]:
        """Return {(row, column): color} for every explicitly colored cell."""
        return {
            (r, c): color
            for r, cells in enumerate(self._cells)
            for c, color in enumerate(cells)
            if color is not None
        }


def _is_index(value) -> bool:
    # bool is an int subclass but never a valid index here
    return isinstance(value, int) and not isinstance(value, bool)
