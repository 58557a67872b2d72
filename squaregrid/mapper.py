"""
Coordinate mapping between surface positions and (row, column) indices.

All geometry is in nominal units: the surface is columns*cell_size + 2 wide
and rows*cell_size + 2 tall, with a one unit margin on every edge.
"""
import math
from typing import NamedTuple, Tuple

from squaregrid.config import BORDER_MARGIN


class Rect(NamedTuple):
    x: float
    y: float
    width: float
    height: float

    @property
    def left(self):
        return self.x

    @property
    def top(self):
        return self.y

    @property
    def right(self):
        return self.x + self.width

    @property
    def bottom(self):
        return self.y + self.height

    def contains(self, px, py) -> bool:
        return self.left <= px < self.right and self.top <= py < self.bottom


def _clamp(index: int, count: int) -> int:
    return max(0, min(index, count - 1))


def x_to_column(x: float, width: float, columns: int) -> int:
    column_width = width / columns
    return _clamp(math.floor(x / column_width), columns)


def y_to_row(y: float, height: float, rows: int) -> int:
    row_height = height / rows
    return _clamp(math.floor(y / row_height), rows)


def pointer_to_cell(x: float, y: float, surface_rect: Rect, rows: int, columns: int) -> Tuple[int, int]:
    """
    Map a position relative to the surface's top-left corner to (row, column).

    Results are clamped to the valid index range, so a click on the trailing
    edge lands on the last row/column rather than one past it.
    """
    return y_to_row(y, surface_rect.height, rows), x_to_column(x, surface_rect.width, columns)


def cell_to_rect(row: int, column: int, cell_size: int) -> Rect:
    return Rect(
        column * cell_size + BORDER_MARGIN,
        row * cell_size + BORDER_MARGIN,
        cell_size,
        cell_size,
    )
