"""
Renderer: paints a GridModel onto a Surface.

All coordinates are nominal units; HiDPI correction is a one-off scale
applied to the surface, after which nothing here needs to know about it.
"""
import logging
from dataclasses import dataclass
from typing import Any, Optional

from squaregrid.config import (BORDER_MARGIN, DEFAULT_ALWAYS_DRAW_GRID,
                               DEFAULT_GRID_COLOR, GRID_LINE_WIDTH)
from squaregrid.mapper import cell_to_rect
from squaregrid.model import GridModel
from squaregrid.surface import Surface

logger = logging.getLogger(__name__)


@dataclass
class RenderSettings:
    grid_color: Optional[Any] = DEFAULT_GRID_COLOR
    always_draw_grid: bool = DEFAULT_ALWAYS_DRAW_GRID


def nominal_size(rows: int, columns: int, cell_size: int):
    """(width, height) of a grid surface, including the margin on each edge."""
    return (columns * cell_size + 2 * BORDER_MARGIN,
            rows * cell_size + 2 * BORDER_MARGIN)


class Renderer:
    def __init__(self, model: GridModel, surface: Surface, cell_size: int,
                 settings: RenderSettings):
        self.model = model
        self.surface = surface
        self.cell_size = cell_size
        self.settings = settings

    @staticmethod
    def apply_pixel_density(surface: Surface, ratio: float) -> None:
        """
        Make the surface crisp on high-density displays.

        The backing resolution is multiplied by ratio, the displayed size is
        held at the original size and every later draw is scaled by ratio, so
        callers keep drawing in nominal units.
        """
        width, height = surface.backing_size
        surface.set_backing_size(width * ratio, height * ratio)
        surface.set_display_size(width, height)
        surface.scale(ratio, ratio)
        logger.debug("Pixel density %.2f: backing %sx%s, display %sx%s",
                     ratio, width * ratio, height * ratio, width, height)

    def fill_background(self):
        width, height = nominal_size(self.model.rows, self.model.columns, self.cell_size)
        self.surface.fill_rect(0, 0, width, height, self.model.default_color)

    def draw_cell(self, row, column):
        x, y, width, height = cell_to_rect(row, column, self.cell_size)
        self.surface.fill_rect(x, y, width, height, self.model.get(row, column))

        grid_color = self.settings.grid_color
        if grid_color is None:  # no color, no borders
            return
        if self.model.is_set(row, column) or self.settings.always_draw_grid:
            self.surface.stroke_rect(x, y, width, height, grid_color,
                                     line_width=GRID_LINE_WIDTH)

    def redraw_one(self, row, column):
        self.draw_cell(row, column)

    def redraw_all(self):
        logger.debug("Full redraw of %dx%d grid", self.model.rows, self.model.columns)
        self.fill_background()
        for row in range(self.model.rows):
            for column in range(self.model.columns):
                self.draw_cell(row, column)
