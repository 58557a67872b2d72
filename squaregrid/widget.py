"""
SquareGrid: an interactive grid of colored square cells.

The widget owns the configuration, validates its construction parameters,
turns clicks on its surface into (row, column) for the client callback and
decides when to repaint.

Usage:
    root = tk.Tk()
    grid = SquareGrid(10, 10, 20, root, on_click=lambda r, c, e: grid.set_cell_color(r, c, "red"))
    root.mainloop()
"""
import logging

from squaregrid import config
from squaregrid.colors import validate_color
from squaregrid.errors import CellSizeTooSmall, InvalidDimensions, MissingContainer
from squaregrid.mapper import pointer_to_cell, x_to_column, y_to_row
from squaregrid.model import GridModel
from squaregrid.renderer import Renderer, RenderSettings, nominal_size
from squaregrid.surface import ImageHost, ImageSurface

logger = logging.getLogger(__name__)


def default_surface_factory(parent, width, height):
    """Pick a surface type from the kind of parent container."""
    if isinstance(parent, ImageHost):
        return ImageSurface.attach(parent, width, height)
    from squaregrid.tk_surface import TkSurface
    return TkSurface.attach(parent, width, height)


class SquareGrid:
    def __init__(self, rows=config.DEFAULT_ROWS, columns=config.DEFAULT_COLUMNS,
                 cell_size=config.DEFAULT_CELL_SIZE, parent=None, on_click=None,
                 surface_factory=None):
        if rows < 1 or columns < 1:
            raise InvalidDimensions(rows, columns)
        if parent is None:
            raise MissingContainer()
        if cell_size < config.MIN_CELL_SIZE:
            raise CellSizeTooSmall(cell_size, config.MIN_CELL_SIZE)

        # dimensions and cell size are read only
        self._rows = rows
        self._columns = columns
        self._cell_size = cell_size

        self._on_click = on_click
        self._auto_redraw = config.DEFAULT_AUTO_REDRAW
        self._settings = RenderSettings()
        self._model = GridModel(rows, columns, config.DEFAULT_COLOR)

        factory = surface_factory or default_surface_factory
        width, height = nominal_size(rows, columns, cell_size)
        surface = factory(parent, width, height)
        try:
            Renderer.apply_pixel_density(surface, surface.device_pixel_ratio())
            surface.bind_click(self.on_mouse_click)
            self._surface = surface
            self._renderer = Renderer(self._model, surface, cell_size, self._settings)
            self.redraw()
        except Exception:
            # nothing may stay attached when construction fails
            surface.detach()
            raise
        logger.info("Created %dx%d grid, cell size %d", rows, columns, cell_size)

    # -------------------------
    # Read-only properties
    # -------------------------
    @property
    def rows(self):
        return self._rows

    @property
    def columns(self):
        return self._columns

    @property
    def cell_size(self):
        return self._cell_size

    @property
    def square_size(self):
        return self._cell_size

    @property
    def surface(self):
        return self._surface

    # -------------------------
    # Pointer handling
    # -------------------------
    def on_mouse_click(self, event):
        x, y = self.get_mouse_coordinates(event)
        row, column = pointer_to_cell(x, y, self._surface.bounding_rect(),
                                      self._rows, self._columns)
        logger.debug("Click at (%s, %s) -> row %d, column %d", x, y, row, column)
        if self._on_click is not None:
            self._on_click(row, column, event)

    def get_mouse_coordinates(self, event):
        """Position of the event relative to the surface's top-left corner."""
        client_x, client_y = self._surface.client_point(event)
        rect = self._surface.bounding_rect()
        return client_x - rect.left, client_y - rect.top

    def x_to_column(self, x):
        return x_to_column(x, self._surface.bounding_rect().width, self._columns)

    def y_to_row(self, y):
        return y_to_row(y, self._surface.bounding_rect().height, self._rows)

    def set_on_click_callback(self, on_click):
        self._on_click = on_click

    # -------------------------
    # Cells
    # -------------------------
    def check_cell_coords(self, row, column):
        self._model.check(row, column)

    def set_cell_color(self, row, column, color):
        # a color the surface cannot draw must never reach the model
        self._model.check(row, column)
        if color is not None:
            validate_color(color)
        self._model.set(row, column, color)
        if self._auto_redraw:
            self._renderer.redraw_one(row, column)

    def get_cell_color(self, row, column):
        return self._model.get(row, column)

    def is_cell_set(self, row, column):
        return self._model.is_set(row, column)

    def clear_cell(self, row, column):
        self._model.clear(row, column)
        if self._auto_redraw:
            self._renderer.redraw_one(row, column)

    def clear_grid(self):
        self._model.clear_all()
        if self._auto_redraw:
            self.redraw()

    def get_diff_cells(self):
        """Return dict of {(row, column): color} for cells with an explicit color."""
        return self._model.explicit_cells()

    def redraw(self):
        self._renderer.redraw_all()

    # -------------------------
    # Configuration
    # -------------------------
    def set_default_color(self, color):
        if color is None:
            raise ValueError("Default color cannot be None.")
        validate_color(color)
        self._model.default_color = color
        if self._auto_redraw:
            self.redraw()

    def get_default_color(self):
        return self._model.default_color

    def set_grid_color(self, color):
        if color is not None:
            validate_color(color)
        self._settings.grid_color = color
        if self._auto_redraw:
            self.redraw()

    def get_grid_color(self):
        return self._settings.grid_color

    def set_always_draw_grid(self, always_draw_grid):
        self._settings.always_draw_grid = bool(always_draw_grid)
        if self._auto_redraw:
            self.redraw()

    def get_always_draw_grid(self):
        return self._settings.always_draw_grid

    def set_auto_redraw(self, auto_redraw):
        self._auto_redraw = bool(auto_redraw)

    def get_auto_redraw(self):
        return self._auto_redraw

    def destroy(self):
        self._on_click = None
        self._surface.detach()
