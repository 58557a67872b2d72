"""
squaregrid - an interactive grid of colored square cells.
"""
from squaregrid.errors import (CellSizeTooSmall, GridError, InvalidDimensions,
                               MissingContainer, OutOfBounds)
from squaregrid.mapper import Rect, cell_to_rect, pointer_to_cell
from squaregrid.model import GridModel
from squaregrid.renderer import Renderer, RenderSettings
from squaregrid.surface import ImageHost, ImageSurface, PointerEvent, Surface
from squaregrid.widget import SquareGrid

__version__ = "0.1.0"

__all__ = [
    "SquareGrid",
    "GridModel",
    "Renderer",
    "RenderSettings",
    "Rect",
    "cell_to_rect",
    "pointer_to_cell",
    "Surface",
    "ImageSurface",
    "ImageHost",
    "PointerEvent",
    "GridError",
    "InvalidDimensions",
    "MissingContainer",
    "CellSizeTooSmall",
    "OutOfBounds",
]
