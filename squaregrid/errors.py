"""
Errors raised by the grid. All of them are programmer errors: they are raised
at the point of violation and never retried.
"""


class GridError(Exception):
    """Base class for every error raised by squaregrid."""


class InvalidDimensions(GridError, ValueError):
    def __init__(self, rows, columns):
        super().__init__(
            f"Number of rows and columns should be equal to or greater than 1 "
            f"(got rows={rows}, columns={columns})."
        )
        self.rows = rows
        self.columns = columns


class MissingContainer(GridError, ValueError):
    def __init__(self):
        super().__init__("Parent container not provided.")


class CellSizeTooSmall(GridError, ValueError):
    def __init__(self, cell_size, minimum):
        super().__init__(
            f"Requested cell size ({cell_size}) less than the minimum allowed size ({minimum})."
        )
        self.cell_size = cell_size
        self.minimum = minimum


class OutOfBounds(GridError, IndexError):
    def __init__(self, axis, index, limit):
        super().__init__(f"{axis.capitalize()} {index} out of bounds [0, {limit}).")
        self.axis = axis
        self.index = index
        self.limit = limit
