"""A grid of equally sized boxes laid out column by column."""

from __future__ import annotations

import math
from collections.abc import Iterator

from fontboy.geometry import Rect


class MultiBoxGrid:
    """Boxes of a fixed row height in a number of columns filling an area.

    Elements are numbered down each column first, then across the columns.
    The number of rows and the column width follow from the area's size and
    are recomputed by :meth:`update_properties`.
    """

    def __init__(
        self,
        width: float,
        height: float,
        num_cols: float = 3,
        row_height: float = 30,
    ):
        self.width = float(width)
        self.height = float(height)
        self.num_cols = float(num_cols)
        self.row_height = float(row_height)
        self.min_col_width = 0.0
        self.auto_columns = 0
        self.num_rows = 0.0
        self.col_width = 0.0
        self.update_properties()

    def update_properties(self) -> None:
        """Recompute the number of rows and the column width."""
        if self.row_height <= 0:
            raise ValueError(f"row height must be positive, got {self.row_height}")
        if self.num_cols <= 0:
            raise ValueError(f"column count must be positive, got {self.num_cols}")
        self.num_rows = float(math.floor(self.height / self.row_height))
        self.col_width = self.width / self.num_cols

    def resize(self, width: float, height: float) -> None:
        """Give the grid a new area and recompute its layout."""
        self.width = float(width)
        self.height = float(height)
        self.update_properties()

    def element_at(self, row: int, column: int) -> int:
        """Return the element number of the box at ``row`` and ``column``."""
        return int(column * self.num_rows + row)

    def element_at_point(self, x: float, y: float) -> int:
        """Return the element number of the box holding the point."""
        column = math.floor(x / self.col_width)
        row = math.floor(y / self.row_height)
        return int(column * self.num_rows + row)

    def _box(self, column: int, row: int) -> Rect:
        cw, rh = self.col_width, self.row_height
        return Rect(column * cw, row * rh, (column + 1) * cw, (row + 1) * rh)

    def rect_at(self, element: int) -> Rect:
        """Return the frame of box ``element``."""
        rows = int(self.num_rows)
        if rows <= 0:
            raise ValueError("the grid has no rows")
        if element < 0:
            raise ValueError(f"element must not be negative, got {element}")
        column, row = divmod(int(element), rows)
        return self._box(column, row)

    def rect_at_point(self, x: float, y: float) -> Rect:
        """Return the frame of the box holding the point."""
        column = math.floor(x / self.col_width)
        row = math.floor(y / self.row_height)
        return self._box(column, row)

    def elements_in(
        self, left: float, top: float, right: float, bottom: float
    ) -> Iterator[int]:
        """Yield, column by column, the elements whose boxes meet the area."""
        self.update_properties()
        area = Rect(left, top, right, bottom)
        for column in range(math.ceil(self.num_cols)):
            for row in range(int(self.num_rows)):
                element = self.element_at(row, column)
                if area.intersects(self.rect_at(element)):
                    yield element

    def free_area(self) -> Rect:
        """Return the strip below the last row that holds no boxes."""
        return Rect(0.0, self.num_rows * self.row_height + 1, self.width, self.height)