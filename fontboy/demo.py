"""A grid view and a controller driving a split pane from text controls."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from fontboy.colors import RGBColor
from fontboy.splitpane import SplitPane

_GRID_DIVISIONS = 10
_CONTROL_STRIP = 35

Point = tuple[float, float]
Line = tuple[Point, Point]


@dataclass
class GridView:
    """A view covered by evenly spaced grid lines of one colour."""

    width: float
    height: float
    color: RGBColor

    def grid_lines(self) -> list[Line]:
        """Return the vertical lines followed by the horizontal ones."""
        lines: list[Line] = []
        step = max(int(self.width / _GRID_DIVISIONS), 1)
        lines.extend(((x, 0), (x, self.height)) for x in range(0, _ceil_int(self.width), step))
        step = max(int(self.height / _GRID_DIVISIONS), 1)
        lines.extend(((0, y), (self.width, y)) for y in range(0, _ceil_int(self.height), step))
        return lines


def _ceil_int(value: float) -> int:
    whole = int(value)
    return whole if whole == value or value < 0 else whole + 1


def string_to_int(text: str) -> int:
    """Read a decimal number digit by digit; an empty string gives 0."""
    total = 0
    for char in text:
        total = total * 10 + (ord(char) - ord("0"))
    return total


class DemoCommand(Enum):
    MIN_SIZE_ONE = "minO"
    MIN_SIZE_TWO = "minT"
    THICKNESS = "thik"
    LOCK_ALIGNMENT = "lokA"
    LOCK_POSITION = "lokP"


class DemoController:
    """Applies the demo's control values to a split pane."""

    def __init__(self, pane: SplitPane):
        self.pane = pane
        pane.min_size_one = 100
        pane.thickness = 10

    @classmethod
    def create(cls, width: float = 600, height: float = 300) -> DemoController:
        """Build a controller over a pane filling a window above the controls."""
        pane_height = height - _CONTROL_STRIP
        pane = SplitPane(width, pane_height)
        controller = cls(pane)
        controller.grids = (
            GridView(width, pane_height, RGBColor(255, 0, 0)),
            GridView(width, pane_height, RGBColor(0, 0, 255)),
        )
        return controller

    def handle(self, command: DemoCommand | str, value: Any) -> None:
        """Apply one control's value; text controls give strings, boxes flags."""
        try:
            command = DemoCommand(command)
        except ValueError:
            raise ValueError(f"unknown command {command!r}") from None
        if command is DemoCommand.MIN_SIZE_ONE:
            self.pane.min_size_one = string_to_int(value)
        elif command is DemoCommand.MIN_SIZE_TWO:
            self.pane.min_size_two = string_to_int(value)
        elif command is DemoCommand.THICKNESS:
            self.pane.thickness = string_to_int(value)
        elif command is DemoCommand.LOCK_ALIGNMENT:
            self.pane.alignment_locked = bool(value)
        else:
            self.pane.bar_locked = bool(value)