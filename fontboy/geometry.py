"""Small geometry and input types shared by the widgets."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntFlag


@dataclass(frozen=True)
class Rect:
    """A rectangle given by its edges; edges are inclusive."""

    left: float = 0.0
    top: float = 0.0
    right: float = 0.0
    bottom: float = 0.0

    def width(self) -> float:
        return self.right - self.left

    def height(self) -> float:
        return self.bottom - self.top

    def is_valid(self) -> bool:
        return self.left <= self.right and self.top <= self.bottom

    def contains(self, x: float, y: float) -> bool:
        return self.left <= x <= self.right and self.top <= y <= self.bottom

    def intersects(self, other: Rect) -> bool:
        if not (self.is_valid() and other.is_valid()):
            return False
        return not (
            other.left > self.right
            or other.right < self.left
            or other.top > self.bottom
            or other.bottom < self.top
        )

    def inset_by(self, dx: float, dy: float) -> Rect:
        return Rect(self.left + dx, self.top + dy, self.right - dx, self.bottom - dy)

    def offset_by(self, dx: float, dy: float) -> Rect:
        return Rect(self.left + dx, self.top + dy, self.right + dx, self.bottom + dy)


class Orientation(Enum):
    """Direction in which a split bar divides its area."""

    HORIZONTAL = 0
    VERTICAL = 1

    def toggled(self) -> Orientation:
        if self is Orientation.VERTICAL:
            return Orientation.HORIZONTAL
        return Orientation.VERTICAL


class MouseButton(IntFlag):
    PRIMARY = 1
    SECONDARY = 2
    TERTIARY = 4