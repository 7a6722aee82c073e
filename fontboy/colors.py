"""Colour values, colour list items and a colour preview swatch."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

from fontboy.geometry import Rect

_SWATCH_INSET = 2
_TEXT_GAP = 8


@dataclass(frozen=True)
class RGBColor:
    """An 8-bit RGBA colour."""

    red: int
    green: int
    blue: int
    alpha: int = 255

    def __post_init__(self) -> None:
        for name in ("red", "green", "blue", "alpha"):
            value = getattr(self, name)
            if not 0 <= value <= 255:
                raise ValueError(f"{name} must be within 0..255, got {value}")

    def to_bytes(self) -> bytes:
        return bytes((self.red, self.green, self.blue, self.alpha))

    @classmethod
    def from_bytes(cls, data: bytes) -> RGBColor:
        if len(data) < 4:
            raise ValueError(f"a colour needs 4 bytes, got {len(data)}")
        return cls(data[0], data[1], data[2], data[3])


class ColorType(Enum):
    """Which window a configurable colour belongs to."""

    LIST_WINDOW = 0
    DETAILS_WINDOW = 1


@dataclass
class ColorItem:
    """A list entry naming a colour and showing a swatch of it."""

    text: str
    color_type: ColorType
    color: RGBColor
    enabled: bool = True
    selected: bool = False

    @staticmethod
    def swatch_rect(frame: Rect) -> Rect:
        """Return the square swatch drawn at the left of the item's frame."""
        inner = frame.inset_by(_SWATCH_INSET, _SWATCH_INSET)
        return Rect(inner.left, inner.top, inner.left + inner.height(), inner.bottom)

    @classmethod
    def text_x(cls, frame: Rect) -> float:
        """Return where the item's label starts horizontally."""
        return frame.left + cls.swatch_rect(frame).width() + _TEXT_GAP

    @staticmethod
    def disabled_text_darkens(text_color: RGBColor) -> bool:
        """Tell whether a disabled label is darkened (light text) or lightened."""
        return text_color.red + text_color.green + text_color.blue > 128 * 3


class ColorPreview:
    """A swatch showing a colour, reporting each change to a callback."""

    DISABLED_COLOR = RGBColor(128, 128, 128, 255)

    def __init__(self, on_change: Callable[[RGBColor], Any] | None = None):
        self.on_change = on_change
        self.color = RGBColor(0, 0, 0)
        self.high_color = self.color
        self.enabled = True
        self.is_rect = True

    def _changed(self) -> None:
        if self.on_change is not None:
            self.on_change(self.color)

    def set_color(self, color: RGBColor) -> None:
        """Show ``color`` and report the change."""
        self.high_color = color
        self.color = color
        self._changed()

    def set_rgb(self, red: int, green: int, blue: int) -> None:
        """Set the colour components, keeping the current alpha."""
        self.color = RGBColor(red, green, blue, self.color.alpha)
        self.high_color = RGBColor(red, green, blue)
        self._changed()

    def set_enabled(self, value: bool) -> None:
        self.enabled = bool(value)

    def displayed_color(self) -> RGBColor:
        """Return the colour the swatch is filled with."""
        return self.color if self.enabled else self.DISABLED_COLOR

    def drop(self, data: Mapping[str, Any]) -> bool:
        """Take the drawing colour from dropped data holding an ``RGBColor``.

        Returns whether the data held a colour.
        """
        value = data.get("RGBColor")
        if value is None:
            return False
        if isinstance(value, RGBColor):
            self.high_color = value
        else:
            self.high_color = RGBColor.from_bytes(bytes(value))
        return True