"""A bar that splits an area between two panes, horizontally or vertically."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any

from fontboy.geometry import MouseButton, Orientation, Rect

SPLITPANE_STATE = int.from_bytes(b"spst", "big")

_INT_KEYS = {
    "position": "pos",
    "thickness": "thick",
    "jump": "jump",
    "inset": "pad",
    "min_size_one": "minsizeone",
    "min_size_two": "minsizetwo",
}
_BOOL_KEYS = {
    "one_detachable": "onedetachable",
    "two_detachable": "twodetachable",
    "bar_locked": "poslock",
    "alignment_locked": "alignlock",
}


@dataclass
class SplitPaneState:
    """The full state of a split pane.

    Integer fields left as ``None`` keep the pane's current value when the
    state is applied; flags that are not given are cleared.
    """

    alignment: Orientation | None = None
    position: int | None = None
    thickness: int | None = None
    jump: int | None = None
    inset: int | None = None
    min_size_one: int | None = None
    min_size_two: int | None = None
    one_detachable: bool = False
    two_detachable: bool = False
    bar_locked: bool = False
    alignment_locked: bool = False

    def as_dict(self) -> dict[str, Any]:
        """Return the state as a plain dictionary using the stored key names."""
        out: dict[str, Any] = {}
        for attr, key in _BOOL_KEYS.items():
            out[key] = getattr(self, attr)
        if self.alignment is not None:
            out["align"] = self.alignment.value
        for attr, key in _INT_KEYS.items():
            value = getattr(self, attr)
            if value is not None:
                out[key] = value
        return out

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SplitPaneState:
        """Build a state from a dictionary as produced by :meth:`as_dict`."""
        values: dict[str, Any] = {}
        for attr, key in _BOOL_KEYS.items():
            values[attr] = bool(data.get(key, False))
        if "align" in data:
            values["alignment"] = Orientation(int(data["align"]))
        for attr, key in _INT_KEYS.items():
            if key in data:
                values[attr] = int(data[key])
        return cls(**values)


class SplitPane:
    """Two panes divided by a movable bar inside an area of a given size."""

    def __init__(self, width: float, height: float):
        self.width = float(width)
        self.height = float(height)
        self.pos = int(width) // 2
        self._alignment = Orientation.VERTICAL
        self._thickness = 10
        self._jump = 1
        self._inset = 3
        self.one_detachable = False
        self.two_detachable = False
        self.min_size_one = 0
        self.min_size_two = 0
        self.bar_locked = False
        self.alignment_locked = False
        self.dragging = False
        self.here: tuple[float, float] = (0.0, 0.0)
        self.attached = True

    # -- configurable attributes that re-layout the panes -----------------

    @property
    def alignment(self) -> Orientation:
        return self._alignment

    @alignment.setter
    def alignment(self, value: Orientation) -> None:
        self._alignment = Orientation(value)
        self._refresh()

    @property
    def thickness(self) -> int:
        return self._thickness

    @thickness.setter
    def thickness(self, value: int) -> None:
        self._thickness = int(value)
        self._refresh()

    @property
    def jump(self) -> int:
        return self._jump

    @jump.setter
    def jump(self, value: int) -> None:
        self._jump = int(value)
        self._refresh()

    @property
    def inset(self) -> int:
        return self._inset

    @inset.setter
    def inset(self, value: int) -> None:
        self._inset = int(value)
        self._refresh()

    @property
    def bar_position(self) -> int:
        return self.pos

    def _refresh(self) -> None:
        if self.attached:
            self.update()

    def _extent(self) -> float:
        if self._alignment is Orientation.VERTICAL:
            return self.width
        return self.height

    # -- layout -----------------------------------------------------------

    def resize(self, width: float, height: float) -> None:
        """Give the pane a new size and lay it out again."""
        self.width = float(width)
        self.height = float(height)
        self.update()

    def update(self) -> None:
        """Keep the bar within the limits set by the minimum pane sizes."""
        if self.bar_locked:
            return
        limit = self._extent() - self._thickness - self.min_size_two
        if self.pos > limit:
            self.pos = int(limit)
        if self.pos < self.min_size_one:
            self.pos = self.min_size_one

    def pane_frames(self) -> tuple[Rect, Rect]:
        """Return the frames of pane one and pane two."""
        pad, pos, thick = self._inset, self.pos, self._thickness
        w, h = self.width, self.height
        if self._alignment is Orientation.VERTICAL:
            one = Rect(pad, pad, pad + (pos - pad), pad + (h - 2 * pad))
            two_left = pos + thick
            two = Rect(two_left, pad, two_left + (w - two_left - pad), pad + (h - 2 * pad))
        else:
            one = Rect(pad, pad, pad + (w - 2 * pad), pad + (pos - 2 * pad))
            two_top = pos + thick
            two = Rect(pad, two_top, pad + (w - 2 * pad), two_top + (h - pos - pad - thick))
        return one, two

    def set_bar_position(self, pos: int) -> None:
        """Place the bar; it is then kept within the limits unless locked."""
        self.pos = int(pos)
        self._refresh()

    # -- mouse handling ---------------------------------------------------

    def mouse_down(self, x: float, y: float, buttons: int) -> None:
        """Secondary button toggles the orientation; primary starts a drag."""
        pressed = MouseButton(int(buttons))
        if pressed & MouseButton.SECONDARY and not self.alignment_locked:
            self._alignment = self._alignment.toggled()
            self.update()
        if pressed & MouseButton.PRIMARY and not self.dragging:
            if not self.bar_locked:
                self.dragging = True
                self.here = (float(x), float(y))

    def mouse_up(self) -> None:
        self.dragging = False

    def mouse_moved(self, x: float, y: float) -> None:
        """Follow the pointer with the bar while dragging."""
        if not self.dragging:
            return
        hx, hy = self.here
        if self._alignment is Orientation.HORIZONTAL:
            self.pos += int(y - hy)
        else:
            self.pos += int(x - hx)
        self.here = (float(x), float(y))

        if self.pos < self.min_size_one:
            self.pos = self.min_size_one
        limit = self._extent() - self._thickness - self.min_size_two
        if self.pos > limit:
            self.pos = int(limit + 1)
        self.update()

    # -- state ------------------------------------------------------------

    def get_state(self) -> SplitPaneState:
        return SplitPaneState(
            alignment=self._alignment,
            position=self.pos,
            thickness=self._thickness,
            jump=self._jump,
            inset=self._inset,
            min_size_one=self.min_size_one,
            min_size_two=self.min_size_two,
            one_detachable=self.one_detachable,
            two_detachable=self.two_detachable,
            bar_locked=self.bar_locked,
            alignment_locked=self.alignment_locked,
        )

    def set_state(self, state: SplitPaneState) -> None:
        """Apply a state and lay the pane out again."""
        self.one_detachable = state.one_detachable
        self.two_detachable = state.two_detachable
        if state.alignment is not None:
            self._alignment = Orientation(state.alignment)
        if state.position is not None:
            self.pos = state.position
        if state.thickness is not None:
            self._thickness = state.thickness
        if state.jump is not None:
            self._jump = state.jump
        if state.inset is not None:
            self._inset = state.inset
        if state.min_size_one is not None:
            self.min_size_one = state.min_size_one
        if state.min_size_two is not None:
            self.min_size_two = state.min_size_two
        self.bar_locked = state.bar_locked
        self.alignment_locked = state.alignment_locked
        self.update()