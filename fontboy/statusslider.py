"""A slider whose status text shows its value through a format template."""

from __future__ import annotations


class StatusSlider:
    """An integer slider with a printf-style status template.

    The value is shown as an unsigned 32-bit number, so negative values
    wrap around.
    """

    def __init__(
        self,
        minimum: int,
        maximum: int,
        template: str = "",
        value: int | None = None,
    ):
        if minimum > maximum:
            raise ValueError(f"minimum {minimum} exceeds maximum {maximum}")
        self.minimum = int(minimum)
        self.maximum = int(maximum)
        self.template = template
        self._value = self.minimum
        self.value = self.minimum if value is None else value

    @property
    def value(self) -> int:
        return self._value

    @value.setter
    def value(self, value: int) -> None:
        self._value = max(self.minimum, min(self.maximum, int(value)))

    def update_text(self) -> str:
        """Return the status text for the current value."""
        unsigned = self._value & 0xFFFFFFFF
        if "%" not in self.template:
            return self.template
        return self.template % unsigned