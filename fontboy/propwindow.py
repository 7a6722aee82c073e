"""Text shown by the details window: title, font info and page range."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

PAGE_SIZE = 256
_UNICODE_MAX = 0xFFFF


class FontFileFormat(Enum):
    """Kinds of font files the details window can name."""

    TRUETYPE_WINDOWS = 0
    POSTSCRIPT_TYPE1_WINDOWS = 1
    UNKNOWN = 2


_FORMAT_NAMES = {
    FontFileFormat.TRUETYPE_WINDOWS: "Windows True Type",
    FontFileFormat.POSTSCRIPT_TYPE1_WINDOWS: "Windows Postscript",
}

FONT_INFO_LABELS = ("Family:", "Style:", "Type:", "Fixed:")


def _check_unicode(value: int) -> int:
    value = int(value)
    if not 0 <= value <= _UNICODE_MAX:
        raise ValueError(f"character code must be within 0..{_UNICODE_MAX:#x}, got {value}")
    return value


def window_title(family: str, style: str) -> str:
    """Return the title of a details window showing the given font."""
    return f"{family} {style}"


def char_position_message(unicode: int) -> dict[str, int]:
    """Return the fields of the message announcing a newly selected character.

    ``char`` holds the high byte of the code; ``page`` is 1 for any
    non-zero code and 0 otherwise.
    """
    unicode = _check_unicode(unicode)
    return {"char": unicode >> 8, "page": 1 if unicode else 0}


def font_info_lines(
    family: str,
    style: str,
    file_format: FontFileFormat | None,
    is_fixed: bool,
) -> list[tuple[str, str]]:
    """Return the label and value of each font info line below the glyph."""
    type_name = _FORMAT_NAMES.get(file_format, "Unknown") if file_format is not None else "Unknown"
    values = (family, style, type_name, "yes" if is_fixed else "no")
    return list(zip(FONT_INFO_LABELS, values))


@dataclass
class TopView:
    """The header of the details window: selected character and page range."""

    current_text: str | None = None
    range_text: str | None = None
    old_pagepos: int = 0

    def __init__(self) -> None:
        self.current_text = None
        self.range_text = None
        self.old_pagepos = 0

    def update(self, char: int = _UNICODE_MAX) -> None:
        """Show ``char`` and the page it lies in, if it differs from the last one."""
        char = _check_unicode(char)
        if char == self.old_pagepos:
            return
        self.current_text = str(char)
        start = (char // PAGE_SIZE) * PAGE_SIZE
        self.range_text = f"{start} - {start + PAGE_SIZE - 1}"
        self.old_pagepos = char