"""Font descriptions that flatten to a fixed-size record and travel in messages."""

from __future__ import annotations

import struct
from collections.abc import MutableMapping
from dataclasses import dataclass, fields
from enum import IntFlag
from typing import ClassVar

FONT_TYPE = int.from_bytes(b"FONt", "big")
NAME_LENGTH = 64

# mask, size, shear, rotation, flags, face, spacing, encoding, family, style
_RECORD = struct.Struct(f">IfffIHBB{NAME_LENGTH}s{NAME_LENGTH}s")


class FontAttribute(IntFlag):
    """Bits naming the attributes of a font."""

    FAMILY_AND_STYLE = 0x01
    SIZE = 0x02
    SHEAR = 0x04
    ROTATION = 0x08
    SPACING = 0x10
    ENCODING = 0x20
    FACE = 0x40
    FLAGS = 0x80
    ALL = 0xFF


_ATTRIBUTE_FIELDS = (
    (FontAttribute.FAMILY_AND_STYLE, ("family", "style")),
    (FontAttribute.SIZE, ("size",)),
    (FontAttribute.SHEAR, ("shear",)),
    (FontAttribute.ROTATION, ("rotation",)),
    (FontAttribute.SPACING, ("spacing",)),
    (FontAttribute.ENCODING, ("encoding",)),
    (FontAttribute.FACE, ("face",)),
    (FontAttribute.FLAGS, ("flags",)),
)


@dataclass
class Font:
    """A plain font description."""

    family: str = "Sans"
    style: str = "Regular"
    size: float = 12.0
    shear: float = 90.0
    rotation: float = 0.0
    spacing: int = 0
    encoding: int = 0
    face: int = 0
    flags: int = 0

    @property
    def family_and_style(self) -> tuple[str, str]:
        return self.family, self.style


_FONT_FIELDS = tuple(f.name for f in fields(Font))


def _encode_name(value: str, what: str) -> bytes:
    raw = value.encode("utf-8")
    if len(raw) >= NAME_LENGTH:
        raise ValueError(f"font {what} {value!r} is longer than {NAME_LENGTH - 1} bytes")
    return raw


def _decode_name(raw: bytes) -> str:
    return raw.split(b"\0", 1)[0].decode("utf-8", errors="replace")


@dataclass
class FFont(Font):
    """A font carrying a mask of which attributes it defines; flattenable."""

    mask: FontAttribute = FontAttribute.ALL

    type_code: ClassVar[int] = FONT_TYPE
    is_fixed_size: ClassVar[bool] = True

    @classmethod
    def from_font(cls, font: Font) -> FFont:
        """Copy a font; a plain font gets a mask covering every attribute."""
        values = {name: getattr(font, name) for name in _FONT_FIELDS}
        mask = font.mask if isinstance(font, FFont) else FontAttribute.ALL
        return cls(**values, mask=mask)

    def update_to(self, font: Font | None, mask: int = FontAttribute.ALL) -> None:
        """Copy into ``font`` the attributes set both in ``mask`` and in our own mask."""
        if font is None:
            return
        effective = FontAttribute(int(mask)) & self.mask
        if effective & FontAttribute.ALL == FontAttribute.ALL:
            for name in _FONT_FIELDS:
                setattr(font, name, getattr(self, name))
        else:
            for attribute, names in _ATTRIBUTE_FIELDS:
                if effective & attribute:
                    for name in names:
                        setattr(font, name, getattr(self, name))
        if isinstance(font, FFont):
            font.mask = font.mask | effective

    def update_from(self, font: FFont | None, mask: int = FontAttribute.ALL) -> None:
        """Copy from ``font`` the attributes set both in ``mask`` and in its mask."""
        if font is None:
            return
        font.update_to(self, mask)

    def flattened_size(self) -> int:
        return _RECORD.size

    def allows_type_code(self, code: int) -> bool:
        return code == FONT_TYPE

    def flatten(self) -> bytes:
        """Return the big-endian fixed-size record describing this font."""
        return _RECORD.pack(
            int(self.mask) & 0xFFFFFFFF,
            self.size,
            self.shear,
            self.rotation,
            int(self.flags) & 0xFFFFFFFF,
            int(self.face) & 0xFFFF,
            int(self.spacing) & 0xFF,
            int(self.encoding) & 0xFF,
            _encode_name(self.family, "family"),
            _encode_name(self.style, "style"),
        )

    @classmethod
    def unflatten(cls, type_code: int, data: bytes) -> FFont:
        """Build a font from a flattened record of the given type code."""
        if type_code != FONT_TYPE:
            raise ValueError(f"bad type code {type_code:#010x} for a font")
        if len(data) < _RECORD.size:
            raise ValueError(
                f"font record needs {_RECORD.size} bytes, got {len(data)}"
            )
        (mask, size, shear, rotation, flags, face, spacing, encoding,
         family, style) = _RECORD.unpack_from(data)
        return cls(
            family=_decode_name(family),
            style=_decode_name(style),
            size=size,
            shear=shear,
            rotation=rotation,
            spacing=spacing,
            encoding=encoding,
            face=face,
            flags=flags,
            mask=FontAttribute(mask),
        )


Message = MutableMapping[str, list[tuple[int, bytes]]]


def add_message_font(msg: Message, name: str, font: Font) -> None:
    """Append ``font`` in flattened form to the field ``name`` of ``msg``."""
    if msg is None or font is None:
        raise ValueError("a message and a font are required")
    flat = FFont.from_font(font)
    msg.setdefault(name, []).append((FONT_TYPE, flat.flatten()))


def find_message_font(msg: Message, name: str, index: int, font: Font) -> Font:
    """Read the ``index``-th font of field ``name`` into ``font`` and return it.

    An FFont target takes every attribute and the stored mask; a plain Font
    takes only the attributes the stored mask defines. On error ``font`` is
    left unchanged.
    """
    if msg is None or font is None:
        raise ValueError("a message and a font are required")
    if index < 0:
        raise KeyError(f"no font {name!r} at index {index}")
    try:
        type_code, data = msg[name][index]
    except (KeyError, IndexError):
        raise KeyError(f"no font {name!r} at index {index}") from None
    found = FFont.unflatten(type_code, data)
    if isinstance(font, FFont):
        for f in fields(FFont):
            setattr(font, f.name, getattr(found, f.name))
    else:
        found.update_to(font)
    return font