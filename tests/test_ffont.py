import pytest

from fontboy.ffont import (
    FONT_TYPE,
    FFont,
    Font,
    FontAttribute,
    add_message_font,
    find_message_font,
)

NO_SHEAR_ROTATION = FontAttribute.ALL & ~(FontAttribute.SHEAR | FontAttribute.ROTATION)


def modified_font():
    font = FFont()
    font.size = 100.0
    font.shear = 20.0
    font.rotation = 180.0
    font.mask = font.mask & ~(FontAttribute.SHEAR | FontAttribute.ROTATION)
    return font


def test_font_type_code_is_font_tag():
    assert FONT_TYPE == int.from_bytes(b"FONt", "big")
    assert FFont().allows_type_code(FONT_TYPE)
    assert not FFont().allows_type_code(FONT_TYPE + 1)


def test_flattened_size_matches_record():
    font = FFont(family="Serif", style="Bold")
    assert font.flattened_size() == 152
    assert len(font.flatten()) == font.flattened_size()


def test_flatten_is_big_endian_mask_first():
    font = modified_font()
    data = font.flatten()
    assert data[:4] == int(font.mask).to_bytes(4, "big")


def test_flatten_places_family_after_fixed_fields():
    data = FFont(family="Serif").flatten()
    assert data[24:29] == b"Serif"
    assert data[29] == 0


def test_round_trip():
    font = FFont(family="Mono", style="Italic", size=10.5, shear=45.0,
                 rotation=90.0, spacing=2, encoding=3, face=0x21, flags=7,
                 mask=FontAttribute.SIZE | FontAttribute.FACE)
    assert FFont.unflatten(FONT_TYPE, font.flatten()) == font


def test_unflatten_rejects_bad_type():
    with pytest.raises(ValueError, match="type code"):
        FFont.unflatten(FONT_TYPE ^ 1, FFont().flatten())


def test_unflatten_rejects_short_buffer():
    data = FFont().flatten()
    with pytest.raises(ValueError, match="bytes"):
        FFont.unflatten(FONT_TYPE, data[:-1])


def test_flatten_rejects_overlong_family():
    with pytest.raises(ValueError):
        FFont(family="x" * 64).flatten()


def test_update_from_skips_masked_attributes():
    initial = FFont()
    target = FFont.from_font(initial)
    target.update_from(modified_font())
    assert target.size == 100.0
    assert target.shear == initial.shear
    assert target.rotation == initial.rotation


def test_update_to_skips_masked_attributes():
    initial = FFont()
    target = FFont.from_font(initial)
    modified_font().update_to(target)
    assert target.size == 100.0
    assert target.shear == initial.shear


def test_update_to_merges_mask_into_ffont():
    target = FFont(mask=FontAttribute.SHEAR)
    FFont().update_to(target, FontAttribute.SIZE)
    assert target.mask == FontAttribute.SHEAR | FontAttribute.SIZE


def test_update_to_full_mask_copies_everything():
    source = FFont(family="Serif", style="Bold", size=30.0, shear=60.0)
    target = Font()
    source.update_to(target)
    assert target == Font(family="Serif", style="Bold", size=30.0, shear=60.0)


def test_message_round_trip_into_ffont():
    msg = {}
    source = modified_font()
    add_message_font(msg, "test", source)
    target = FFont()
    assert find_message_font(msg, "test", 0, target) is target
    assert target == source


def test_message_into_plain_font_respects_mask():
    msg = {}
    add_message_font(msg, "test", modified_font())
    target = find_message_font(msg, "test", 0, Font())
    assert target.size == 100.0
    assert target.shear == Font().shear
    assert target.rotation == Font().rotation


def test_plain_font_stored_with_full_mask():
    msg = {}
    add_message_font(msg, "f", Font(size=20.0, shear=30.0))
    target = find_message_font(msg, "f", 0, FFont())
    assert target.mask == FontAttribute.ALL
    assert target.shear == 30.0


def test_find_second_entry():
    msg = {}
    add_message_font(msg, "f", Font(size=8.0))
    add_message_font(msg, "f", Font(size=24.0))
    assert find_message_font(msg, "f", 1, Font()).size == 24.0


@pytest.mark.parametrize("name,index", [("missing", 0), ("f", 1), ("f", -1)])
def test_find_missing_leaves_font_unchanged(name, index):
    msg = {}
    add_message_font(msg, "f", Font(size=8.0))
    font = Font()
    with pytest.raises(KeyError):
        find_message_font(msg, name, index, font)
    assert font == Font()


def test_add_requires_font():
    with pytest.raises(ValueError):
        add_message_font({}, "f", None)