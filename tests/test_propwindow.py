import pytest

from fontboy.propwindow import (
    FONT_INFO_LABELS,
    FontFileFormat,
    TopView,
    char_position_message,
    font_info_lines,
    window_title,
)


def test_window_title_joins_family_and_style():
    assert window_title("Sans", "Bold") == "Sans Bold"


def test_char_position_message_high_byte():
    msg = char_position_message(0x1234)
    assert msg["char"] == 0x1234 >> 8
    assert msg["page"] == 1


def test_char_position_message_zero():
    assert char_position_message(0) == {"char": 0, "page": 0}


@pytest.mark.parametrize("bad", [-1, 0x10000])
def test_char_position_message_out_of_range(bad):
    with pytest.raises(ValueError):
        char_position_message(bad)


def test_font_info_lines_truetype_fixed():
    lines = font_info_lines("Mono", "Regular", FontFileFormat.TRUETYPE_WINDOWS, True)
    assert [label for label, _ in lines] == list(FONT_INFO_LABELS)
    assert lines[0] == ("Family:", "Mono")
    assert lines[1] == ("Style:", "Regular")
    assert lines[2] == ("Type:", "Windows True Type")
    assert lines[3] == ("Fixed:", "yes")


def test_font_info_lines_postscript_not_fixed():
    lines = font_info_lines("Serif", "Italic", FontFileFormat.POSTSCRIPT_TYPE1_WINDOWS, False)
    assert lines[2][1] == "Windows Postscript"
    assert lines[3][1] == "no"


@pytest.mark.parametrize("fmt", [FontFileFormat.UNKNOWN, None])
def test_font_info_lines_unknown_format(fmt):
    lines = font_info_lines("A", "B", fmt, False)
    assert lines[2] == ("Type:", "Unknown")


def test_top_view_starts_empty_and_ignores_initial_position():
    view = TopView()
    view.update(0)
    assert view.current_text is None
    assert view.range_text is None


def test_top_view_update_shows_char_and_first_page():
    view = TopView()
    view.update(65)
    assert view.current_text == "65"
    assert view.range_text == "0 - 255"
    assert view.old_pagepos == 65


def test_top_view_range_contains_char():
    view = TopView()
    for char in (1, 255, 256, 1000, 0xFFFF):
        view.update(char)
        start, end = (int(part) for part in view.range_text.split(" - "))
        assert start <= char <= end
        assert end - start == 255
        assert start % 256 == 0


def test_top_view_default_is_last_char():
    view = TopView()
    view.update()
    assert view.current_text == str(0xFFFF)


def test_top_view_repeated_char_keeps_text():
    view = TopView()
    view.update(300)
    view.current_text = "marker"
    view.update(300)
    assert view.current_text == "marker"


def test_top_view_rejects_out_of_range():
    with pytest.raises(ValueError):
        TopView().update(0x10000)