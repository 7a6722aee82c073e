import pytest

from fontboy.statusslider import StatusSlider


def test_formats_value():
    slider = StatusSlider(0, 100, "%u", 5)
    assert slider.update_text() == "5"


def test_template_with_text():
    slider = StatusSlider(0, 100, "Size: %u", 42)
    assert slider.update_text() == "Size: 42"


def test_default_template_is_empty():
    slider = StatusSlider(0, 10)
    assert slider.update_text() == ""
    assert slider.value == 0


def test_value_clamped():
    slider = StatusSlider(0, 10, "%u")
    slider.value = 50
    assert slider.value == 10
    slider.value = -5
    assert slider.value == 0


def test_negative_value_wraps():
    slider = StatusSlider(-10, 10, "%u", -1)
    assert slider.update_text() == str(2**32 - 1)


def test_minimum_above_maximum():
    with pytest.raises(ValueError):
        StatusSlider(10, 0)