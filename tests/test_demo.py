import pytest

from fontboy.colors import RGBColor
from fontboy.demo import DemoCommand, DemoController, GridView, string_to_int
from fontboy.splitpane import SplitPane


def test_string_to_int():
    assert string_to_int("100") == 100
    assert string_to_int("0") == 0
    assert string_to_int("") == 0


def test_vertical_lines_span_height():
    view = GridView(100, 50, RGBColor(255, 0, 0))
    lines = view.grid_lines()
    vertical = [line for line in lines if line[0][0] == line[1][0] and line[0][1] == 0 and line[1][1] == 50]
    assert vertical[0] == ((0, 0), (0, 50))
    assert all(line[0][0] < 100 for line in vertical)


def test_lines_evenly_spaced():
    view = GridView(100, 50, RGBColor(0, 0, 255))
    lines = view.grid_lines()
    xs = [a[0] for a, b in lines if b[1] == 50 and a[1] == 0 and a[0] == b[0]]
    gaps = {b - a for a, b in zip(xs, xs[1:])}
    assert len(gaps) == 1


def test_small_view_steps_by_one():
    view = GridView(5, 5, RGBColor(0, 0, 0))
    lines = view.grid_lines()
    assert len(lines) == 10
    assert lines[:5] == [((x, 0), (x, 5)) for x in range(5)]


def test_controller_configures_pane():
    pane = SplitPane(600, 265)
    DemoController(pane)
    assert pane.min_size_one == 100
    assert pane.thickness == 10


def test_handle_min_size_two():
    pane = SplitPane(600, 265)
    controller = DemoController(pane)
    controller.handle("minT", "50")
    assert pane.min_size_two == 50


def test_handle_thickness_and_locks():
    pane = SplitPane(600, 265)
    controller = DemoController(pane)
    controller.handle(DemoCommand.THICKNESS, "4")
    controller.handle(DemoCommand.LOCK_POSITION, True)
    controller.handle(DemoCommand.LOCK_ALIGNMENT, 1)
    assert pane.thickness == 4
    assert pane.bar_locked is True
    assert pane.alignment_locked is True


def test_unknown_command():
    controller = DemoController(SplitPane(100, 100))
    with pytest.raises(ValueError):
        controller.handle("nope", "1")


def test_create_default_window():
    controller = DemoController.create()
    assert controller.pane.width == 600
    assert controller.pane.height < 300
    assert controller.grids[0].color == RGBColor(255, 0, 0)