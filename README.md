# fontboy

These are the building blocks for a font browser's user interface, and they
do not depend on any toolkit. Each module holds the state and arithmetic of
one widget. Any drawing layer can sit on top of it, and the behaviour can be
tested without a display. The package has no dependencies outside the
standard library.

## Modules

- `fontboy.ffont`
  - `Font` is a plain font description: family, style, size, shear,
    rotation, spacing, encoding, face and flags.
  - `FFont` adds an attribute mask, a `FontAttribute` flag.
  - `FFont.flatten()` turns the font into a fixed-size big-endian record.
    `FFont.unflatten(type_code, data)` rebuilds a font from one. A wrong type
    code or a short record raises `ValueError`.
  - `FFont.update_to` and `FFont.update_from` copy only the attributes set
    both in the given mask and in the source font's mask.
  - `add_message_font` appends a flattened font to a named field of a
    mapping-based message. `find_message_font` reads it back into a `Font`
    or an `FFont`. A missing field or index raises `KeyError`.
- `fontboy.preferences`
  - `Preferences` is a mutable mapping of settings, stored as JSON in a named
    file. The file lives in a settings directory, which defaults to
    `$XDG_CONFIG_HOME` or `~/.config`.
  - A missing or unreadable file gives empty settings, and `loaded` is then
    false.
  - `save()` writes the file. Used as a context manager, the object saves on
    exit.
- `fontboy.geometry`
  - `Rect` has inclusive edges.
  - `Orientation` has a `toggled()` method.
  - `MouseButton` is a set of button flags.
- `fontboy.splitpane`
  - `SplitPane` lays out two panes on either side of a bar. The bar can be
    dragged with the mouse and is kept within the minimum pane sizes unless
    it is locked.
  - The secondary button toggles the orientation, unless the alignment is
    locked.
  - `get_state()` and `set_state()` use `SplitPaneState`. That class turns to
    and from a plain dictionary with `as_dict` and `from_dict`.
- `fontboy.multibox`
  - `MultiBoxGrid` maps points and element numbers to the boxes of a grid.
    The grid is numbered column-major.
  - `elements_in(left, top, right, bottom)` yields the boxes that meet an
    area.
- `fontboy.colors`
  - `RGBColor` is a colour with 8-bit channels.
  - `ColorType` and `ColorItem` describe a list entry with a colour swatch.
  - `ColorPreview` is a swatch that reports each colour change to a callback.
    It shows grey while it is disabled and accepts dropped `RGBColor` data.
- `fontboy.statusslider`
  - `StatusSlider` is an integer slider whose value is clamped to its range.
  - `update_text()` formats the value, as an unsigned 32-bit number, through
    a printf-style template.
- `fontboy.demo`
  - `GridView` computes evenly spaced grid lines.
  - `string_to_int` reads decimal digits.
  - `DemoController` applies text-field and check-box values to a
    `SplitPane`.
- `fontboy.propwindow` holds the text of a font's details window:
  - `window_title`
  - `font_info_lines`, using `FontFileFormat`
  - `char_position_message`
  - the `TopView` labels for the selected character and its page range

## Example

```python
from fontboy.ffont import FFont, FontAttribute
from fontboy.splitpane import SplitPane

font = FFont(family="Serif", size=14.0)
font.mask = FontAttribute.ALL & ~FontAttribute.SHEAR
data = font.flatten()
copy = FFont.unflatten(FFont.type_code, data)

pane = SplitPane(600, 300)
pane.set_bar_position(200)
left, right = pane.pane_frames()
```

## What it does not do

The package draws nothing and opens no windows. It has no command to run.
A display layer must render the state these models hold and feed them mouse
and resize events. The models do not work out the details window's own
split-view size limits.

## Tests

```
pip install -e .[test]
pytest
```