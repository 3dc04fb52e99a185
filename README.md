# qaterial

Pure-Python building blocks for Material Design user interfaces, with no
runtime dependencies. The package holds the logic behind a Material UI
(colors, grid sizing, icon and label placement, file access) and leaves
drawing to the caller.

## Modules

- `qaterial.elements`: `Signal`, a list of callables run in connection order
  on `emit()`, plus the property objects `IconDescription` (`source`, `width`,
  `height`, `color`, `cache`) and `StepperElement` (`text`, `done`,
  `optional`, `alert_message`, `supporting_text`). Each property emits
  `<name>_changed` with the new value when its value changes.
- `qaterial.color_theme`: `Color` (RGBA channels from 0 to 1, `Color.parse`
  for `#RGB`, `#RRGGBB`, `#AARRGGBB` and a few basic names), `blended_color`,
  `elevated_color`, `overlay_for_elevation` and `ColorTheme`. `ColorTheme`
  works in dark or light mode and derives `primary_text`, `secondary_text`,
  `disabled_text`, `error_text` and `tool_tip_text` from its `background`,
  `primary` and `tool_tip`. In dark mode the background is tinted with the
  primary color. `background_at(elevation)` and the `background0` …
  `background24`, `surface`, `button`, `app_bar`, `fab`, `nav_drawer` and
  `dialog` properties return elevated backgrounds.
- `qaterial.layout`: `Layout`, `LayoutItem`, `LayoutAttached`,
  `LayoutBreakpoint`, `LayoutFill`, `Flow`, `LayoutDirection`, `size_to_type`
  and `default_preferred_fill`. This is a responsive 12/8/4 column grid. Along
  the flow, it resizes the `LayoutItem`s given to `set_items`. Use
  `Layout.attach(item)` to set a per-breakpoint fill (in twelfths) for one
  item. Setting `columns` overrides the column count and
  `reset_user_columns()` removes that override.
- `qaterial.icon_label_positioner`: `IconLabelPositioner`, `Display`,
  `Alignment`, `Size` and `Rect`. From the container size, display mode,
  alignment, spacing and mirroring, it computes `icon_rect`, `label_rect` and
  `implicit_size`.
- `qaterial.icon_label`: `Item`, a visual item with position, size, implicit
  size, visibility and a parent item, and `IconLabel`, an `Item` that places
  its `icon_item` and `label_item` through a positioner once
  `component_complete()` has been called.
- `qaterial.clipboard`: `Clipboard`, a text clipboard shared by all
  `Clipboard` objects of the process. It has `text_changed` and `owns_changed`
  signals, and `owns` reports whether this application set the content.
- `qaterial.text_file`: `TextFile`, `OpenMode` and `TextFileError`. `TextFile`
  reads and writes text files from a path or `file:` URL.
- `qaterial.folder_tree`: `FolderTreeModel`, `SortField` and `Status`.
  `FolderTreeModel` describes one file or folder. Its `fetch()` method fills
  the model with child models for the folder's entries. Those entries are
  filtered by name patterns, hidden/readable flags, `.`/`..` and files/dirs,
  and sorted by name, time, size or type.
- `qaterial.logger`: the loggers `UTILS`, `FILE` and `QATERIAL` (standard
  `logging` loggers that do not propagate), `register_sink`,
  `unregister_sink`, `debug`, `info`, `warn` and `error`.

## Installation

```
pip install qaterial
```

## Examples

Blend colors and compute elevated surfaces:

```python
from qaterial.color_theme import Color, ColorTheme, blended_color, overlay_for_elevation

theme = ColorTheme(dark=True, primary="#2196F3")
surface = theme.background_at(1)
mixed = blended_color(Color.parse("#121212"), Color.parse("#FFFFFF"), 0.5)
overlay_for_elevation(5)  # interpolated between the 4dp and 6dp overlays
```

Size items on a responsive grid:

```python
from qaterial.layout import Layout, LayoutBreakpoint, LayoutItem, size_to_type

assert size_to_type(1000) == LayoutBreakpoint.LARGE

layout = Layout(width=1000)
items = [LayoutItem() for _ in range(3)]
layout.set_items(items)
assert layout.columns == 12
assert items[0].width == 166.0  # two of twelve columns by default at LARGE
```

Place an icon beside a label:

```python
from qaterial.icon_label_positioner import Display, IconLabelPositioner, Rect

positioner = IconLabelPositioner(
    display=Display.TEXT_BESIDE_ICON,
    spacing=8,
    icon_implicit_size=(24, 24),
    label_implicit_size=(100, 20),
    container_size=(200, 40),
)
assert positioner.icon_rect == Rect(34, 8, 24, 24)
assert positioner.label_rect == Rect(66, 10, 100, 20)
```

Read and write a text file:

```python
from qaterial.text_file import OpenMode, TextFile, TextFileError

with TextFile() as f:
    f.open("notes.txt", OpenMode.WRITE)
    f.write("hello")

reader = TextFile()
try:
    reader.open("notes.txt", OpenMode.READ)
    print(reader.read_all())
finally:
    reader.close()
```

When an operation on `TextFile` fails, it raises `TextFileError` and also
stores the message in its `error` attribute. Files opened in write mode are
written to a temporary file next to the target. On `close()` that file
replaces the target, and a failure before that point leaves the target as it
was.

List a folder:

```python
from qaterial.folder_tree import FolderTreeModel, SortField

folder = FolderTreeModel(".", name_filters=["*.py"], sort_field=SortField.NAME)
folder.fetch()
for child in folder:
    print(child.file_name, child.is_dir)
```

## What it does not do

The package does not draw anything, load icon images or talk to a window
system. `IconLabel` and `Layout` only compute sizes and positions. The
`Clipboard` exists within the current process only and is not connected to
the operating system's clipboard. The package has no command-line program.

## Running the tests

```
pip install -e .[test]
pytest
```