# minigfx

A small graphics toolkit that keeps everything in memory. It provides a
display with windows, pixel images, XPM image loading, X11 colour names and a
hook-based event loop. Window contents, drawn strings, pointer position and
queued events are all plain Python state, so you can inspect and test them
directly.

## Installation

```
pip install .
```

To run the tests, install with the `test` extra and run `pytest`:

```
pip install ".[test]"
pytest
```

## Modules

- `minigfx.colors`: X11 colour names.
  - `lookup_color(name)` returns `0xRRGGBB` for a name, ignoring ASCII case.
    `"none"` gives `-1`, and an unknown name raises `KeyError`.
  - `text_to_rgb(name, suffix=None)` reads `#rrggbb` as hexadecimal. Otherwise
    it joins `name` and `suffix` with a space, looks the result up, and returns
    `0` for an unknown name.
- `minigfx.strings`: text helpers used by the XPM reader.
  - `str_find` finds a substring; `str_find_unquoted` finds one outside double
    quotes.
  - `split_words` splits on spaces and tabs.
  - `strip_comments` blanks out `/* */` and `//` comments that lie outside
    quoted strings, and keeps the text the same length.
- `minigfx.visual`: colour conversion.
  - `Visual` holds the colour masks, the depth and a TrueColor flag.
  - `rgb_shifts(visual)` gives the shift and bit width of each channel. It
    raises `ValueError` for a visual that is not TrueColor or that has an
    empty mask.
  - `good_color(color, depth, shifts)` converts `0xRRGGBB` into a pixel value
    for depths below 24 and returns the colour unchanged otherwise.
- `minigfx.image`: pixel images.
  - `new_image(width, height, bits_per_pixel=32, byte_order=0)` returns a
    zero-filled `Image` whose rows are padded to 32 bits.
  - `Image.data_address()` returns `(data, bits_per_pixel, size_line, byte_order)`.
  - `Image.set_pixel(x, y, color)` and `Image.get_pixel(x, y)` write and read
    one pixel in the image's byte order. Coordinates outside the image raise
    `IndexError`.
  - `ImageType` names the storage kinds.
- `minigfx.xpm`: XPM pixmaps.
  - `parse_xpm(lines)` builds an image from the strings of a pixmap.
  - `xpm_to_image(lines)` takes a sequence of strings.
  - `xpm_file_to_image(path)` reads a file, skips comments and uses the quoted
    strings it contains.
  - `quoted_lines(text)` and `images_equal(first, second)` are also available.
  - Pixels of colour `none` are stored as `0xFF000000`.
  - Malformed data raises `XpmError`, a subclass of `ValueError`.
- `minigfx.events`: events and hooks.
  - `EventType` and `EventMask` are enums of event numbers and mask bits.
  - `Event` is a frozen dataclass with the fields `type`, `window`, `key`,
    `button`, `x`, `y`, `count`, `message_type` and `data`.
  - `HookTable` keeps one callback, parameter and mask for each event type.
    It has `set`, `get`, `combined_mask` and `dispatch`.
  - Key hooks are called as `func(key, param)`, button hooks as
    `func(button, x, y, param)`, motion hooks as `func(x, y, param)`, and all
    other hooks as `func(param)`.
  - An expose hook runs only when the event's `count` is 0.
- `minigfx.display`: the display and its windows.
  - `Display` can be used as a context manager.
  - `Window` records its pixels, the strings drawn into it (`texts`), its font,
    its cursor visibility and its hooks. It has `hook`, `key_hook` (key
    release), `mouse_hook` (button press), `expose_hook` and `pixel(x, y)`.
  - `Display` has `new_window`, `destroy_window`, `new_image`,
    `get_color_value`, `pixel_put`, `string_put`, `put_image_to_window`,
    `clear_window`, `loop_hook`, `post_event`, `flush_events`, `loop`,
    `loop_end`, `screen_size`, `mouse_move`, `mouse_get_pos`, `mouse_hide`,
    `mouse_show`, `set_font` and `destroy_display`.
  - A new window queues its first expose event.
  - `loop()` delivers queued events to window hooks. Without a loop hook, it
    returns once the queue is empty.

## Example

```python
from minigfx.display import Display
from minigfx.events import Event, EventType

with Display() as display:
    window = display.new_window(242, 242, "Title1")

    image = display.new_image(42, 42)
    image.set_pixel(0, 0, 0xFF0000)
    display.put_image_to_window(window, image, 20, 20)
    assert window.pixel(20, 20) == 0xFF0000

    def on_key(key, param):
        if key == 0xFF1B:
            display.loop_end()

    window.key_hook(on_key, None)
    display.post_event(Event(EventType.KEY_RELEASE, window, key=0xFF1B))
    display.loop()
```

To load an XPM file:

```python
from minigfx.xpm import xpm_file_to_image

image = xpm_file_to_image("open.xpm")
print(image.width, image.height)
```

## What it does not do

Nothing is ever shown on a real screen, and no input is read from a keyboard
or mouse. Events reach windows only through `Display.post_event`.
`string_put` records each string with its position, colour and font, but does
not render glyphs into the pixel buffer. The package has no command-line
program.