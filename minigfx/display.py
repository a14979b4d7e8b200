"""An in-memory display: windows, drawing, images, pointer and the event loop."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from .events import Event, EventMask, EventType, HookTable
from .image import Image, new_image
from .visual import Visual, good_color, rgb_shifts

WM_PROTOCOLS = "WM_PROTOCOLS"
WM_DELETE_WINDOW = "WM_DELETE_WINDOW"
ALL_EVENTS = EventMask(0xFFFFFF)


@dataclass(frozen=True)
class DrawnText:
    """A string drawn into a window."""

    x: int
    y: int
    color: int
    text: str
    font: str | None


@dataclass(eq=False)
class Window:
    """A fixed-size window holding a pixel buffer and its event hooks."""

    width: int
    height: int
    title: str
    hooks: HookTable = field(default_factory=HookTable)
    event_mask: EventMask = ALL_EVENTS
    foreground: int = -1
    font: str | None = None
    cursor_visible: bool = True
    texts: list[DrawnText] = field(default_factory=list)
    _pixels: list[int] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._pixels = [0] * (self.width * self.height)

    def hook(self, event_type: int, mask: int, func: Callable[..., Any] | None,
             param: Any = None) -> None:
        """Install ``func`` for any event type."""
        self.hooks.set(event_type, mask, func, param)

    def key_hook(self, func: Callable[..., Any] | None, param: Any = None) -> None:
        """Call ``func(key, param)`` on key release."""
        self.hooks.set(EventType.KEY_RELEASE, EventMask.KEY_RELEASE, func, param)

    def mouse_hook(self, func: Callable[..., Any] | None, param: Any = None) -> None:
        """Call ``func(button, x, y, param)`` on button press."""
        self.hooks.set(EventType.BUTTON_PRESS, EventMask.BUTTON_PRESS, func, param)

    def expose_hook(self, func: Callable[..., Any] | None, param: Any = None) -> None:
        """Call ``func(param)`` when the window needs redrawing."""
        self.hooks.set(EventType.EXPOSE, EventMask.EXPOSURE, func, param)

    def contains(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def pixel(self, x: int, y: int) -> int:
        """Return the pixel value shown at (x, y)."""
        if not self.contains(x, y):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} window")
        return self._pixels[y * self.width + x]

    def _store(self, x: int, y: int, value: int) -> None:
        if self.contains(x, y):
            self._pixels[y * self.width + x] = value

    def _clear(self) -> None:
        self._pixels = [0] * (self.width * self.height)
        self.texts.clear()


def _bits_per_pixel(depth: int) -> int:
    if depth > 16:
        return 32
    if depth > 8:
        return 16
    return 8


class Display:
    """A connection to a simulated screen holding windows and queued events."""

    def __init__(self, visual: Visual | None = None, screen_width: int = 1920,
                 screen_height: int = 1080, byte_order: int = 0) -> None:
        self.visual = visual if visual is not None else Visual()
        self.shifts = rgb_shifts(self.visual)
        self.depth = self.visual.depth
        self.byte_order = byte_order
        self.do_flush = True
        self.font: str | None = None
        self._screen = (screen_width, screen_height)
        self._windows: list[Window] = []
        self._queue: deque[Event] = deque()
        self._loop_func: Callable[..., Any] | None = None
        self._loop_param: Any = None
        self._end_loop = False
        self._pointer = (0, 0)
        self._open = True

    def __enter__(self) -> Display:
        return self

    def __exit__(self, *exc_info: object) -> None:
        if self._open:
            self.destroy_display()

    @property
    def windows(self) -> tuple[Window, ...]:
        """Open windows, newest first."""
        return tuple(self._windows)

    @property
    def pending(self) -> int:
        """Number of queued events."""
        return len(self._queue)

    def _check_open(self) -> None:
        if not self._open:
            raise RuntimeError("display is closed")

    def _find(self, window: Any) -> Window | None:
        return next((w for w in self._windows if w is window), None)

    def _require(self, window: Window) -> Window:
        self._check_open()
        if self._find(window) is None:
            raise ValueError("window does not belong to this display")
        return window

    def new_window(self, width: int, height: int, title: str) -> Window:
        """Open a window; its first expose event is queued ahead of the others."""
        self._check_open()
        if width <= 0 or height <= 0:
            raise ValueError(f"window size must be positive, got {width}x{height}")
        window = Window(width=width, height=height, title=title)
        self._windows.insert(0, window)
        self._queue.appendleft(Event(type=EventType.EXPOSE, window=window, count=0))
        return window

    def destroy_window(self, window: Window) -> None:
        """Close a window; events still queued for it are ignored."""
        self._require(window)
        self._windows.remove(window)

    def new_image(self, width: int, height: int) -> Image:
        """Create a blank image in the display's pixel format."""
        self._check_open()
        return new_image(width, height, _bits_per_pixel(self.depth), self.byte_order)

    def get_color_value(self, color: int) -> int:
        """Convert a 0xRRGGBB colour to this display's pixel value."""
        self._check_open()
        return good_color(color, self.depth, self.shifts)

    def pixel_put(self, window: Window, x: int, y: int, color: int) -> None:
        """Draw one pixel; points outside the window are clipped."""
        self._require(window)
        window.foreground = self.get_color_value(color)
        window._store(x, y, window.foreground)

    def string_put(self, window: Window, x: int, y: int, color: int, text: str) -> None:
        """Draw a string with its baseline starting at (x, y)."""
        self._require(window)
        window.foreground = self.get_color_value(color)
        window.texts.append(DrawnText(x, y, window.foreground, text, window.font))

    def put_image_to_window(self, window: Window, image: Image, x: int, y: int) -> None:
        """Copy an image into the window with its top left corner at (x, y)."""
        self._require(window)
        for row in range(max(0, -y), min(image.height, window.height - y)):
            for col in range(max(0, -x), min(image.width, window.width - x)):
                window._store(x + col, y + row, image.get_pixel(col, row))

    def clear_window(self, window: Window) -> None:
        """Fill the window with the background colour."""
        self._require(window)
        window._clear()

    def loop_hook(self, func: Callable[..., Any] | None, param: Any = None) -> None:
        """Call ``func(param)`` each time the event queue has been drained."""
        self._check_open()
        self._loop_func = func
        self._loop_param = param

    def post_event(self, event: Event) -> None:
        """Queue an event for the loop to deliver."""
        self._check_open()
        self._queue.append(event)

    def flush_events(self) -> None:
        """Discard every queued event."""
        self._check_open()
        self._queue.clear()

    def loop(self) -> None:
        """Deliver events to window hooks until ended.

        The loop runs while windows are open and :meth:`loop_end` has not been
        called. Without a loop hook it returns once the queue is empty, as no
        further events can arrive.
        """
        self._check_open()
        for window in self._windows:
            window.event_mask = window.hooks.combined_mask()
        self.do_flush = False
        while self._windows and not self._end_loop:
            while not self._end_loop and (self._loop_func is None or self._queue):
                if not self._queue:
                    return
                event = self._queue.popleft()
                window = self._find(event.window)
                if window is None:
                    continue
                if (int(event.type) == EventType.CLIENT_MESSAGE
                        and event.message_type == WM_PROTOCOLS
                        and event.data == WM_DELETE_WINDOW):
                    closer = window.hooks.get(EventType.DESTROY_NOTIFY)
                    if closer.func is not None:
                        closer.func(closer.param)
                window.hooks.dispatch(event)
            if self._loop_func is not None:
                self._loop_func(self._loop_param)

    def loop_end(self) -> None:
        """Make :meth:`loop` return."""
        self._end_loop = True

    def screen_size(self) -> tuple[int, int]:
        """Return the (width, height) of the screen."""
        self._check_open()
        return self._screen

    def mouse_move(self, window: Window, x: int, y: int) -> None:
        """Move the pointer to (x, y) relative to the window."""
        self._require(window)
        self._pointer = (x, y)

    def mouse_get_pos(self, window: Window) -> tuple[int, int]:
        """Return the pointer position relative to the window."""
        self._require(window)
        return self._pointer

    def mouse_hide(self, window: Window) -> None:
        """Hide the pointer over the window."""
        self._require(window).cursor_visible = False

    def mouse_show(self, window: Window) -> None:
        """Show the pointer over the window again."""
        self._require(window).cursor_visible = True

    def set_font(self, window: Window, name: str) -> None:
        """Select the font used by later :meth:`string_put` calls on the window."""
        self._require(window)
        self.font = name
        window.font = name

    def destroy_display(self) -> None:
        """Close the display; later calls raise RuntimeError."""
        self._check_open()
        self._open = False
        self._windows.clear()
        self._queue.clear()