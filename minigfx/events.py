"""Event types, event masks and per-window hook tables."""

from __future__ import annotations

import enum
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, NamedTuple

MAX_EVENT = 36


class EventType(enum.IntEnum):
    """Core event type numbers."""

    KEY_PRESS = 2
    KEY_RELEASE = 3
    BUTTON_PRESS = 4
    BUTTON_RELEASE = 5
    MOTION_NOTIFY = 6
    ENTER_NOTIFY = 7
    LEAVE_NOTIFY = 8
    FOCUS_IN = 9
    FOCUS_OUT = 10
    KEYMAP_NOTIFY = 11
    EXPOSE = 12
    GRAPHICS_EXPOSE = 13
    NO_EXPOSE = 14
    VISIBILITY_NOTIFY = 15
    CREATE_NOTIFY = 16
    DESTROY_NOTIFY = 17
    UNMAP_NOTIFY = 18
    MAP_NOTIFY = 19
    MAP_REQUEST = 20
    REPARENT_NOTIFY = 21
    CONFIGURE_NOTIFY = 22
    CONFIGURE_REQUEST = 23
    GRAVITY_NOTIFY = 24
    RESIZE_REQUEST = 25
    CIRCULATE_NOTIFY = 26
    CIRCULATE_REQUEST = 27
    PROPERTY_NOTIFY = 28
    SELECTION_CLEAR = 29
    SELECTION_REQUEST = 30
    SELECTION_NOTIFY = 31
    COLORMAP_NOTIFY = 32
    CLIENT_MESSAGE = 33
    MAPPING_NOTIFY = 34
    GENERIC_EVENT = 35


class EventMask(enum.IntFlag):
    """Core event selection mask bits."""

    NO_EVENT = 0
    KEY_PRESS = 1 << 0
    KEY_RELEASE = 1 << 1
    BUTTON_PRESS = 1 << 2
    BUTTON_RELEASE = 1 << 3
    ENTER_WINDOW = 1 << 4
    LEAVE_WINDOW = 1 << 5
    POINTER_MOTION = 1 << 6
    POINTER_MOTION_HINT = 1 << 7
    BUTTON1_MOTION = 1 << 8
    BUTTON2_MOTION = 1 << 9
    BUTTON3_MOTION = 1 << 10
    BUTTON4_MOTION = 1 << 11
    BUTTON5_MOTION = 1 << 12
    BUTTON_MOTION = 1 << 13
    KEYMAP_STATE = 1 << 14
    EXPOSURE = 1 << 15
    VISIBILITY_CHANGE = 1 << 16
    STRUCTURE_NOTIFY = 1 << 17
    RESIZE_REDIRECT = 1 << 18
    SUBSTRUCTURE_NOTIFY = 1 << 19
    SUBSTRUCTURE_REDIRECT = 1 << 20
    FOCUS_CHANGE = 1 << 21
    PROPERTY_CHANGE = 1 << 22
    COLORMAP_CHANGE = 1 << 23
    OWNER_GRAB_BUTTON = 1 << 24


@dataclass(frozen=True)
class Event:
    """An input or window event.

    ``key`` is the key symbol of a key event, ``button`` the mouse button of
    a button event, ``x`` and ``y`` the pointer position and ``count`` the
    number of expose events still to follow.
    """

    type: int
    window: Any = None
    key: int = 0
    button: int = 0
    x: int = 0
    y: int = 0
    count: int = 0
    message_type: Any = None
    data: Any = None


class _Hook(NamedTuple):
    mask: int
    func: Callable[..., Any] | None
    param: Any


_EMPTY = _Hook(mask=EventMask.NO_EVENT, func=None, param=None)


def _check_type(event_type: int) -> int:
    event_type = int(event_type)
    if not 0 <= event_type < MAX_EVENT:
        raise ValueError(f"event type must be in 0..{MAX_EVENT - 1}, got {event_type}")
    return event_type


class HookTable:
    """One hook slot per event type: callback, its parameter and an event mask."""

    def __init__(self) -> None:
        self._hooks: list[_Hook] = [_EMPTY] * MAX_EVENT

    def set(self, event_type: int, mask: int, func: Callable[..., Any] | None,
            param: Any = None) -> None:
        """Install ``func`` for ``event_type``, selecting events by ``mask``."""
        index = _check_type(event_type)
        self._hooks[index] = _Hook(mask=EventMask(mask), func=func, param=param)

    def get(self, event_type: int) -> _Hook:
        """Return the (mask, func, param) entry of ``event_type``."""
        return self._hooks[_check_type(event_type)]

    def combined_mask(self) -> EventMask:
        """Return the union of every slot's event mask."""
        combined = EventMask.NO_EVENT
        for hook in self._hooks:
            combined |= hook.mask
        return combined

    def dispatch(self, event: Event) -> bool:
        """Call the hook installed for ``event``'s type.

        Key hooks get (key, param), button hooks (button, x, y, param),
        motion hooks (x, y, param) and every other hook (param). An expose
        hook runs only for the last expose event of a series. Returns True
        when a hook was called.
        """
        event_type = int(event.type)
        if not 0 <= event_type < MAX_EVENT:
            return False
        hook = self._hooks[event_type]
        if hook.func is None:
            return False
        if event_type < EventType.KEY_PRESS:
            return False
        if event_type in (EventType.KEY_PRESS, EventType.KEY_RELEASE):
            hook.func(event.key, hook.param)
        elif event_type in (EventType.BUTTON_PRESS, EventType.BUTTON_RELEASE):
            hook.func(event.button, event.x, event.y, hook.param)
        elif event_type == EventType.MOTION_NOTIFY:
            hook.func(event.x, event.y, hook.param)
        elif event_type == EventType.EXPOSE:
            if event.count:
                return False
            hook.func(hook.param)
        else:
            hook.func(hook.param)
        return True