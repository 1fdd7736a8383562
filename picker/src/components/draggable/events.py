"""Toolkit-independent input events and the global listener target.

The draggable engine only ever sees these types. The Qt bridge translates
native events into them; tests construct them directly.
"""

from collections import defaultdict
from dataclasses import dataclass, field
from typing import Tuple

from models.coords import Rect

# ========================================
# Event type names
# ========================================

MOUSE_DOWN = 'mousedown'
MOUSE_MOVE = 'mousemove'
MOUSE_UP = 'mouseup'
TOUCH_START = 'touchstart'
TOUCH_MOVE = 'touchmove'
TOUCH_END = 'touchend'
CONTEXT_MENU = 'contextmenu'
RESIZE = 'resize'


@dataclass(frozen=True)
class TouchPoint:
    x: float
    y: float


@dataclass
class MouseEvent:
    """Pointer event with viewport coordinates.

    path lists the handles the event passed through, innermost first.
    """
    type: str
    x: float = 0.0
    y: float = 0.0
    path: Tuple = ()


@dataclass
class TouchEvent:
    """Touch event; touches are active points, changed_touches the ones that moved/ended."""
    type: str
    touches: Tuple[TouchPoint, ...] = ()
    changed_touches: Tuple[TouchPoint, ...] = ()
    path: Tuple = ()


@dataclass
class ResizeEvent:
    type: str = RESIZE
    path: Tuple = field(default_factory=tuple)


class EventTarget:
    """Global listener registry, the equivalent of a browser window.

    Handlers are plain callables keyed by event type. Dispatch iterates over
    a snapshot so handlers may remove themselves.
    """

    def __init__(self):
        self._listeners = defaultdict(list)

    def add_listener(self, event_type, handler):
        if handler not in self._listeners[event_type]:
            self._listeners[event_type].append(handler)

    def remove_listener(self, event_type, handler):
        handlers = self._listeners.get(event_type)
        if handlers and handler in handlers:
            handlers.remove(handler)

    def has_listeners(self, event_type):
        return bool(self._listeners.get(event_type))

    def dispatch(self, event):
        for handler in list(self._listeners.get(event.type, ())):
            handler(event)
