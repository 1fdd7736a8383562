"""Drag context dataclasses for the draggable engine."""

from dataclasses import dataclass
from typing import Any, Callable, Optional

from models.coords import PixelCoords, Rect, ValueCoords


@dataclass
class DraggableConfig:
    """Registration record for one draggable marker.

    canvas must provide ``bounding_rect()`` and ``canvas_size()``; it may also
    provide ``observe_resize(cb)``/``unobserve_resize(cb)``.
    draggable must provide ``bounding_rect()`` and ``translate(x, y)``.
    """
    canvas: Any
    draggable: Any
    callback: Callable[[ValueCoords], None]
    initial: Optional[ValueCoords] = None
    lock_x: bool = False
    lock_y: bool = False


@dataclass
class DragState:
    """Exists only while a pointer is down on the canvas."""
    canvas_rect: Rect
    draggable_coords: PixelCoords  # last accepted position
    cursor_offset: Optional[PixelCoords] = None  # set when the marker itself was grabbed
