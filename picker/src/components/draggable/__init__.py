"""Draggable engine: maps pointer input on a canvas to a percentage value.

Only the pure data types are re-exported here. Import DragController from
components.draggable.drag_controller and the Qt adapters from
components.draggable.qt_bridge.
"""

from .events import (
    EventTarget, MouseEvent, TouchEvent, TouchPoint, ResizeEvent, Rect,
)
from .drag_context import PixelCoords, ValueCoords, DraggableConfig, DragState

__all__ = [
    'EventTarget', 'MouseEvent', 'TouchEvent', 'TouchPoint', 'ResizeEvent', 'Rect',
    'PixelCoords', 'ValueCoords', 'DraggableConfig', 'DragState',
]
