"""Drag controller: turns pointer input on a canvas into a percentage value.

States:
    unregistered -> idle (register) -> dragging (pointer down on canvas)
    dragging -> idle (pointer up, touch end, context menu)
    any -> unregistered (deregister)

The marker's pixel position and the logical value are always updated through
one path (_update_draggable) so they never diverge. Moves and canvas resizes
are debounced to one update per frame; down/up are handled immediately, so a
release can overtake a queued move, which is then dropped.
"""

import logging

from components.draggable.drag_context import DragState
from components.draggable import events
from constants import DEFAULT_DRAGGABLE_VALUE, PIXEL_DECIMALS
from models.coords import PixelCoords, ValueCoords
from utils.coordinate_transforms import (
    get_cursor_coords, position_to_coords, coords_to_position,
    event_coords_to_canvas_coords, have_axes_changed,
)
from utils.debounce import debounce
from utils.numbers import round_to


class DragController:
    """Owns the drag lifecycle for one draggable marker on one canvas.

    Hosts hold an instance (composition) and talk to it through register,
    deregister and update_draggable_value. Listeners live on the given
    window (EventTarget) only while registered.
    """

    def __init__(self, window, scheduler):
        """
        Args:
            window: EventTarget receiving global pointer/touch/contextmenu events
            scheduler: Frame scheduler used to debounce moves and resizes
        """
        self._window = window
        self._logger = logging.getLogger('DragController')

        self._registered = False
        self._config = None
        self._value = None
        self._position = None
        self._drag_state = None
        self._observing_native_resize = False

        self._drag = debounce(self._on_drag, scheduler)
        self._on_canvas_resize = debounce(self._handle_canvas_resize, scheduler)

        self._listeners = (
            (events.MOUSE_DOWN, self._start_drag),
            (events.MOUSE_MOVE, self._drag),
            (events.MOUSE_UP, self._stop_drag),
            (events.TOUCH_START, self._start_drag),
            (events.TOUCH_MOVE, self._drag),
            (events.TOUCH_END, self._stop_drag),
            (events.CONTEXT_MENU, self._on_context_menu),
        )

    # ========================================
    # State (read only)
    # ========================================

    @property
    def registered(self):
        return self._registered

    @property
    def dragging(self):
        return self._drag_state is not None

    @property
    def value(self):
        """Last emitted ValueCoords (None before registration)."""
        return self._value

    @property
    def position(self):
        """Last applied marker PixelCoords."""
        return self._position

    @property
    def drag_state(self):
        return self._drag_state

    # ========================================
    # Registration
    # ========================================

    def register(self, config):
        """Register a marker as draggable within a canvas.

        Re-registering first tears down the previous registration. Before
        this returns the marker is positioned at the initial value and the
        callback has fired with it.

        Args:
            config: DraggableConfig
        """
        if self._registered:
            self.deregister()

        self._registered = True
        self._config = config
        self._value = None
        self._position = None
        self._manage_listeners(True)
        self._observe_canvas_resizes()

        initial = config.initial if config.initial is not None else ValueCoords(*DEFAULT_DRAGGABLE_VALUE)
        self.update_draggable_value(initial)
        self._logger.debug(f"Registered draggable at {self._value}")

    def deregister(self):
        """Stop reacting to input and resizes. Safe to call when not registered."""
        if self._registered:
            self._logger.debug("Deregistered draggable")
        self._registered = False
        self._drag_state = None
        self._manage_listeners(False)
        self._unobserve_canvas_resizes()
        self._drag.cancel()
        self._on_canvas_resize.cancel()

    def _manage_listeners(self, attach):
        handler = self._window.add_listener if attach else self._window.remove_listener
        for event_type, listener in self._listeners:
            handler(event_type, listener)

    def _observe_canvas_resizes(self):
        """Prefer native resize observation of the canvas, else window resizes."""
        canvas = self._config.canvas
        self._observing_native_resize = hasattr(canvas, 'observe_resize')
        if self._observing_native_resize:
            canvas.observe_resize(self._on_canvas_resize)
        else:
            self._window.add_listener(events.RESIZE, self._on_canvas_resize)

    def _unobserve_canvas_resizes(self):
        if self._config is None:
            return
        if self._observing_native_resize:
            self._config.canvas.unobserve_resize(self._on_canvas_resize)
        else:
            self._window.remove_listener(events.RESIZE, self._on_canvas_resize)
        self._observing_native_resize = False

    def _handle_canvas_resize(self, *args):
        """Keep the marker at the same value when the canvas changes size."""
        if self._registered:
            self.update_draggable_position()

    # ========================================
    # External updates
    # ========================================

    def update_draggable_value(self, value=None):
        """Move the marker to a value set for reasons other than dragging.

        The callback fires only if the resulting value changed.

        Args:
            value: ValueCoords, defaults to the last known value
        """
        if not self._registered:
            return
        position = value if value is not None else self._value
        coords = position_to_coords(position, self._config.canvas.canvas_size())
        self._update_draggable(coords)

    def update_draggable_position(self, value=None):
        """Reproject a value to pixels without touching the logical value."""
        if not self._registered:
            return
        position = value if value is not None else self._value
        coords = position_to_coords(position, self._config.canvas.canvas_size())
        self._apply_position(coords)

    # ========================================
    # Drag lifecycle
    # ========================================

    def _start_drag(self, event):
        """Enter the dragging state when a press lands on the canvas."""
        if not self._registered or self._config.canvas not in event.path:
            return

        canvas_rect = self._config.canvas.bounding_rect()
        marker_rect = self._config.draggable.bounding_rect()
        self._drag_state = DragState(
            canvas_rect=canvas_rect,
            draggable_coords=event_coords_to_canvas_coords(
                PixelCoords(marker_rect.x, marker_rect.y), canvas_rect
            ),
        )

        # Grabbing the marker itself must not make it jump to the click point
        if self._config.draggable in event.path:
            cursor = event_coords_to_canvas_coords(get_cursor_coords(event), canvas_rect, no_min_max=True)
            marker = self._drag_state.draggable_coords
            self._drag_state.cursor_offset = PixelCoords(cursor.x - marker.x, cursor.y - marker.y)

        self._logger.debug(f"Drag started on {event.type}")
        self._on_drag_event(event)

    def _on_drag(self, event):
        """Debounced move handler; a no-op once the drag ended or was torn down."""
        if self._registered and self._drag_state is not None:
            self._on_drag_event(event)

    def _stop_drag(self, event=None):
        if self._drag_state is not None:
            self._logger.debug("Drag stopped")
        self._drag_state = None

    def _on_context_menu(self, event=None):
        """Some platforms never deliver a release after a right click."""
        self._stop_drag(event)

    def _on_drag_event(self, event):
        state = self._drag_state
        cursor = get_cursor_coords(event)

        if state.cursor_offset is not None:
            cursor = PixelCoords(cursor.x - state.cursor_offset.x, cursor.y - state.cursor_offset.y)

        new_coords = event_coords_to_canvas_coords(cursor, state.canvas_rect)
        previous = state.draggable_coords
        coords = PixelCoords(
            round_to(previous.x if self._config.lock_x else new_coords.x, PIXEL_DECIMALS),
            round_to(previous.y if self._config.lock_y else new_coords.y, PIXEL_DECIMALS),
        )

        if have_axes_changed(coords, previous):
            state.draggable_coords = coords
            self._update_draggable(coords)

    # ========================================
    # Position + value (single update path)
    # ========================================

    def _update_draggable(self, coords):
        self._apply_position(coords)
        self._apply_value(coords)

    def _apply_position(self, coords):
        if have_axes_changed(coords, self._position):
            self._position = coords
            self._config.draggable.translate(coords.x, coords.y)

    def _apply_value(self, coords):
        value = coords_to_position(coords, self._config.canvas.canvas_size())
        if have_axes_changed(value, self._value):
            self._value = value
            self._config.callback(value)
