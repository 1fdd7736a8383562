"""Coordinate transformation utilities for draggable canvases.

Provides conversion between different coordinate systems:
- Viewport pixels (event coordinates, global)
- Canvas pixels (offset from the canvas' top-left corner)
- Canvas values (percentages, 0-100, independent of canvas size)
"""

from constants import PIXEL_DECIMALS
from models.coords import PixelCoords, ValueCoords
from utils.numbers import clamp, round_to, round_percentage, is_number, safe_to_divide_with

__all__ = [
	'get_cursor_coords', 'position_to_coords', 'coords_to_position',
	'event_coords_to_canvas_coords', 'have_axes_changed', 'safe_to_divide_with',
]


def get_cursor_coords(event):
	"""Get the cursor position of an event in viewport coordinates.
	
	Touch events report their first contact point. Active touches are
	preferred; at the end of a gesture only changed touches remain.
	
	Args:
		event: MouseEvent or TouchEvent
		
	Returns:
		PixelCoords in viewport space
		
	Raises:
		ValueError: If a touch event carries no touch points at all
	"""
	# Touch events carry touch point lists, pointer events carry x/y
	if hasattr(event, 'touches'):
		points = event.touches or event.changed_touches
		if not points:
			raise ValueError(f"'{event.type}' event has no touch points")
		source = points[0]
	else:
		source = event
	
	return PixelCoords(source.x, source.y)


def position_to_coords(position, canvas_size):
	"""Convert a percentage value to pixel offsets on a canvas.
	
	A missing or non-numeric axis maps to 0 (uninitialized state).
	
	Args:
		position: ValueCoords (or None)
		canvas_size: (width, height) of the canvas in pixels
		
	Returns:
		PixelCoords clamped to the canvas, 1 decimal
	"""
	width, height = canvas_size
	x = getattr(position, 'x', None)
	y = getattr(position, 'y', None)
	
	pixel_x = round_to(clamp((width / 100) * x, 0, width), PIXEL_DECIMALS) if is_number(x) else 0
	pixel_y = round_to(clamp((height / 100) * y, 0, height), PIXEL_DECIMALS) if is_number(y) else 0
	return PixelCoords(pixel_x, pixel_y)


def coords_to_position(coords, canvas_size):
	"""Convert pixel offsets on a canvas to a percentage value.
	
	A zero-size axis yields 0 instead of dividing by zero.
	
	Args:
		coords: PixelCoords relative to the canvas
		canvas_size: (width, height) of the canvas in pixels
		
	Returns:
		ValueCoords, each axis within [0, 100] and rounded to 2 decimals
	"""
	width, height = canvas_size
	x = round_percentage(coords.x / width * 100) if safe_to_divide_with(coords.x, width) else 0
	y = round_percentage(coords.y / height * 100) if safe_to_divide_with(coords.y, height) else 0
	return ValueCoords(x, y)


def event_coords_to_canvas_coords(coords, canvas_rect, no_min_max=False):
	"""Translate viewport coordinates to coordinates on a canvas.
	
	Args:
		coords: PixelCoords in viewport space
		canvas_rect: Rect of the canvas in viewport space
		no_min_max: If True, do not clamp to the canvas bounds
		
	Returns:
		PixelCoords relative to the canvas' top-left corner
	"""
	x = coords.x - canvas_rect.left
	y = coords.y - canvas_rect.top
	
	if no_min_max:
		return PixelCoords(x, y)
	
	return PixelCoords(clamp(x, 0, canvas_rect.width), clamp(y, 0, canvas_rect.height))


def have_axes_changed(axes, previous):
	"""Check whether any axis differs from a previous value.
	
	None on either side counts as a change unless both are None.
	"""
	if axes is None or previous is None:
		return axes is not previous
	return axes.x != previous.x or axes.y != previous.y
