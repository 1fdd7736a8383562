"""Coordinate data structures shared by the drag engine and its hosts.

PixelCoords are canvas-size dependent and derived. ValueCoords (percentages)
are the durable, size-independent value handed to hosts.
"""
from dataclasses import dataclass


@dataclass(frozen=True)
class Rect:
    """Bounding rectangle in viewport (global) coordinates."""
    left: float
    top: float
    width: float
    height: float

    @property
    def x(self):
        return self.left

    @property
    def y(self):
        return self.top


@dataclass(frozen=True)
class PixelCoords:
    """Offsets in pixels from a canvas' top-left corner."""
    x: float
    y: float


@dataclass(frozen=True)
class ValueCoords:
    """Position on a canvas expressed in percentages (0-100 per axis)."""
    x: float
    y: float
