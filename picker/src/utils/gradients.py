"""
Gradient images for the picking surfaces.

Pixels are computed with numpy and wrapped as QImage at the Qt boundary.
The saturation/value surface blends white -> hue horizontally and scales by
value vertically, which is exactly HSV -> RGB for a fixed hue.
"""

import numpy as np
from PyQt5.QtGui import QColor, QImage

from models.color import hsv_to_rgb
from utils.numbers import round_to

# Hue strip runs top to bottom from 360 down to 0
HUE_STOPS = 360


def saturation_value_pixels(hue, width, height):
    """RGB pixels (height x width x 3, uint8) for a fixed hue.

    Args:
        hue: Hue in degrees (0-360)
        width: Image width in pixels
        height: Image height in pixels

    Returns:
        numpy array, saturation rising left to right, value falling top to bottom
    """
    hue_rgb = np.asarray(hsv_to_rgb([hue, 100, 100]), dtype=np.float32) / 255.0
    saturation = np.linspace(0.0, 1.0, max(width, 1), dtype=np.float32)[None, :, None]
    value = np.linspace(1.0, 0.0, max(height, 1), dtype=np.float32)[:, None, None]

    rgb = ((1.0 - saturation) + saturation * hue_rgb[None, None, :]) * value
    return np.round(np.clip(rgb, 0.0, 1.0) * 255.0).astype(np.uint8)


def hue_strip_pixels(width, height):
    """RGB pixels (height x width x 3, uint8) of the full hue range, red at both ends."""
    hues = np.linspace(HUE_STOPS, 0, max(height, 1))
    column = np.asarray([hsv_to_rgb([h, 100, 100]) for h in hues], dtype=np.float32)
    strip = np.repeat(column[:, None, :], max(width, 1), axis=1)
    return np.round(strip).astype(np.uint8)


def pixels_to_qimage(pixels):
    """Wrap an RGB uint8 array as a QImage that owns its memory."""
    pixels = np.ascontiguousarray(pixels)
    height, width = pixels.shape[:2]
    image = QImage(pixels.tobytes(), width, height, width * 3, QImage.Format_RGB888)
    return image.copy()


def rgb_to_qcolor(rgb):
    """QColor from 0-255 channels (fractions rounded half up)."""
    return QColor(*(int(round_to(channel)) for channel in rgb))
