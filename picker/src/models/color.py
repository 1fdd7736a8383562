"""
Happy Colors - Color Domain Model

Conversions between the HSV, RGB, HSL and HEX color models.
HSV is the canonical representation: every other model is derived from it.

Rounding rules:
- hue/saturation/value/lightness and RGB channels keep 2 decimals
- only the HEX string rounds channels to whole numbers
"""

import math
from dataclasses import dataclass
from typing import List, Sequence

from utils.numbers import clamp, round_to


Hsv = List[float]
Rgb = List[float]
Hsl = List[float]


# ========================================
# Validation
# ========================================

def validate_hue(hue: float) -> float:
    """Round a hue to 2 decimals and clamp it to [0, 360].

    Hue is not wrapped: 400 becomes 360, -20 becomes 0.
    """
    return clamp(round_to(hue, 2), 0, 360)


def validate_hsv(hsv: Sequence[float]) -> Hsv:
    """Ensure a set of HSV values is valid. Also applicable to HSL values.

    Args:
        hsv: [hue, saturation, value]

    Returns:
        List of [hue 0-360, saturation 0-100, value 0-100], 2 decimals
    """
    h, s, v = hsv
    return [
        validate_hue(h),
        clamp(round_to(s, 2), 0, 100),
        clamp(round_to(v, 2), 0, 100),
    ]


def validate_rgb(rgb: Sequence[float]) -> Rgb:
    """Clamp each channel to [0, 255] and round it to 2 decimals."""
    return [clamp(round_to(channel, 2), 0, 255) for channel in rgb]


# ========================================
# Conversions
# ========================================

def hsv_to_rgb(hsv: Sequence[float]) -> Rgb:
    """Convert a set of HSV values to RGB.

    Args:
        hsv: [hue 0-360, saturation 0-100, value 0-100]

    Returns:
        List of [r, g, b] in 0-255 range
    """
    h, s, v = hsv
    h /= 360
    s /= 100
    v /= 100

    i = math.floor(h * 6)
    f = h * 6 - i
    p = v * (1 - s)
    q = v * (1 - f * s)
    t = v * (1 - (1 - f) * s)

    sector = i % 6
    if sector == 0:
        r, g, b = v, t, p
    elif sector == 1:
        r, g, b = q, v, p
    elif sector == 2:
        r, g, b = p, v, t
    elif sector == 3:
        r, g, b = p, q, v
    elif sector == 4:
        r, g, b = t, p, v
    else:
        r, g, b = v, p, q

    return validate_rgb([r * 255, g * 255, b * 255])


def hsv_to_hsl(hsv: Sequence[float]) -> Hsl:
    """Convert a set of HSV values to HSL.

    Args:
        hsv: [hue 0-360, saturation 0-100, value 0-100]

    Returns:
        List of [hue 0-360, saturation 0-100, lightness 0-100]
    """
    h, s, v = hsv
    s /= 100
    v /= 100

    saturation = s * v
    lightness = (2 - s) * v

    divisor = lightness if lightness <= 1 else 2 - lightness
    saturation = 0 if divisor == 0 else saturation / divisor
    lightness /= 2

    # HSL shares its value ranges with HSV
    return validate_hsv([h, saturation * 100, lightness * 100])


def rgb_to_hex(rgb: Sequence[float]) -> str:
    """Convert a set of RGB values to an uppercase 6 digit HEX string (no #)."""
    return ''.join(f"{int(round_to(channel)):02X}" for channel in rgb)


def hsv_to_hex(hsv: Sequence[float]) -> str:
    return rgb_to_hex(hsv_to_rgb(hsv))


def rgb_to_css_string(rgb: Sequence[float]) -> str:
    """Format RGB values as ``rgb(r,g,b)`` for stylesheets."""
    return f"rgb({','.join(_format_number(channel) for channel in rgb)})"


def has_color_changed(value, previous) -> bool:
    """Check if a color changed by comparing it with its previous value.

    Used to suppress redundant recomputation, not to validate.

    Args:
        value: New color tuple (or None)
        previous: Previous color tuple (or None)

    Returns:
        True if any component differs; when either side is not a
        sequence, True unless both are equal (e.g. both None)
    """
    if _is_color_sequence(value) and _is_color_sequence(previous):
        return any(
            index >= len(previous) or component != previous[index]
            for index, component in enumerate(value)
        )
    return value != previous


def _is_color_sequence(value) -> bool:
    return isinstance(value, (list, tuple))


def _format_number(number) -> str:
    """Print whole numbers without a trailing ``.0``."""
    if float(number).is_integer():
        return str(int(number))
    return repr(float(number))


# ========================================
# Aggregate
# ========================================

@dataclass(frozen=True)
class Colors:
    """A single color expressed in every supported model.

    Always build through ``from_hsv`` so rgb/hsl/hex are derived from one
    validated HSV value and can never disagree with it.
    """
    hsv: tuple
    rgb: tuple
    hsl: tuple
    hex: str

    @staticmethod
    def from_hsv(hsv: Sequence[float]) -> 'Colors':
        """Create Colors from an HSV tuple (validated first).

        Args:
            hsv: [hue, saturation, value], out of range values are clamped

        Returns:
            Colors object
        """
        valid = validate_hsv(hsv)
        return Colors(
            hsv=tuple(valid),
            rgb=tuple(hsv_to_rgb(valid)),
            hsl=tuple(hsv_to_hsl(valid)),
            hex=hsv_to_hex(valid),
        )

    def to_css(self) -> str:
        return rgb_to_css_string(self.rgb)

    def to_display(self) -> dict:
        """Readouts for the picker panel, every component rounded to an integer."""
        def whole(values):
            return ', '.join(str(int(round_to(v))) for v in values)

        return {
            'HEX': f"#{self.hex}",
            'RGB': whole(self.rgb),
            'HSB': whole(self.hsv),
            'HSL': whole(self.hsl),
        }
