"""
Happy Colors - Color Scheme Generation

Derives harmonious color schemes from a base HSV color. Every generated
color goes through validate_hsv, so schemes are always in range.

Scheme shapes:
- complementary: [base, opposite]
- triadic:       [base, +120, +240]
- analogous:     [+25, base, -25]
- monochromatic: [top color, [8 shades]]
"""

import math
from typing import Callable, Dict, List, Sequence

from constants import (
    SCHEME_COMPLEMENTARY, SCHEME_TRIADIC, SCHEME_ANALOGOUS, SCHEME_MONOCHROMATIC,
    MONOCHROMATIC_SHADES, ANALOGOUS_HUE_STEP,
)
from models.color import validate_hsv


class UnknownColorSchemeError(KeyError):
    """Raised for a scheme name outside the supported set (caller bug)."""


def hue_shift(hsv: Sequence[float], delta: float) -> List[float]:
    """Rotate the hue of a color around the wheel, keeping s and v."""
    h, s, v = hsv
    return validate_hsv([abs(math.fmod(h + delta, 360)), s, v])


def complementary(hsv: Sequence[float]) -> List[List[float]]:
    return [validate_hsv(hsv), hue_shift(hsv, 180)]


def triadic(hsv: Sequence[float]) -> List[List[float]]:
    return [validate_hsv(hsv), hue_shift(hsv, 120), hue_shift(hsv, 240)]


def analogous(hsv: Sequence[float]) -> List[List[float]]:
    """Base color in the middle, one neighbour on either side of the wheel."""
    h, s, v = hsv
    return [
        hue_shift(hsv, ANALOGOUS_HUE_STEP),
        validate_hsv(hsv),
        validate_hsv([math.fmod(360 + (h - ANALOGOUS_HUE_STEP), 360), s, v]),
    ]


def monochromatic(hsv: Sequence[float]) -> list:
    """Fully saturated top color plus a dark-to-light range of its shades.

    Saturation rises then falls symmetrically across the shades while the
    value increases monotonically.

    Args:
        hsv: Base color, only the hue is used

    Returns:
        [top_color, shades] where shades holds MONOCHROMATIC_SHADES colors
    """
    h = hsv[0]
    steps = MONOCHROMATIC_SHADES + 1
    shades = [
        validate_hsv([
            h,
            100 - abs((200 / steps) * n - 100),
            (100 / steps) * n,
        ])
        for n in range(1, MONOCHROMATIC_SHADES + 1)
    ]
    return [validate_hsv([h, 100, 100]), shades]


COLOR_SCHEMES: Dict[str, Callable] = {
    SCHEME_COMPLEMENTARY: complementary,
    SCHEME_TRIADIC: triadic,
    SCHEME_ANALOGOUS: analogous,
    SCHEME_MONOCHROMATIC: monochromatic,
}


def get_color_scheme(scheme: str) -> Callable:
    """Look up a scheme generator by name.

    Raises:
        UnknownColorSchemeError: If the name is not a supported scheme
    """
    try:
        return COLOR_SCHEMES[scheme]
    except KeyError:
        raise UnknownColorSchemeError(f"Unknown color scheme: {scheme}") from None


def generate_color_scheme(scheme: str, hsv: Sequence[float]) -> list:
    return get_color_scheme(scheme)(hsv)
