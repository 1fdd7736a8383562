"""
Happy Colors - Data Models

Color conversions (models.color) and generated color schemes
(models.schemes). HSV is the canonical color model throughout.
"""

from .color import Colors
from .schemes import COLOR_SCHEMES, UnknownColorSchemeError

__all__ = ['Colors', 'COLOR_SCHEMES', 'UnknownColorSchemeError']
