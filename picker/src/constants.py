"""
Happy Colors - Constants and Configuration

This module contains all constant values used throughout the application:
- Default color and storage keys
- Color scheme identifiers and parameters
- Draggable engine timing
- Widget geometry
- User-facing storage notices
"""

import os

# ======================================================================
# DEFAULT COLOR
# ======================================================================
# Picked when nothing (valid) is stored yet
DEFAULT_HSV = [279, 82, 90]

# Marker position used when a draggable is registered without a value
DEFAULT_DRAGGABLE_VALUE = (0, 0)

# ======================================================================
# STORAGE
# ======================================================================
STORAGE_DIR = os.path.join(os.path.expanduser("~"), ".happycolors")
STORAGE_FILE = os.path.join(STORAGE_DIR, "storage.json")

STORAGE_KEY_HSV = 'picked-hsv'
STORAGE_KEY_SCHEME = 'custom-scheme'

# Custom scheme slot count and stored hex length (no leading #)
CUSTOM_SCHEME_SIZE = 4
HEX_LENGTH = 6

# ======================================================================
# COLOR SCHEMES
# ======================================================================
SCHEME_COMPLEMENTARY = 'complementary'
SCHEME_TRIADIC = 'triadic'
SCHEME_ANALOGOUS = 'analogous'
SCHEME_MONOCHROMATIC = 'monochromatic'

# Display order in the main window: (scheme, title, show hex codes)
SCHEME_SECTIONS = [
    (SCHEME_MONOCHROMATIC, "Monochromatic color scheme", False),
    (SCHEME_ANALOGOUS, "Analogous color scheme", True),
    (SCHEME_COMPLEMENTARY, "Complementary color scheme", True),
    (SCHEME_TRIADIC, "Triadic color scheme", True),
]

SCHEME_DESCRIPTIONS = {
    SCHEME_MONOCHROMATIC: "The monochromatic color scheme consists of a base color, and a range of its shades.",
    SCHEME_ANALOGOUS: (
        "The analogous color scheme adds two additional colors on the color wheel: "
        "one on either side of the base color, distributed evenly."
    ),
    SCHEME_COMPLEMENTARY: (
        "The complementary color scheme adds one opposite (complement) color. "
        "This color is on the exact opposite side of the color wheel."
    ),
    SCHEME_TRIADIC: (
        "The triadic color scheme adds two additional colors. "
        "All three colors are distributed evenly around the color wheel."
    ),
}

MONOCHROMATIC_SHADES = 8
ANALOGOUS_HUE_STEP = 25

# ======================================================================
# DRAGGABLE ENGINE
# ======================================================================
# One animation frame at 60 Hz; move/resize bursts are coalesced per frame
FRAME_INTERVAL_MS = 16

# Marker pixel positions keep one decimal
PIXEL_DECIMALS = 1

# ======================================================================
# WIDGET GEOMETRY
# ======================================================================
PALETTE_SIZE = 350
SLIDER_WIDTH = 11
SLIDER_HEIGHT = 350
MARKER_SIZE = 21
SWATCH_HEIGHT = 64
CUSTOM_SLOT_SIZE = (112, 64)

# ======================================================================
# STORAGE NOTICES (status bar)
# ======================================================================
ERROR_MESSAGES = {
    'get_color': "There was a problem with the saved color, and it had to be reset.",
    'set_color': "There was a problem saving your latest color.",
    'get_scheme': "There was a problem with the saved color scheme, and it had to be reset.",
    'set_scheme': "There was a problem saving your color scheme.",
}
