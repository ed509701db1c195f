"""
Shared constants for the shape-space scripts.

The dots canvas is SIZE x SIZE logical units plus one DOT_SIZE, framed by
PADDING on every side. Domain coordinates in [-0.5, 0.5] map onto it.
"""

import os

from geometry_utils import ALPHA, BETA, GAMMA, NONE

N_SAMPLES = 100_000
SIZE = 600
DOT_SIZE = 1
PADDING = 10

# RGB
BACKGROUND = (0xEE, 0xEE, 0xEE)
COLORS = {
    ALPHA: (0xFF, 0x00, 0x00),
    BETA: (0x00, 0xFF, 0x00),
    GAMMA: (0x00, 0x00, 0xFF),
    NONE: (0x00, 0x00, 0x00),
}

OUTPUT_DIR = os.getenv("SHAPESPACE_OUTPUT_DIR", "output")


def hex_color(name: str) -> str:
    r, g, b = COLORS[name]
    return f"#{r:02x}{g:02x}{b:02x}"
