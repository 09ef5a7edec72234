"""Fixed geometry of the clock face.

All values are in a normalized 100x100 coordinate space with the origin at
the top-left corner.
"""

import math
from typing import Tuple

VIEWBOX_SIZE = 100
CENTER_X = 50.0
CENTER_Y = 50.0
FACE_RADIUS = 45.0

MAJOR_TICK_LENGTH = 5.0
MAJOR_TICK_WIDTH = 1.0
MINOR_TICK_LENGTH = 2.0
MINOR_TICK_WIDTH = 0.5

NUMERAL_RADIUS = 35.0
NUMERAL_FONT_SIZE = 10
CENTER_DOT_RADIUS = 1.5

# 30 frames per second
REFRESH_PERIOD_MS = 1000 / 30

COORD_PRECISION = 4


def polar(angle: float, radius: float) -> Tuple[float, float]:
    """
    Point at `radius` from the face center, `angle` degrees clockwise from 12.

    Args:
        angle: Rotation in degrees, 0 pointing up
        radius: Distance from the center

    Returns:
        (x, y) rounded to COORD_PRECISION decimals
    """
    angle_rad = math.radians(angle - 90)
    x = CENTER_X + radius * math.cos(angle_rad)
    y = CENTER_Y + radius * math.sin(angle_rad)
    # round() leaves -0.0 for tiny negatives; + 0.0 normalizes it
    return round(x, COORD_PRECISION) + 0.0, round(y, COORD_PRECISION) + 0.0
