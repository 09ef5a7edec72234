"""Hand angles for a point in time.

Angles are degrees clockwise from the 12 o'clock position, in [0, 360).
Only whole seconds are consulted; the refresh rate bounds what is visible
anyway.
"""

from datetime import datetime, time
from typing import NamedTuple, Union

TimeLike = Union[datetime, time]


class HandAngles(NamedTuple):
    """Angles of the three hands in degrees."""

    hour: float
    minute: float
    second: float


def second_angle(t: TimeLike) -> float:
    """Second hand angle."""
    return t.second * 360 / 60


def minute_angle(t: TimeLike) -> float:
    """Minute hand angle, advancing continuously with the seconds."""
    minutes = t.minute + t.second / 60
    return minutes * 360 / 60


def hour_angle(t: TimeLike) -> float:
    """Hour hand angle on a 12-hour dial, advancing with the minutes."""
    hours = t.hour % 12 + t.minute / 60
    return hours * 360 / 12


def hand_angles(t: TimeLike) -> HandAngles:
    """All three hand angles for `t`."""
    return HandAngles(
        hour=hour_angle(t),
        minute=minute_angle(t),
        second=second_angle(t),
    )
