"""Scene composition for the clock face.

The face decoration (rim, ticks, numerals) never changes and is built once.
Hands are rebuilt from the current angles on every frame. `compose_frame`
returns primitives in draw order: decoration first, then the hour, minute
and second hands, and the center dot last so it covers the hand origins.
"""

from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from typing import List, Tuple

from analog_clock.clock.angles import TimeLike, hand_angles
from analog_clock.clock.geometry import (
    CENTER_DOT_RADIUS,
    CENTER_X,
    CENTER_Y,
    FACE_RADIUS,
    MAJOR_TICK_LENGTH,
    MAJOR_TICK_WIDTH,
    MINOR_TICK_LENGTH,
    MINOR_TICK_WIDTH,
    NUMERAL_FONT_SIZE,
    NUMERAL_RADIUS,
    polar,
)
from analog_clock.clock.primitives import Circle, Line, Primitive, Text


class HandColor(Enum):
    """Stroke colors for the hands."""

    PRIMARY = "red"
    SECONDARY = "blue"
    TERTIARY = "black"


@dataclass(frozen=True)
class HandSpec:
    """
    One clock hand.

    Attributes:
        angle: Rotation in degrees clockwise from 12
        color: Stroke color
        thickness: Stroke width
        length: Distance from the center to the tip, in face units
    """

    angle: float
    color: HandColor
    thickness: float
    length: float

    def __post_init__(self) -> None:
        if self.thickness <= 0:
            raise ValueError(f"Hand thickness must be positive, got {self.thickness}")
        if self.length <= 0:
            raise ValueError(f"Hand length must be positive, got {self.length}")


# (color, thickness, length) per hand
HOUR_HAND = (HandColor.PRIMARY, 2.0, 20.0)
MINUTE_HAND = (HandColor.SECONDARY, 1.0, 40.0)
SECOND_HAND = (HandColor.TERTIARY, 0.5, 40.0)


def _tick(angle: float, length: float, width: float) -> Line:
    x1, y1 = polar(angle, FACE_RADIUS)
    x2, y2 = polar(angle, FACE_RADIUS - length)
    return Line(x1=x1, y1=y1, x2=x2, y2=y2, stroke="black", stroke_width=width)


def major_ticks() -> List[Line]:
    """Hour ticks, one every 30 degrees."""
    return [_tick(i / 12 * 360, MAJOR_TICK_LENGTH, MAJOR_TICK_WIDTH) for i in range(12)]


def minor_ticks() -> List[Line]:
    """Minute ticks, skipping the positions already taken by hour ticks."""
    return [
        _tick(i / 60 * 360, MINOR_TICK_LENGTH, MINOR_TICK_WIDTH)
        for i in range(60)
        if i % 5 != 0
    ]


def numerals() -> List[Text]:
    """Hour numerals 12, 1 .. 11, placed inside the ticks and kept upright."""
    labels = []
    for i in range(12):
        x, y = polar(i / 12 * 360, NUMERAL_RADIUS)
        labels.append(
            Text(
                x=x,
                y=y,
                content="12" if i == 0 else str(i),
                anchor="middle",
                font_size=NUMERAL_FONT_SIZE,
                baseline="central",
            )
        )
    return labels


def bounding_circle() -> Circle:
    return Circle(cx=CENTER_X, cy=CENTER_Y, r=FACE_RADIUS, stroke="black", fill="none")


def center_dot() -> Circle:
    return Circle(cx=CENTER_X, cy=CENTER_Y, r=CENTER_DOT_RADIUS, fill="black", stroke_width=0)


@lru_cache(maxsize=1)
def face_decoration() -> Tuple[Primitive, ...]:
    """The time-independent part of the face: rim, hour ticks, numerals, minute ticks."""
    return (bounding_circle(), *major_ticks(), *numerals(), *minor_ticks())


def hand(spec: HandSpec) -> Line:
    """Line from the face center to the hand tip."""
    x2, y2 = polar(spec.angle, spec.length)
    return Line(
        x1=CENTER_X,
        y1=CENTER_Y,
        x2=x2,
        y2=y2,
        stroke=spec.color.value,
        stroke_width=spec.thickness,
    )


def hand_specs(t: TimeLike) -> List[HandSpec]:
    """Hour, minute and second hand specs for `t`."""
    angles = hand_angles(t)
    return [
        HandSpec(angles.hour, *HOUR_HAND),
        HandSpec(angles.minute, *MINUTE_HAND),
        HandSpec(angles.second, *SECOND_HAND),
    ]


def compose_frame(t: TimeLike) -> List[Primitive]:
    """
    Full scene for `t`.

    Args:
        t: Sampled time (anything with hour, minute and second)

    Returns:
        Primitives in draw order
    """
    frame: List[Primitive] = list(face_decoration())
    frame.extend(hand(spec) for spec in hand_specs(t))
    frame.append(center_dot())
    return frame
