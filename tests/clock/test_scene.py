"""Tests for clock scene composition."""

from datetime import datetime, time

import pytest

from analog_clock.clock.geometry import CENTER_X, CENTER_Y, FACE_RADIUS, polar
from analog_clock.clock.primitives import Circle, Line, Text
from analog_clock.clock.scene import (
    HandColor,
    HandSpec,
    center_dot,
    compose_frame,
    face_decoration,
    hand,
    hand_specs,
    major_ticks,
    minor_ticks,
    numerals,
)


def test_polar_cardinal_points():
    assert polar(0, 40) == (50.0, 10.0)
    assert polar(90, 40) == (90.0, 50.0)
    assert polar(180, 40) == (50.0, 90.0)
    assert polar(270, 40) == (10.0, 50.0)


def test_major_ticks():
    ticks = major_ticks()
    assert len(ticks) == 12
    # 12 o'clock tick runs from the rim 5 units inward
    assert ticks[0] == Line(x1=50.0, y1=5.0, x2=50.0, y2=10.0, stroke="black", stroke_width=1.0)
    # 3 o'clock
    assert (ticks[3].x1, ticks[3].y1, ticks[3].x2, ticks[3].y2) == (95.0, 50.0, 90.0, 50.0)


def test_minor_ticks_skip_hour_positions():
    ticks = minor_ticks()
    assert len(ticks) == 48

    hour_starts = {(t.x1, t.y1) for t in major_ticks()}
    minor_starts = {(t.x1, t.y1) for t in ticks}
    assert not hour_starts & minor_starts


def test_minor_ticks_are_shorter_and_thinner():
    major = major_ticks()[0]
    minor = minor_ticks()[0]
    assert minor.stroke_width < major.stroke_width

    def length(line):
        return ((line.x2 - line.x1) ** 2 + (line.y2 - line.y1) ** 2) ** 0.5

    assert length(minor) == pytest.approx(2.0, abs=1e-3)
    assert length(major) == pytest.approx(5.0, abs=1e-3)


def test_numerals_labels():
    labels = numerals()
    assert len(labels) == 12
    assert [n.content for n in labels] == ["12"] + [str(i) for i in range(1, 12)]


def test_numerals_positions_are_upright():
    labels = numerals()
    assert (labels[0].x, labels[0].y) == (50.0, 15.0)
    assert (labels[6].x, labels[6].y) == (50.0, 85.0)
    assert all(n.anchor == "middle" and n.font_size == 10 for n in labels)


def test_hand_points_at_angle():
    line = hand(HandSpec(angle=90.0, color=HandColor.SECONDARY, thickness=1.0, length=40.0))
    assert (line.x1, line.y1) == (CENTER_X, CENTER_Y)
    assert (line.x2, line.y2) == (90.0, 50.0)
    assert line.stroke == "blue"
    assert line.stroke_width == 1.0


@pytest.mark.parametrize("thickness,length", [(0, 10), (-1, 10), (1, 0), (1, -5)])
def test_hand_spec_rejects_non_positive(thickness, length):
    with pytest.raises(ValueError):
        HandSpec(angle=0.0, color=HandColor.PRIMARY, thickness=thickness, length=length)


def test_hand_specs_styles():
    hour, minute, second = hand_specs(time(3, 0, 0))
    assert (hour.angle, hour.color, hour.thickness, hour.length) == (90.0, HandColor.PRIMARY, 2.0, 20.0)
    assert (minute.color, minute.thickness, minute.length) == (HandColor.SECONDARY, 1.0, 40.0)
    assert (second.color, second.thickness, second.length) == (HandColor.TERTIARY, 0.5, 40.0)


def test_face_decoration_is_memoized():
    assert face_decoration() is face_decoration()
    decoration = face_decoration()
    assert len(decoration) == 1 + 12 + 12 + 48
    assert decoration[0] == Circle(cx=50.0, cy=50.0, r=FACE_RADIUS, stroke="black", fill="none")


def test_compose_frame_order():
    frame = compose_frame(datetime(2024, 1, 1, 3, 0, 0))
    decoration = face_decoration()

    assert len(frame) == len(decoration) + 3 + 1
    assert tuple(frame[: len(decoration)]) == decoration

    hands = frame[len(decoration) : len(decoration) + 3]
    assert [h.stroke for h in hands] == ["red", "blue", "black"]
    assert frame[-1] == center_dot()


def test_compose_frame_hands_follow_time():
    frame = compose_frame(time(3, 0, 0))
    hour_hand, minute_hand, second_hand = frame[-4:-1]

    assert (hour_hand.x2, hour_hand.y2) == (70.0, 50.0)
    assert (minute_hand.x2, minute_hand.y2) == (50.0, 10.0)
    assert (second_hand.x2, second_hand.y2) == (50.0, 10.0)


def test_compose_frame_is_pure():
    t = datetime(2024, 1, 1, 18, 42, 7)
    assert compose_frame(t) == compose_frame(t)


def test_frame_primitive_types():
    frame = compose_frame(time(12, 0))
    assert sum(isinstance(p, Text) for p in frame) == 12
    assert sum(isinstance(p, Circle) for p in frame) == 2
    assert sum(isinstance(p, Line) for p in frame) == 12 + 48 + 3
