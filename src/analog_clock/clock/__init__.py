"""Analog clock face: time-to-angle conversion, scene composition and refresh."""

from analog_clock.clock.angles import HandAngles, hand_angles, hour_angle, minute_angle, second_angle
from analog_clock.clock.errors import ClockError, SinkUnavailableError, TimerUnavailableError
from analog_clock.clock.renderer import SvgRenderer
from analog_clock.clock.scene import HandColor, HandSpec, compose_frame, face_decoration
from analog_clock.clock.scheduler import IntervalTimer, RefreshScheduler, SchedulerState
from analog_clock.clock.sinks import LatestFrameSink, SvgFileSink

__all__ = [
    "ClockError",
    "HandAngles",
    "HandColor",
    "HandSpec",
    "IntervalTimer",
    "LatestFrameSink",
    "RefreshScheduler",
    "SchedulerState",
    "SinkUnavailableError",
    "SvgFileSink",
    "SvgRenderer",
    "TimerUnavailableError",
    "compose_frame",
    "face_decoration",
    "hand_angles",
    "hour_angle",
    "minute_angle",
    "second_angle",
]
