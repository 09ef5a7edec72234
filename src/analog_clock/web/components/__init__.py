"""Web components."""

from analog_clock.web.components.clock import ClockView

__all__ = ["ClockView"]
