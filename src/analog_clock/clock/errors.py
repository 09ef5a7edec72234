"""Clock exceptions."""


class ClockError(Exception):
    """Base class for clock errors."""


class TimerUnavailableError(ClockError):
    """The host cannot schedule the refresh timer."""


class SinkUnavailableError(ClockError):
    """The render sink cannot accept a frame right now."""
