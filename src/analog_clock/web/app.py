"""Web Application serving the live clock face."""

from typing import Optional

from fasthtml.common import *

from analog_clock.clock.renderer import SvgRenderer
from analog_clock.clock.scheduler import RefreshScheduler, Timer
from analog_clock.clock.sinks import LatestFrameSink
from analog_clock.config import Settings, get_settings
from analog_clock.logging.config import get_logger
from analog_clock.web.components.clock import ClockView

logger = get_logger(__name__)


def create_app(settings: Optional[Settings] = None, timer: Optional[Timer] = None):
    """
    Build the FastHTML app.

    The refresh scheduler is attached when the app starts up and detached
    when it shuts down.

    Args:
        settings: Settings to use (defaults to the cached settings)
        timer: Scheduling primitive passed to the scheduler

    Returns:
        FastHTML application
    """
    settings = settings or get_settings()
    frames = LatestFrameSink(SvgRenderer(width=settings.display_width))
    scheduler = RefreshScheduler(sink=frames, timer=timer)

    def attach():
        if not scheduler.start():
            logger.warning("Clock view is up but not refreshing")

    app, rt = fast_app(
        on_startup=[attach],
        on_shutdown=[scheduler.stop],
        hdrs=(
            Meta(charset="UTF-8"),
            Meta(name="viewport", content="width=device-width, initial-scale=1.0"),
            Style("""
                body {
                    margin: 0;
                    min-height: 100vh;
                    display: flex;
                    align-items: center;
                    justify-content: center;
                }
                #clock-face svg {
                    width: min(400px, 100%);
                    height: auto;
                }
            """),
        ),
    )

    @rt("/")
    def get():
        """Page with the clock face."""
        return Title("Analog Clock"), ClockView(frames.latest(), settings.web_poll_interval_ms)

    @rt("/clock/frame")
    def frame():
        """Latest frame for htmx polling."""
        return NotStr(frames.latest() or "")

    app.state.scheduler = scheduler
    app.state.frames = frames
    return app
