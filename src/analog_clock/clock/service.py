"""Clock Service daemon."""

import threading
from datetime import datetime
from typing import Optional

from analog_clock.clock.renderer import SvgRenderer
from analog_clock.clock.scene import compose_frame
from analog_clock.clock.scheduler import RefreshScheduler, Timer
from analog_clock.clock.sinks import SvgFileSink
from analog_clock.config import Settings, get_settings
from analog_clock.logging.config import get_logger

logger = get_logger(__name__)


class ClockService:
    """Service that keeps an SVG file of the clock face up to date."""

    def __init__(self, settings: Optional[Settings] = None, timer: Optional[Timer] = None):
        """
        Initialize clock service.

        Args:
            settings: Settings to use (defaults to the cached settings)
            timer: Scheduling primitive passed to the scheduler
        """
        self.settings = settings or get_settings()
        self.output_path = self.settings.svg_output_path
        self.sink = SvgFileSink(
            self.output_path, SvgRenderer(width=self.settings.display_width)
        )
        self.scheduler = RefreshScheduler(sink=self.sink, timer=timer)

    def run_daemon(self, stop_event: Optional[threading.Event] = None) -> None:
        """
        Run the clock service until `stop_event` is set or interrupted.

        Args:
            stop_event: Event that ends the loop when set
        """
        stop_event = stop_event or threading.Event()
        self.output_path.parent.mkdir(parents=True, exist_ok=True)

        if not self.scheduler.start():
            logger.error("Clock service could not start")
            return

        logger.info(f"Clock service started, outputting to {self.output_path}")
        try:
            while not stop_event.wait(1.0):
                pass
        except KeyboardInterrupt:
            logger.info("Clock service interrupted")
        finally:
            self.scheduler.stop()
            logger.info("Clock service stopped")

    def update_clock(self) -> None:
        """Render the current time once to the output file."""
        self.sink.render(compose_frame(datetime.now()))
