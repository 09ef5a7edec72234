"""Periodic refresh of the clock face."""

import threading
import time
from datetime import datetime
from enum import Enum
from functools import partial
from typing import Any, Callable, Optional, Protocol

from analog_clock.clock.angles import TimeLike
from analog_clock.clock.errors import SinkUnavailableError, TimerUnavailableError
from analog_clock.clock.geometry import REFRESH_PERIOD_MS
from analog_clock.clock.scene import compose_frame
from analog_clock.clock.sinks import RenderSink
from analog_clock.logging.config import get_logger

logger = get_logger(__name__)


class Timer(Protocol):
    """Host scheduling primitive."""

    def schedule(self, callback: Callable[[], None], period_ms: float) -> Any:
        ...

    def cancel(self, handle: Any) -> None:
        ...


class _IntervalHandle:
    def __init__(self, thread: threading.Thread, stop_event: threading.Event):
        self.thread = thread
        self.stop_event = stop_event


class IntervalTimer:
    """
    Runs a callback on a background thread at a fixed period.

    Each scheduled callback gets its own daemon thread, so callbacks of one
    handle never overlap. Late ticks are skipped, not queued.
    """

    def __init__(self, join_timeout: float = 1.0):
        self.join_timeout = join_timeout

    def schedule(self, callback: Callable[[], None], period_ms: float) -> _IntervalHandle:
        if period_ms <= 0:
            raise ValueError(f"Period must be positive, got {period_ms}")

        stop_event = threading.Event()
        thread = threading.Thread(
            target=self._run,
            args=(callback, period_ms / 1000, stop_event),
            name="clock-refresh",
            daemon=True,
        )
        try:
            thread.start()
        except RuntimeError as e:
            raise TimerUnavailableError(f"Cannot start timer thread: {e}") from e
        return _IntervalHandle(thread, stop_event)

    def cancel(self, handle: _IntervalHandle) -> None:
        handle.stop_event.set()
        if handle.thread is not threading.current_thread():
            handle.thread.join(timeout=self.join_timeout)

    @staticmethod
    def _run(callback: Callable[[], None], period: float, stop_event: threading.Event) -> None:
        deadline = time.monotonic() + period
        while not stop_event.wait(max(0.0, deadline - time.monotonic())):
            try:
                callback()
            except Exception as e:
                logger.error(f"Error in timer callback: {e}", exc_info=True)
            deadline += period
            now = time.monotonic()
            if deadline < now:
                # Fell behind: drop the missed ticks
                deadline = now + period


class SchedulerState(Enum):
    IDLE = "idle"
    RUNNING = "running"


class RefreshScheduler:
    """
    Re-samples the clock on a fixed period and hands each frame to a sink.

    `start()` attaches (Idle -> Running) and `stop()` detaches
    (Running -> Idle). Once `stop()` returns, nothing more reaches the sink,
    even if a canceled timer still delivers a stale callback.
    """

    def __init__(
        self,
        sink: Optional[RenderSink] = None,
        timer: Optional[Timer] = None,
        clock: Callable[[], TimeLike] = datetime.now,
        period_ms: float = REFRESH_PERIOD_MS,
    ):
        """
        Initialize scheduler.

        Args:
            sink: Where frames are rendered; None means no display attached
            timer: Scheduling primitive (defaults to IntervalTimer)
            clock: Source of the current time
            period_ms: Refresh period in milliseconds
        """
        self.sink = sink
        self.timer = timer or IntervalTimer()
        self.clock = clock
        self.period_ms = period_ms

        self._lock = threading.RLock()
        self._state = SchedulerState.IDLE
        self._handle: Any = None
        self._generation = 0

    @property
    def state(self) -> SchedulerState:
        return self._state

    @property
    def is_running(self) -> bool:
        return self._state is SchedulerState.RUNNING

    def start(self) -> bool:
        """
        Start refreshing.

        Returns:
            True if the scheduler is running afterwards
        """
        with self._lock:
            if self._state is SchedulerState.RUNNING:
                return True

            if self.sink is None:
                logger.warning("No render sink attached, clock not started")
                return False

            self._generation += 1
            callback = partial(self._tick, self._generation)
            try:
                self._handle = self.timer.schedule(callback, self.period_ms)
            except TimerUnavailableError as e:
                logger.warning(f"Refresh timer unavailable, clock not started: {e}")
                return False

            self._state = SchedulerState.RUNNING
            logger.info(f"Clock refresh started ({self.period_ms:.1f} ms period)")

            self._refresh()
            return True

    def stop(self) -> None:
        """Stop refreshing. No-op when idle."""
        with self._lock:
            if self._state is SchedulerState.IDLE:
                return

            handle = self._handle
            self._handle = None
            self._state = SchedulerState.IDLE
            # Invalidates callbacks already handed to the timer
            self._generation += 1

        # Outside the lock: the timer thread may be waiting on it
        self.timer.cancel(handle)
        logger.info("Clock refresh stopped")

    def _refresh(self) -> None:
        """Sample the clock and render one frame."""
        sink = self.sink
        if sink is None:
            logger.debug("Render sink unavailable, frame dropped")
            return

        try:
            sink.render(compose_frame(self.clock()))
        except SinkUnavailableError as e:
            logger.debug(f"Frame dropped: {e}")
        except Exception as e:
            logger.error(f"Error rendering clock frame: {e}", exc_info=True)

    def _tick(self, generation: int) -> None:
        with self._lock:
            if self._state is not SchedulerState.RUNNING or generation != self._generation:
                return
            self._refresh()
