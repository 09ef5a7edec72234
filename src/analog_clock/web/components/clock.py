"""Clock component for Web App."""

from typing import Optional

from fasthtml.common import *


def ClockView(svg: Optional[str], poll_ms: int = 1000):
    """
    Container holding the clock SVG, refreshed by htmx polling.

    Args:
        svg: Latest rendered frame, or None before the first one
        poll_ms: Polling interval in milliseconds
    """
    return Div(
        NotStr(svg or ""),
        id="clock-face",
        style="display: flex; align-items: center; justify-content: center;",
        hx_get="/clock/frame",
        hx_trigger=f"every {poll_ms}ms",
        hx_swap="innerHTML",
    )
