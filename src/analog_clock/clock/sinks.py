"""Render sinks: where composed frames end up."""

import threading
from pathlib import Path
from typing import Optional, Protocol, Sequence

from analog_clock.clock.errors import SinkUnavailableError
from analog_clock.clock.primitives import Primitive
from analog_clock.clock.renderer import SvgRenderer


class RenderSink(Protocol):
    """Anything that can display a list of primitives."""

    def render(self, primitives: Sequence[Primitive]) -> None:
        ...


class SvgFileSink:
    """Writes each frame to an SVG file, replacing the previous one atomically."""

    def __init__(self, output_path: Path, renderer: Optional[SvgRenderer] = None):
        self.output_path = output_path
        self.renderer = renderer or SvgRenderer()

    def render(self, primitives: Sequence[Primitive]) -> None:
        svg_content = self.renderer.render(primitives)

        temp_path = self.output_path.with_suffix(".tmp")
        try:
            with open(temp_path, "w", encoding="utf-8") as f:
                f.write(svg_content)
            temp_path.replace(self.output_path)
        except OSError as e:
            raise SinkUnavailableError(f"Cannot write {self.output_path}: {e}") from e


class LatestFrameSink:
    """Keeps the most recent frame as an SVG string for the web view."""

    def __init__(self, renderer: Optional[SvgRenderer] = None):
        self.renderer = renderer or SvgRenderer()
        self._lock = threading.Lock()
        self._svg: Optional[str] = None

    def render(self, primitives: Sequence[Primitive]) -> None:
        svg_content = self.renderer.render(primitives)
        with self._lock:
            self._svg = svg_content

    def latest(self) -> Optional[str]:
        """Last rendered SVG, or None before the first frame."""
        with self._lock:
            return self._svg
