"""SVG Clock Renderer."""

from typing import Iterable
from xml.sax.saxutils import escape

from analog_clock.clock.geometry import VIEWBOX_SIZE
from analog_clock.clock.primitives import Circle, Line, Primitive, Text


def _num(value: float) -> str:
    """Compact number for SVG attributes: 50, 47.5, 0.5."""
    return f"{value:g}"


class SvgRenderer:
    """Renders clock primitives as an SVG document."""

    def __init__(self, width: int = 200):
        """
        Initialize renderer.

        Args:
            width: Displayed width and height of the SVG in pixels
        """
        self.width = width

    def render(self, primitives: Iterable[Primitive]) -> str:
        """
        Render primitives, in order, as an SVG string.

        Args:
            primitives: Drawing primitives in the 100x100 face space

        Returns:
            SVG string
        """
        elements = "\n".join(f"    {self._element(p)}" for p in primitives)
        return (
            f'<svg xmlns="http://www.w3.org/2000/svg" '
            f'viewBox="0 0 {VIEWBOX_SIZE} {VIEWBOX_SIZE}" '
            f'width="{self.width}" height="{self.width}">\n'
            f"{elements}\n"
            f"</svg>\n"
        )

    def _element(self, primitive: Primitive) -> str:
        if isinstance(primitive, Circle):
            return self._circle(primitive)
        if isinstance(primitive, Line):
            return self._line(primitive)
        if isinstance(primitive, Text):
            return self._text(primitive)
        raise TypeError(f"Unsupported primitive: {type(primitive).__name__}")

    def _circle(self, c: Circle) -> str:
        return (
            f'<circle cx="{_num(c.cx)}" cy="{_num(c.cy)}" r="{_num(c.r)}" '
            f'fill="{c.fill}" stroke="{c.stroke}" stroke-width="{_num(c.stroke_width)}" />'
        )

    def _line(self, line: Line) -> str:
        return (
            f'<line x1="{_num(line.x1)}" y1="{_num(line.y1)}" '
            f'x2="{_num(line.x2)}" y2="{_num(line.y2)}" '
            f'stroke="{line.stroke}" stroke-width="{_num(line.stroke_width)}" />'
        )

    def _text(self, text: Text) -> str:
        return (
            f'<text x="{_num(text.x)}" y="{_num(text.y)}" text-anchor="{text.anchor}" '
            f'dominant-baseline="{text.baseline}" font-size="{_num(text.font_size)}">'
            f"{escape(text.content)}</text>"
        )
