"""Drawing primitives handed to render sinks."""

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Circle:
    cx: float
    cy: float
    r: float
    stroke: str = "none"
    fill: str = "none"
    stroke_width: float = 1.0


@dataclass(frozen=True)
class Line:
    x1: float
    y1: float
    x2: float
    y2: float
    stroke: str = "black"
    stroke_width: float = 1.0


@dataclass(frozen=True)
class Text:
    x: float
    y: float
    content: str
    anchor: str = "middle"
    font_size: float = 10
    baseline: str = "central"


Primitive = Union[Circle, Line, Text]
