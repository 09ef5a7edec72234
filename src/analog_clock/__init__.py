"""Analog Clock - live SVG analog clock face."""

__version__ = "0.1.0"
