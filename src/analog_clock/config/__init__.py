"""Configuration for Analog Clock."""

from analog_clock.config.settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
