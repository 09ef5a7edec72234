import logging

import pytest

from analog_clock.config.settings import Settings, get_settings


@pytest.fixture
def test_settings(tmp_path):
    """Settings pointing all output into a temporary directory."""
    return Settings(
        svg_output_path=tmp_path / "cache" / "clock.svg",
        log_file=tmp_path / "logs" / "test.log",
    )


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    """Keep tests away from real config files and the cached settings."""
    monkeypatch.chdir(tmp_path)
    for name in ("CLOCK_LOG_FILE", "CLOCK_DEBUG", "CLOCK_LOG_LEVEL", "CLOCK_DISPLAY_WIDTH"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("CLOCK_SVG_OUTPUT_PATH", str(tmp_path / "clock.svg"))
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def reset_logging():
    """Undo configure_logging so caplog sees package records."""
    yield
    logger = logging.getLogger("analog_clock")
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
