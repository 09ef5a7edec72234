import yaml
from pathlib import Path

import pytest
from pydantic import ValidationError

from analog_clock.config.settings import Settings, get_settings


def test_defaults(monkeypatch):
    """Defaults apply when nothing is configured."""
    monkeypatch.delenv("CLOCK_SVG_OUTPUT_PATH")
    settings = Settings()

    assert settings.log_level == "INFO"
    assert settings.log_file is None
    assert settings.svg_output_path == Path("/tmp/analog_clock.svg")
    assert settings.display_width == 200
    assert settings.web_port == 8080
    assert settings.web_poll_interval_ms == 1000


def test_yaml_config_loading(tmp_path):
    """Test that settings are loaded from config.yaml."""
    config_data = {
        "display_width": 400,
        "web_port": 9000,
    }
    (tmp_path / "config.yaml").write_text(yaml.dump(config_data))

    settings = Settings()

    assert settings.display_width == 400
    assert settings.web_port == 9000


def test_yaml_config_override_env(tmp_path, monkeypatch):
    """Env vars take precedence over config.yaml."""
    (tmp_path / "config.yaml").write_text(yaml.dump({"display_width": 400}))
    monkeypatch.setenv("CLOCK_DISPLAY_WIDTH", "300")

    settings = Settings()

    assert settings.display_width == 300


def test_malformed_yaml_is_ignored(tmp_path):
    """A broken config.yaml falls back to defaults."""
    (tmp_path / "config.yaml").write_text("display_width: [unclosed")

    settings = Settings()

    assert settings.display_width == 200


def test_unknown_yaml_keys_are_ignored(tmp_path):
    (tmp_path / "config.yaml").write_text(yaml.dump({"no_such_setting": 1}))

    settings = Settings()

    assert not hasattr(settings, "no_such_setting")


def test_port_validation():
    with pytest.raises(ValidationError):
        Settings(web_port=80)


def test_poll_interval_validation():
    with pytest.raises(ValidationError):
        Settings(web_poll_interval_ms=10)


def test_path_expansion(monkeypatch, tmp_path):
    monkeypatch.setenv("CLOCK_TEST_DIR", str(tmp_path))
    settings = Settings(svg_output_path="$CLOCK_TEST_DIR/out/clock.svg")

    assert settings.svg_output_path == tmp_path / "out" / "clock.svg"


def test_ensure_directories(test_settings):
    test_settings.ensure_directories()

    assert test_settings.svg_output_path.parent.is_dir()
    assert test_settings.log_file.parent.is_dir()


def test_get_settings_is_cached():
    assert get_settings() is get_settings()
