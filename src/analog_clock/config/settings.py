"""Settings and configuration management using Pydantic."""

import os
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Literal, Optional, Tuple, Type

import yaml
from pydantic import Field, field_validator
from pydantic.fields import FieldInfo
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

from analog_clock.logging.config import get_logger

logger = get_logger(__name__)

CONFIG_FILE = Path("config.yaml")


class YamlConfigSettingsSource(PydanticBaseSettingsSource):
    """
    Settings source that loads values from ``config.yaml`` in the
    current working directory.
    """

    def _load(self) -> Dict[str, Any]:
        if not CONFIG_FILE.exists():
            return {}

        encoding = self.config.get("env_file_encoding")
        try:
            content = yaml.safe_load(CONFIG_FILE.read_text(encoding))
        except (OSError, yaml.YAMLError) as e:
            logger.warning(f"Failed to load {CONFIG_FILE}: {e}")
            return {}

        if not isinstance(content, dict):
            return {}
        return content

    def get_field_value(
        self, field: FieldInfo, field_name: str
    ) -> Tuple[Any, str, bool]:
        return self._load().get(field_name), field_name, False

    def __call__(self) -> Dict[str, Any]:
        fields = self.settings_cls.model_fields
        return {key: value for key, value in self._load().items() if key in fields}


class Settings(BaseSettings):
    """Analog Clock configuration settings."""

    model_config = SettingsConfigDict(
        env_prefix="CLOCK_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: Type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> Tuple[PydanticBaseSettingsSource, ...]:
        # First source wins: env overrides config.yaml
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            YamlConfigSettingsSource(settings_cls),
            file_secret_settings,
        )

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level",
    )
    log_file: Optional[Path] = Field(
        default=None,
        description="Log file path (console only when unset)",
    )

    # Clock output
    svg_output_path: Path = Field(
        default=Path("/tmp/analog_clock.svg"),
        description="Path the clock daemon writes the SVG frame to",
    )
    display_width: int = Field(
        default=200,
        ge=1,
        description="Rendered SVG width and height in pixels",
    )

    # Web view
    web_host: str = Field(
        default="127.0.0.1",
        description="Host for the web clock view",
    )
    web_port: int = Field(
        default=8080,
        ge=1024,
        le=65535,
        description="Port for the web clock view",
    )
    web_poll_interval_ms: int = Field(
        default=1000,
        ge=33,
        description="How often the browser fetches a fresh frame",
    )

    # Development
    debug: bool = Field(
        default=False,
        description="Enable debug mode",
    )

    @field_validator("log_file", "svg_output_path", mode="before")
    @classmethod
    def expand_path(cls, v: Any) -> Any:
        """Expand environment variables and user paths."""
        if isinstance(v, str):
            v = Path(os.path.expandvars(os.path.expanduser(v)))
        return v

    def ensure_directories(self) -> None:
        """Ensure required directories exist."""
        if self.log_file:
            self.log_file.parent.mkdir(parents=True, exist_ok=True)

        self.svg_output_path.parent.mkdir(parents=True, exist_ok=True)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
