"""Application configuration loaded from an optional YAML file.

Example config.yaml:

    settings_dir: ~/.config/weather-cli
    timeout: 5
    geocoding_limit: 5
"""
from pathlib import Path
from typing import Optional, Union

import click
import yaml
from pydantic import BaseModel, Field, ValidationError

from .errors import ConfigError
from .program_info import PROGRAM_NAME


class AppConfig(BaseModel):
    """Endpoints, HTTP timeout and where the settings files live."""
    settings_dir: Optional[Path] = None
    weather_url: str = "https://api.openweathermap.org/data/2.5/weather"
    geocoding_url: str = "http://api.openweathermap.org/geo/1.0/direct"
    geocoding_limit: int = Field(default=10, ge=1, le=10)
    timeout: float = Field(default=10.0, gt=0)

    def resolved_settings_dir(self) -> Path:
        """Directory holding the JSON settings files.

        Returns:
            The configured directory, or the platform app dir for weather-cli
        """
        if self.settings_dir is not None:
            return self.settings_dir.expanduser()
        return Path(click.get_app_dir(PROGRAM_NAME))


def load_config(path: Optional[Union[str, Path]] = None) -> AppConfig:
    """Load an AppConfig from a YAML file.

    Args:
        path: YAML file path; None yields the defaults

    Returns:
        The parsed configuration

    Raises:
        ConfigError: If the file is unreadable or its content is invalid
    """
    if path is None:
        return AppConfig()

    try:
        cfg = yaml.safe_load(Path(path).read_text(encoding="utf-8"))
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"Failed to read the config file {path}: {e}") from e

    if cfg is None:
        return AppConfig()
    if not isinstance(cfg, dict):
        raise ConfigError(f"The config file {path} must contain a mapping.")

    try:
        return AppConfig(**cfg)
    except ValidationError as e:
        raise ConfigError(f"Invalid config file {path}: {e}") from e
