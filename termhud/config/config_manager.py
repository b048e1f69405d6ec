"""Configuration loading and management."""
from importlib import resources
from typing import Optional

import yaml

from ..errors import ConfigError
from .config import Config
from .logging_config import LoggingConfig
from .weather_config import WeatherConfig

DEFAULT_CONFIG_NAME = "default_config.yaml"


class ConfigManager:
    """Configuration loading and management."""

    @staticmethod
    def load_config(config_path: Optional[str] = None) -> Config:
        """Load configuration from a YAML file, or the packaged default.

        Raises:
            ConfigError: the file cannot be read, is not valid YAML, or has
                unknown keys.
        """
        try:
            if config_path is None:
                text = resources.files(__package__).joinpath(DEFAULT_CONFIG_NAME).read_text(encoding="utf-8")
            else:
                with open(config_path, "r", encoding="utf-8") as f:
                    text = f.read()
            config_data = yaml.safe_load(text) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(f"Cannot load config {config_path or DEFAULT_CONFIG_NAME}: {e}") from e

        return ConfigManager.from_dict(config_data)

    @staticmethod
    def from_dict(config_data: dict) -> Config:
        """Build a Config from parsed YAML; missing sections use defaults."""
        if not isinstance(config_data, dict):
            raise ConfigError("Config root must be a mapping")

        try:
            weather = WeatherConfig(**(config_data.get("weather") or {}))
            logging_config = LoggingConfig(**(config_data.get("logging") or {}))
        except TypeError as e:
            # unknown key or non-mapping section
            raise ConfigError(f"Invalid config: {e}") from e

        return Config(weather=weather, logging=logging_config)
