"""Main configuration data structure."""
from dataclasses import dataclass, field
from .weather_config import WeatherConfig
from .logging_config import LoggingConfig


@dataclass
class Config:
    """Main configuration class."""
    weather: WeatherConfig = field(default_factory=WeatherConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
