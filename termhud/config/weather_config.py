"""Weather location and polling configuration."""
from dataclasses import dataclass

DEFAULT_LATITUDE = 4.61
DEFAULT_LONGITUDE = -74.08


@dataclass
class WeatherConfig:
    """Where to ask for weather and how often."""
    latitude: float = DEFAULT_LATITUDE
    longitude: float = DEFAULT_LONGITUDE
    timeout: float = 10.0
    poll_interval: float = 60.0

    def __post_init__(self):
        """Fix invalid values."""
        if not -90.0 <= self.latitude <= 90.0:
            self.latitude = DEFAULT_LATITUDE
        if not -180.0 <= self.longitude <= 180.0:
            self.longitude = DEFAULT_LONGITUDE
        if self.timeout <= 0:
            self.timeout = 10.0
        if self.poll_interval <= 0:
            self.poll_interval = 60.0
