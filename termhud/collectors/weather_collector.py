"""Weather client and background collector for the Open-Meteo API."""
import logging
import threading
from typing import Optional

import requests

from ..config.weather_config import WeatherConfig
from ..core.shared_data import SharedDataStore
from ..errors import WeatherError, WeatherFetchError, WeatherParseError
from .weather_models import Weather, WeatherApiResponse

logger = logging.getLogger(__name__)

FORECAST_URL = "https://api.open-meteo.com/v1/forecast"


class WeatherClient:
    """Fetches the current temperature for a fixed location."""

    def __init__(self, config: WeatherConfig, session: Optional[requests.Session] = None):
        """Initialize the client; a session is created when none is given."""
        self.config = config
        self.session = session or requests.Session()

    @property
    def params(self) -> dict:
        return {
            "latitude": self.config.latitude,
            "longitude": self.config.longitude,
            "current_weather": "true",
        }

    def fetch(self) -> Weather:
        """Perform one GET and return the parsed reading.

        Raises:
            WeatherFetchError: network error, timeout or bad HTTP status.
            WeatherParseError: body is not JSON or lacks the temperature.
        """
        try:
            resp = self.session.get(FORECAST_URL, params=self.params, timeout=self.config.timeout)
            resp.raise_for_status()
        except requests.RequestException as e:
            raise WeatherFetchError(f"Weather request failed: {e}") from e

        try:
            data = resp.json()
        except ValueError as e:
            raise WeatherParseError(f"Weather response is not JSON: {e}") from e

        parsed = WeatherApiResponse.from_json(data)
        return Weather.from_temperature(parsed.temperature)

    def close(self):
        self.session.close()


class WeatherCollector:
    """Polls the weather API off the render thread.

    The latest good reading is published to the shared store; failures keep
    the previous reading on screen.
    """

    def __init__(self, config: WeatherConfig, client: Optional[WeatherClient] = None):
        """Initialize the weather collector."""
        self.config = config
        self.client = client or WeatherClient(config)
        self._wakeup = threading.Event()

    def collect_loop(self, shared_data: SharedDataStore, running: threading.Event):
        """Main collection loop: fetch now, then every poll interval."""
        while running.is_set():
            self._do_collection(shared_data)
            # Woken early by stop() so shutdown is not held up by the interval
            self._wakeup.wait(self.config.poll_interval)
            self._wakeup.clear()
        self.client.close()

    def stop(self):
        """Interrupt the wait between polls."""
        self._wakeup.set()

    def _do_collection(self, shared_data: SharedDataStore):
        """Perform one collection cycle."""
        try:
            weather = self.client.fetch()
        except WeatherError as e:
            failures = shared_data.record_weather_failure()
            logger.warning("Weather update failed (%d in a row): %s", failures, e)
            return

        shared_data.update_weather(weather)
        logger.debug("Weather updated: %.1f°C", weather.temp)
