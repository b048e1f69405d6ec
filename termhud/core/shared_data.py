"""Shared data store for thread-safe data access."""

import threading
from typing import Optional

from ..collectors.weather_models import Weather


class SharedDataStore:
    """Single-slot cell holding the latest weather reading.

    Written by the weather collector thread, read by the render loop.
    """

    def __init__(self, weather: Optional[Weather] = None):
        """Initialize the shared data store with thread safety."""
        self._lock = threading.Lock()
        self.weather = weather or Weather.initial()
        self.weather_failures = 0
        self.weather_updates = 0

    def update_weather(self, weather: Weather):
        """Publish a fresh reading and reset the failure streak."""
        with self._lock:
            self.weather = weather
            self.weather_failures = 0
            self.weather_updates += 1

    def record_weather_failure(self) -> int:
        """Count a failed fetch; returns the current failure streak."""
        with self._lock:
            self.weather_failures += 1
            return self.weather_failures

    def get_weather(self) -> Weather:
        """Latest good reading (or the placeholder). Never blocks on I/O."""
        with self._lock:
            return self.weather
