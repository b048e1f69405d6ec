"""Tests for background collector threads."""
import threading

from termhud.collectors.weather_collector import WeatherCollector
from termhud.collectors.weather_models import Weather
from termhud.config.config import Config
from termhud.core.data_manager import DataCollectionManager
from termhud.core.shared_data import SharedDataStore


class RecordingCollector:
    """Publishes one reading, then waits until told to stop."""

    def __init__(self):
        self.published = threading.Event()
        self.stopped = threading.Event()

    def collect_loop(self, shared_data, running):
        shared_data.update_weather(Weather.from_temperature(25.0))
        self.published.set()
        while running.is_set():
            self.stopped.wait(0.01)

    def stop(self):
        self.stopped.set()


class TestDataCollectionManager:

    def test_default_collectors(self):
        manager = DataCollectionManager(Config())
        assert len(manager.collectors) == 1
        assert isinstance(manager.collectors[0], WeatherCollector)

    def test_start_and_stop(self):
        collector = RecordingCollector()
        manager = DataCollectionManager(Config(), collectors=[collector])

        manager.start_collection()
        assert collector.published.wait(2)
        assert manager.get_shared_data().get_weather().temp == 25.0
        threads = list(manager.threads)

        manager.stop_collection()

        assert collector.stopped.is_set()
        assert not manager.running.is_set()
        assert all(not t.is_alive() for t in threads)


class TestSharedDataStore:

    def test_starts_with_placeholder(self):
        store = SharedDataStore()
        assert store.get_weather() == Weather.initial()
        assert (store.weather_failures, store.weather_updates) == (0, 0)

    def test_concurrent_writers(self):
        store = SharedDataStore()

        def fail_many():
            for _ in range(500):
                store.record_weather_failure()

        threads = [threading.Thread(target=fail_many) for _ in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert store.weather_failures == 2000
