"""Data collection management for background collectors."""
import logging
import threading

from ..collectors.weather_collector import WeatherCollector
from ..config.config import Config
from .shared_data import SharedDataStore

logger = logging.getLogger(__name__)


class DataCollectionManager:
    """Runs background collectors on daemon threads."""

    def __init__(self, config: Config, collectors=None):
        """Initialize collection manager with collectors."""
        self.config = config
        self.threads = []
        self.running = threading.Event()
        self.shared_data = SharedDataStore()

        if collectors is None:
            collectors = [WeatherCollector(config.weather)]
        self.collectors = list(collectors)

    def start_collection(self):
        """Start all data collection threads."""
        self.running.set()

        for collector in self.collectors:
            thread = threading.Thread(
                target=collector.collect_loop,
                args=(self.shared_data, self.running),
                name=type(collector).__name__,
                daemon=True
            )
            thread.start()
            self.threads.append(thread)
        logger.debug("Started %d collector thread(s)", len(self.threads))

    def stop_collection(self):
        """Stop all data collection threads."""
        self.running.clear()
        for collector in self.collectors:
            collector.stop()

        # A fetch in flight may outlive the join; the threads are daemons
        for thread in self.threads:
            if thread.is_alive():
                thread.join(timeout=1)
        self.threads = []

    def get_shared_data(self) -> SharedDataStore:
        """Get the shared data store for reading."""
        return self.shared_data
