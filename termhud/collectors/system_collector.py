"""System metrics collector for CPU and memory."""
import logging

import psutil

from .system_models import SystemMetrics, DISK_PLACEHOLDER_PERCENT

logger = logging.getLogger(__name__)


class SystemCollector:
    """Samples instantaneous CPU and memory utilization via psutil.

    Disk usage is not measured; it is always the fixed placeholder.
    """

    def __init__(self):
        """Initialize the system collector and prime the CPU counter."""
        # First non-blocking call always reports 0.0; it only sets the baseline.
        self._cpu_percent()

    def collect(self) -> SystemMetrics:
        """Collect current system metrics. Never raises."""
        return SystemMetrics(
            cpu_usage=self._cpu_percent(),
            mem_usage=self._memory_percent(),
            disk_usage=DISK_PLACEHOLDER_PERCENT,
        )

    def _cpu_percent(self) -> float:
        """Global CPU busy percentage since the previous call."""
        try:
            return float(psutil.cpu_percent(interval=None))
        except (psutil.Error, OSError) as e:
            logger.warning("CPU sampling failed: %s", e)
            return 0.0

    def _memory_percent(self) -> float:
        """Used memory as a percentage of total memory."""
        try:
            memory = psutil.virtual_memory()
        except (psutil.Error, OSError) as e:
            logger.warning("Memory sampling failed: %s", e)
            return 0.0
        return memory_percent(memory.used, memory.total)


def memory_percent(used: int, total: int) -> float:
    """Return used / total * 100, clamped to [0, 100]; 0.0 when total is 0."""
    if total <= 0:
        return 0.0
    return max(0.0, min(100.0, used / total * 100.0))
