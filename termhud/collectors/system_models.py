"""System data models for system collector."""
from dataclasses import dataclass

DISK_PLACEHOLDER_PERCENT = 30.0


@dataclass(frozen=True)
class SystemMetrics:
    cpu_usage: float
    mem_usage: float
    disk_usage: float = DISK_PLACEHOLDER_PERCENT

    @classmethod
    def empty(cls) -> "SystemMetrics":
        """Metrics shown before the first sample or when sampling fails."""
        return cls(cpu_usage=0.0, mem_usage=0.0)
