"""Immutable per-tick snapshot of everything on screen."""
from dataclasses import dataclass, field
from datetime import datetime
from typing import Tuple

from ..collectors.system_models import SystemMetrics
from ..collectors.weather_models import Weather
from ..color import clock_color, hue_for_tick


@dataclass(frozen=True)
class Frame:
    """One rendered snapshot. Each tick produces a new Frame from the last."""
    tick: int = 0
    now: datetime = field(default_factory=datetime.now)
    metrics: SystemMetrics = field(default_factory=SystemMetrics.empty)
    weather: Weather = field(default_factory=Weather.initial)

    @classmethod
    def initial(cls) -> "Frame":
        return cls()

    @property
    def hue(self) -> float:
        return hue_for_tick(self.tick)

    @property
    def color(self) -> Tuple[int, int, int]:
        return clock_color(self.hue)

    def advance(self, now: datetime, metrics: SystemMetrics, weather: Weather) -> "Frame":
        """Next frame: hue moves one step, the rest is replaced by fresh samples."""
        return Frame(tick=self.tick + 1, now=now, metrics=metrics, weather=weather)
