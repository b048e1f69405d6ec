"""Fixed-position overlay rendering with 24-bit colour escape codes."""
from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional, Tuple

from rich.color import Color, ColorSystem
from rich.console import Console
from rich.control import Control
from rich.style import Style

from ..collectors.system_models import SystemMetrics
from ..collectors.weather_models import Weather
from ..core.frame import Frame

# DECSC / DECRC; rich has no control type for these
SAVE_CURSOR = "\x1b7"
RESTORE_CURSOR = "\x1b8"

TIME_OFFSET = 20
WEATHER_OFFSET = 10


@dataclass(frozen=True)
class Placement:
    """Text drawn at a screen cell, optionally in a foreground colour."""
    x: int
    y: int
    text: str
    color: Optional[Tuple[int, int, int]] = None


def format_time(now: datetime) -> str:
    return now.strftime("%H:%M:%S")


def format_date(now: datetime) -> str:
    return now.strftime("%a %d %b")


def format_weather(weather: Weather) -> str:
    return f"{weather.icon} {weather.temp:.1f}°C"


def format_metrics(metrics: SystemMetrics) -> str:
    return (
        f"CPU: {metrics.cpu_usage:>5.1f}% | "
        f"RAM: {metrics.mem_usage:>5.1f}% | "
        f"DISK: {metrics.disk_usage:>5.1f}%"
    )


def pad_to_width(text: str, width: int) -> str:
    """Right-pad with spaces so a shorter frame erases a longer one.

    Text already wider than `width` is returned unchanged.
    """
    return text.ljust(max(width, 0))


class Renderer:
    """Draws a Frame onto the top three rows of the console."""

    def __init__(self, console: Console):
        """Initialize the renderer."""
        self.console = console

    def layout(self, frame: Frame, width: int) -> List[Placement]:
        """Where each string goes for a terminal `width` columns wide."""
        time_col = max(0, width - TIME_OFFSET)
        weather_col = max(0, width - WEATHER_OFFSET)
        return [
            Placement(time_col, 0, format_time(frame.now), frame.color),
            Placement(weather_col, 0, format_weather(frame.weather)),
            Placement(time_col, 1, format_date(frame.now)),
            Placement(0, 2, pad_to_width(format_metrics(frame.metrics), width)),
        ]

    def compose(self, placements: List[Placement]) -> str:
        """Escape-coded string for the placements, cursor saved and restored."""
        parts = [SAVE_CURSOR]
        for placement in placements:
            parts.append(str(Control.move_to(placement.x, placement.y)))
            if placement.color is not None:
                style = Style(color=Color.from_rgb(*placement.color))
                parts.append(style.render(placement.text, color_system=ColorSystem.TRUECOLOR))
            else:
                parts.append(placement.text)
        parts.append(RESTORE_CURSOR)
        return "".join(parts)

    def render(self, frame: Frame, width: Optional[int] = None) -> str:
        """Write one frame with a single flush; write errors propagate."""
        if width is None:
            width = self.console.width
        output = self.compose(self.layout(frame, width))
        self.console.file.write(output)
        self.console.file.flush()
        return output
