"""Shared fixtures for termhud tests."""
import io
import logging
from datetime import datetime
from unittest.mock import Mock

import pytest
from rich.console import Console

from termhud.collectors.system_models import SystemMetrics
from termhud.collectors.weather_models import Weather
from termhud.core.frame import Frame


class FakeKeyboard:
    """Stands in for KeyboardHandler: replays scripted keys, tracks raw mode."""

    def __init__(self, keys=None):
        self.keys = list(keys or [])
        self.raw = False
        self.enable_calls = 0
        self.restore_calls = 0

    def enable_raw_mode(self):
        self.enable_calls += 1
        self.raw = True

    def restore_terminal(self):
        self.restore_calls += 1
        self.raw = False

    def poll_key(self, timeout=0.0):
        return self.keys.pop(0) if self.keys else None


@pytest.fixture
def sample_now():
    # Monday
    return datetime(2024, 6, 3, 14, 5, 9)


@pytest.fixture
def sample_metrics():
    return SystemMetrics(cpu_usage=12.4, mem_usage=55.0)


@pytest.fixture
def sample_weather():
    return Weather.from_temperature(22.3)


@pytest.fixture
def sample_frame(sample_now, sample_metrics, sample_weather):
    return Frame(tick=0, now=sample_now, metrics=sample_metrics, weather=sample_weather)


@pytest.fixture
def console():
    """Plain console writing to memory, 80 columns, not a terminal."""
    return Console(file=io.StringIO(), width=80, force_terminal=False, _environ={"TERM": "xterm-256color"})


@pytest.fixture
def tty_console():
    """Console that believes it is a terminal, so control codes are emitted."""
    return Console(
        file=io.StringIO(),
        width=80,
        force_terminal=True,
        color_system="truecolor",
        _environ={"TERM": "xterm-256color"},
    )


@pytest.fixture
def keyboard():
    return FakeKeyboard()


@pytest.fixture
def system_collector(sample_metrics):
    collector = Mock()
    collector.collect.return_value = sample_metrics
    return collector


@pytest.fixture
def restore_root_logger():
    """Put the root logger back the way pytest had it."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    for handler in list(root.handlers):
        root.removeHandler(handler)
        if handler not in handlers:
            handler.close()
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)
