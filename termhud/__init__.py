"""termhud - clock, weather and system metrics overlay for the terminal."""

__version__ = "0.1.0"
