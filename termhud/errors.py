"""Exception hierarchy for termhud."""


class TermHudError(Exception):
    """Base exception for all termhud errors."""


class ConfigError(TermHudError):
    """Configuration file could not be read or is malformed."""


class WeatherError(TermHudError):
    """Weather reading could not be obtained.

    The render loop never sees these; the weather collector logs them and
    keeps showing the last good reading.
    """


class WeatherFetchError(WeatherError):
    """Network failure, timeout or non-2xx response from the weather API."""


class WeatherParseError(WeatherError):
    """Weather API body was not JSON or did not have the expected shape."""


class TerminalError(TermHudError):
    """Terminal mode could not be set up or restored."""
