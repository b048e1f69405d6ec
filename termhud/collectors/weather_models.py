"""Weather data models and icon policy."""
from dataclasses import dataclass
from typing import Any

from ..errors import WeatherParseError

HOT_ICON = "🔥"
COLD_ICON = "❄️"
MILD_ICON = "🌤️"
PLACEHOLDER_ICON = "☀️"

HOT_ABOVE_C = 30.0
COLD_BELOW_C = 15.0


def icon_for_temperature(temp: float) -> str:
    """Pick the display glyph; both thresholds are exclusive."""
    if temp > HOT_ABOVE_C:
        return HOT_ICON
    if temp < COLD_BELOW_C:
        return COLD_ICON
    return MILD_ICON


@dataclass(frozen=True)
class Weather:
    """Current weather reading shown next to the clock."""
    icon: str
    temp: float  # degrees Celsius

    @classmethod
    def initial(cls) -> "Weather":
        """Reading shown until the first fetch succeeds."""
        return cls(icon=PLACEHOLDER_ICON, temp=0.0)

    @classmethod
    def from_temperature(cls, temp: float) -> "Weather":
        return cls(icon=icon_for_temperature(temp), temp=temp)


@dataclass(frozen=True)
class WeatherApiResponse:
    """The part of the forecast API body we read."""
    temperature: float

    @classmethod
    def from_json(cls, data: Any) -> "WeatherApiResponse":
        """Parse `{"current_weather": {"temperature": <number>}}`."""
        try:
            value = data["current_weather"]["temperature"]
        except (KeyError, TypeError) as e:
            raise WeatherParseError(f"Missing current_weather.temperature: {e!r}") from e

        # bool is an int subclass but never a valid temperature
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise WeatherParseError(f"Temperature is not a number: {value!r}")
        return cls(temperature=float(value))
