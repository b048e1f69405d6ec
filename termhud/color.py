"""Hue cycling for the clock colour."""
from typing import Tuple

HUE_STEP = 0.3
HUE_PERIOD_TICKS = 1200  # 360 / HUE_STEP
CLOCK_SATURATION = 0.8
CLOCK_LIGHTNESS = 0.6


def _channel(value: float) -> int:
    return max(0, min(255, int(value * 255.0)))


def hsl_to_rgb(h: float, s: float, l: float) -> Tuple[int, int, int]:
    """Convert HSL (h in degrees, s and l in 0..1) to an 8-bit RGB triple.

    Channels are truncated, not rounded.
    """
    c = (1.0 - abs(2.0 * l - 1.0)) * s
    x = c * (1.0 - abs((h / 60.0) % 2.0 - 1.0))
    m = l - c / 2.0

    if h < 60.0:
        r, g, b = c, x, 0.0
    elif h < 120.0:
        r, g, b = x, c, 0.0
    elif h < 180.0:
        r, g, b = 0.0, c, x
    elif h < 240.0:
        r, g, b = 0.0, x, c
    elif h < 300.0:
        r, g, b = x, 0.0, c
    else:
        r, g, b = c, 0.0, x

    return _channel(r + m), _channel(g + m), _channel(b + m)


def hue_for_tick(tick: int) -> float:
    """Hue after `tick` steps; exact at every multiple of the period."""
    return (tick % HUE_PERIOD_TICKS) * HUE_STEP


def clock_color(hue: float) -> Tuple[int, int, int]:
    """RGB colour of the clock text for the given hue."""
    return hsl_to_rgb(hue, CLOCK_SATURATION, CLOCK_LIGHTNESS)
