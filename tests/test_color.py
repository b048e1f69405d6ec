"""Tests for the clock colour cycle."""
import colorsys

import pytest

from termhud.color import (
    HUE_PERIOD_TICKS,
    HUE_STEP,
    clock_color,
    hsl_to_rgb,
    hue_for_tick,
)


class TestHslToRgb:
    """Reference values for the HSL transform."""

    @pytest.mark.parametrize("hsl, expected", [
        ((0.0, 1.0, 0.5), (255, 0, 0)),
        ((60.0, 1.0, 0.5), (255, 255, 0)),
        ((120.0, 1.0, 0.5), (0, 255, 0)),
        ((240.0, 1.0, 0.5), (0, 0, 255)),
        ((0.0, 0.0, 1.0), (255, 255, 255)),
        ((0.0, 0.0, 0.0), (0, 0, 0)),
        ((200.0, 0.0, 0.5), (127, 127, 127)),
    ])
    def test_known_colors(self, hsl, expected):
        assert hsl_to_rgb(*hsl) == expected

    def test_clock_start_color(self):
        # 0.92 * 255 = 234.6 and 0.28 * 255 = 71.4, truncated
        assert hsl_to_rgb(0.0, 0.8, 0.6) == (234, 71, 71)
        assert clock_color(0.0) == (234, 71, 71)

    def test_matches_colorsys_over_full_cycle(self):
        for tick in range(HUE_PERIOD_TICKS):
            hue = hue_for_tick(tick)
            expected = colorsys.hls_to_rgb(hue / 360.0, 0.6, 0.8)
            actual = clock_color(hue)
            for got, want in zip(actual, expected):
                assert abs(got - want * 255.0) <= 1.0, (tick, actual, expected)

    def test_channels_in_byte_range(self):
        for tick in range(0, HUE_PERIOD_TICKS, 7):
            assert all(0 <= v <= 255 for v in clock_color(hue_for_tick(tick)))


class TestHueCycle:
    """Hue stepping and wrap-around."""

    def test_hue_stays_in_range(self):
        for tick in range(3 * HUE_PERIOD_TICKS):
            assert 0.0 <= hue_for_tick(tick) < 360.0

    def test_cycles_back_after_1200_ticks(self):
        assert HUE_PERIOD_TICKS == 1200
        assert hue_for_tick(1200) == hue_for_tick(0) == 0.0
        assert clock_color(hue_for_tick(1200)) == clock_color(0.0)
        assert clock_color(hue_for_tick(1201)) == clock_color(hue_for_tick(1))

    def test_step_size(self):
        assert hue_for_tick(1) == pytest.approx(HUE_STEP)
        assert hue_for_tick(10) == pytest.approx(3.0)

    def test_transitions_are_continuous(self):
        previous = clock_color(hue_for_tick(0))
        for tick in range(1, HUE_PERIOD_TICKS + 1):
            current = clock_color(hue_for_tick(tick))
            assert max(abs(a - b) for a, b in zip(current, previous)) <= 2, tick
            previous = current
