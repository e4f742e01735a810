"""Tests for bacvar.utils.utils geometry helpers."""

import pytest

pytest.importorskip("tkinter")

from bacvar.config.constants import ROTATION_PERIOD_MS
from bacvar.utils.utils import TOOLTIP_OFFSET, polar, rotation_angle, tooltip_position


class TestTooltipPosition:
    """Test where the hover hint is placed."""

    def test_below_widget_left_edge(self):
        assert tooltip_position(100, 200, 30) == (100, 200 + 30 + TOOLTIP_OFFSET)

    def test_custom_offset(self):
        assert tooltip_position(0, 0, 20, offset=0) == (0, 20)

    def test_rounds_to_pixels(self):
        x, y = tooltip_position(10.7, 5.2, 10.0)
        assert isinstance(x, int) and isinstance(y, int)


class TestRotation:
    """Test the plasmid rotation helpers."""

    def test_starts_at_zero(self):
        assert rotation_angle(0) == 0.0

    def test_quarter_period(self):
        assert rotation_angle(ROTATION_PERIOD_MS / 4) == pytest.approx(90.0)

    def test_wraps_after_full_turn(self):
        assert rotation_angle(ROTATION_PERIOD_MS + 500) == pytest.approx(rotation_angle(500))

    def test_polar_points_up_at_ninety(self):
        x, y = polar(50, 50, 10, 90)
        assert x == pytest.approx(50)
        assert y == pytest.approx(40)
