"""
Test Suite: Ring Pattern
========================
Pattern parameters and the vectorized fan-out geometry.
"""
import math

import numpy as np
import pytest

from rocketlayout.model.coordinate import Coordinate, ZERO
from rocketlayout.model.pattern import RingPattern, even_separation


class TestPatternParameters:

    @pytest.mark.parametrize("count", [1, 2, 3, 4, 5, 8, 12])
    def test_even_spacing(self, count):
        pattern = RingPattern.even(count)
        assert pattern.count == count
        assert pattern.angular_separation == pytest.approx(2 * math.pi / count)

    @pytest.mark.parametrize("count", [1, 3, 5])
    def test_direct_construction_spaces_evenly(self, count):
        pattern = RingPattern(count=count)
        assert pattern.angular_separation == pytest.approx(2 * math.pi / count)

    def test_direct_construction_keeps_explicit_separation(self):
        assert RingPattern(count=3, angular_separation=0.5).angular_separation == 0.5

    def test_default_is_two_half_circle(self):
        pattern = RingPattern.even()
        assert pattern.count == 2
        assert pattern.angular_separation == pytest.approx(math.pi)
        assert pattern.angular_offset == 0.0

    def test_name(self):
        assert RingPattern.even(3).name == "3-ring"

    @pytest.mark.parametrize("count", [0, -2])
    def test_count_below_one_rejected(self, count):
        with pytest.raises(ValueError):
            even_separation(count)
        with pytest.raises(ValueError):
            RingPattern(count=count)

    def test_reconfigure_respaces(self):
        pattern = RingPattern.even(2)
        pattern.reconfigure(4)
        assert pattern.count == 4
        assert pattern.angular_separation == pytest.approx(math.pi / 2)

    def test_failed_reconfigure_leaves_pattern_intact(self):
        pattern = RingPattern.even(3)
        with pytest.raises(ValueError):
            pattern.reconfigure(0)
        assert pattern.count == 3
        assert pattern.angular_separation == pytest.approx(2 * math.pi / 3)


class TestFanOut:

    def test_angles(self):
        pattern = RingPattern(count=3, angular_separation=0.5, angular_offset=0.1)
        np.testing.assert_allclose(pattern.angles(), [0.1, 0.6, 1.1])

    def test_angles_are_not_wrapped(self):
        pattern = RingPattern(count=3, angular_separation=3 * math.pi, angular_offset=0.0)
        assert pattern.angles()[2] == pytest.approx(6 * math.pi)

    def test_offsets_have_no_axial_component(self):
        pattern = RingPattern.even(5)
        pattern.radial_offset = 0.7
        offsets = pattern.offsets(ZERO)
        assert offsets.shape == (5, 3)
        np.testing.assert_allclose(offsets[:, 0], 0.0)
        np.testing.assert_allclose(np.hypot(offsets[:, 1], offsets[:, 2]), 0.7)

    def test_fan_out_adds_center_and_base(self):
        pattern = RingPattern(count=4, angular_separation=math.pi / 2, radial_offset=1.0)
        center = Coordinate(2.0, 0.0, 0.0)
        base = Coordinate(1.0, 0.5, -0.5)
        result = pattern.fan_out(center, base)

        expected = [
            Coordinate(3.0, 1.5, -0.5),
            Coordinate(3.0, 0.5, 0.5),
            Coordinate(3.0, -0.5, -0.5),
            Coordinate(3.0, 0.5, -1.5),
        ]
        assert len(result) == 4
        for got, want in zip(result, expected):
            assert got.is_close(want)
