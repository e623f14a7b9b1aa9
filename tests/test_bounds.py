"""
Test Suite: Bounds
==================
Booster-set bound estimation and whole-vehicle extent.
"""
import pytest

from rocketlayout import AxialStage, BoosterSet, ComponentTree, Coordinate
from rocketlayout.main import build_demo_tree
from rocketlayout.model.bounds import AxialBound, Extent, merge_bounds, scan_instance_bounds


class TestBoosterBounds:

    def test_single_instance_scenario(self, tree):
        stage = tree.root.add_child(AxialStage("Core", length=7.0))
        booster_set = stage.add_child(BoosterSet(1, length=2.0))
        booster_set.radial_offset = 0.3

        assert booster_set.resolve_absolute_locations()[0].x == pytest.approx(5.0)
        low, high = booster_set.estimate_bounds()
        assert (low.x, low.r) == pytest.approx((5.0, 0.3))
        assert (high.x, high.r) == pytest.approx((7.0, 0.3))

    def test_ring_shares_axial_extremes(self, boosters):
        boosters.radial_offset = 0.4
        bounds = boosters.estimate_bounds()
        assert len(bounds) == 2
        assert bounds[0] == AxialBound(2.0, 0.4)
        assert bounds[1] == AxialBound(4.0, 0.4)
        assert boosters.component_bounds() == bounds

    def test_negative_radius_does_not_grow_radius(self, boosters):
        boosters.radial_offset = -0.4
        assert [b.r for b in boosters.estimate_bounds()] == [0.0, 0.0]


class TestScan:

    def test_axial_extremes(self):
        locations = [Coordinate(3.0, 0.0, 0.0), Coordinate(1.0, 0.0, 0.0), Coordinate(2.0, 0.0, 0.0)]
        bounds = scan_instance_bounds(locations, length=0.5, radial_offset=0.2)
        assert bounds == [AxialBound(1.0, 0.2), AxialBound(3.5, 0.2)]

    def test_negative_axial_positions(self):
        bounds = scan_instance_bounds([Coordinate(-4.0, 0.0, 0.0)], length=1.0, radial_offset=0.1)
        assert bounds == [AxialBound(-4.0, 0.1), AxialBound(-3.0, 0.1)]

    def test_no_locations(self):
        assert scan_instance_bounds([], length=1.0, radial_offset=0.1) == []

    def test_corners(self):
        corners = AxialBound(2.0, 0.5).corners()
        assert len(corners) == 4
        assert all(c.x == 2.0 for c in corners)
        assert {(c.y, c.z) for c in corners} == {(-0.5, -0.5), (0.5, -0.5), (0.5, 0.5), (-0.5, 0.5)}


class TestExtent:

    def test_merge(self):
        extent = merge_bounds([AxialBound(1.0, 0.2), AxialBound(-1.0, 0.1), AxialBound(3.0, 0.5)])
        assert extent == Extent(-1.0, 3.0, 0.5)
        assert extent.length == pytest.approx(4.0)
        assert extent.diameter == pytest.approx(1.0)

    def test_merge_nothing(self):
        assert merge_bounds([]) is None

    def test_empty_tree(self):
        assert ComponentTree().estimate_extent() is None

    def test_demo_vehicle(self):
        extent = build_demo_tree().estimate_extent()
        assert extent.x_min == pytest.approx(0.0)
        assert extent.x_max == pytest.approx(3.7)
        # Booster tubes: 0.2 m ring radius plus 0.04 m tube radius
        assert extent.r_max == pytest.approx(0.24)
