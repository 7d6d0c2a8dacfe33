"""Tests for the metrics module."""

import warnings

import pytest

from topomerge import Topology, merge_polygons
from topomerge.core import MergeWarning, TopoGeometry, ValidationMode
from topomerge.core.errors import InvalidMergeResultError
from topomerge.metrics import check_merge, measure_merge


def _regions(data, *names):
    topology = Topology.from_dict(data)
    geometries = [topology.find_geometry(name)[2] for name in names]
    return topology.decoded_arcs(), geometries


class TestMeasureMerge:
    """Tests for measure_merge function."""

    def test_side_by_side_merge(self, side_by_side):
        arcs, (west, east) = _regions(side_by_side, "West", "East")
        metrics = measure_merge(west, east, merge_polygons(west, east), arcs)

        assert metrics["is_valid"] is True
        assert metrics["area"] == pytest.approx(2.0)
        assert metrics["expected_area"] == pytest.approx(2.0)
        assert metrics["area_difference"] == pytest.approx(0.0)

    def test_merge_into_hole(self, lake):
        arcs, (lake_geometry, left) = _regions(lake, "Lake", "Left")
        merged = merge_polygons(lake_geometry, left)
        metrics = measure_merge(lake_geometry, left, merged, arcs)

        assert metrics["is_valid"] is True
        assert metrics["area"] == pytest.approx(14.0)
        assert metrics["area_difference"] == pytest.approx(0.0)

    def test_wrong_result_has_area_difference(self, side_by_side):
        arcs, (west, east) = _regions(side_by_side, "West", "East")
        wrong = TopoGeometry.polygon([2])
        metrics = measure_merge(west, east, wrong, arcs)

        assert metrics["area"] == pytest.approx(1.0)
        assert metrics["area_difference"] == pytest.approx(1.0)

    def test_unbuildable_result(self, side_by_side):
        """A ring of two points cannot form a polygon."""
        arcs, (west, east) = _regions(side_by_side, "West", "East")
        metrics = measure_merge(west, east, TopoGeometry.polygon([0]), arcs)

        assert metrics["is_valid"] is False
        assert metrics["area"] is None
        assert metrics["expected_area"] == pytest.approx(2.0)


class TestCheckMerge:
    """Tests for check_merge function."""

    def test_off_returns_none(self, side_by_side):
        arcs, (west, east) = _regions(side_by_side, "West", "East")
        assert check_merge(west, east, TopoGeometry.polygon([2]), arcs, ValidationMode.OFF) is None

    def test_valid_merge_does_not_warn(self, side_by_side):
        arcs, (west, east) = _regions(side_by_side, "West", "East")
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            metrics = check_merge(west, east, merge_polygons(west, east), arcs, "warn")
        assert metrics["is_valid"] is True

    def test_invalid_merge_warns(self, side_by_side):
        arcs, (west, east) = _regions(side_by_side, "West", "East")
        with pytest.warns(MergeWarning, match="does not match union area"):
            check_merge(west, east, TopoGeometry.polygon([2]), arcs, ValidationMode.WARN)

    def test_invalid_merge_raises(self, side_by_side):
        arcs, (west, east) = _regions(side_by_side, "West", "East")
        with pytest.raises(InvalidMergeResultError, match="cannot form a polygon"):
            check_merge(west, east, TopoGeometry.polygon([0]), arcs, ValidationMode.RAISE)
