"""Tests for locate_arcs."""

import pytest

from topomerge import locate_arcs
from topomerge.core import ArcDirection, ArcLocation, TopoGeometry
from topomerge.core.errors import DuplicateArcError


class TestLocateArcs:
    """Tests for locate_arcs()."""

    def test_single_ring(self):
        poly = TopoGeometry.polygon([3, ~0, 5])
        locations = locate_arcs(poly)

        assert locations == {
            3: ArcLocation(ArcDirection.FORWARD, 0, 0),
            0: ArcLocation(ArcDirection.REVERSE, 0, 1),
            5: ArcLocation(ArcDirection.FORWARD, 0, 2),
        }

    def test_rings_with_holes(self):
        poly = TopoGeometry.polygon([0], [~1, ~2])
        locations = locate_arcs(poly)

        assert locations[0] == ArcLocation(ArcDirection.FORWARD, 0, 0)
        assert locations[1] == ArcLocation(ArcDirection.REVERSE, 1, 0)
        assert locations[2] == ArcLocation(ArcDirection.REVERSE, 1, 1)

    def test_arc_zero_reversed(self):
        locations = locate_arcs(TopoGeometry.polygon([~0]))
        assert locations[0].direction is ArcDirection.REVERSE

    def test_duplicate_in_same_ring_raises(self):
        poly = TopoGeometry.polygon([0, 1, 0])
        with pytest.raises(DuplicateArcError, match="arc 0"):
            locate_arcs(poly)

    def test_duplicate_across_rings_raises(self):
        """The same arc in opposite directions is still a duplicate."""
        poly = TopoGeometry.polygon([4, 1], [~4], id="p")
        with pytest.raises(DuplicateArcError) as excinfo:
            locate_arcs(poly)

        assert excinfo.value.arc_index == 4
        assert excinfo.value.geometry_id == "p"

    def test_input_is_not_modified(self):
        poly = TopoGeometry.polygon([0, 1], [2])
        before = poly.arcs
        locate_arcs(poly)
        assert poly.arcs == before

    def test_empty_polygon(self):
        assert locate_arcs(TopoGeometry("Polygon")) == {}
