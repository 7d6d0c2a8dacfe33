"""Arc lookup for polygons that reference a shared topology."""

from typing import Dict

from .core.errors import DuplicateArcError
from .core.types import ArcLocation, ArcRef, TopoGeometry


def locate_arcs(polygon: TopoGeometry) -> Dict[int, ArcLocation]:
    """Map every arc used by ``polygon`` to where it is used.

    Args:
        polygon: Polygon whose rings hold directed arc references

    Returns:
        Dictionary keyed by global arc index. Each value records the
        direction the arc is walked in, the ring it belongs to, and its
        position within that ring.

    Raises:
        DuplicateArcError: If the polygon uses an arc more than once

    Examples:
        >>> poly = TopoGeometry.polygon([0, ~1, 2])
        >>> locate_arcs(poly)[1]
        ArcLocation(direction=<ArcDirection.REVERSE: 'reverse'>, ring_index=0, position=1)
    """
    locations: Dict[int, ArcLocation] = {}

    for ring_index, ring in enumerate(polygon.arcs):
        for position, value in enumerate(ring):
            ref = ArcRef.decode(value)
            if ref.index in locations:
                raise DuplicateArcError(ref.index, polygon.id)
            locations[ref.index] = ArcLocation(ref.direction, ring_index, position)

    return locations


__all__ = ['locate_arcs']
