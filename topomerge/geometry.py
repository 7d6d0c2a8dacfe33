"""Coordinate reconstruction for arc-based geometries.

The merge itself never looks at coordinates. These helpers turn the arc
table of a topology back into shapely polygons so that results can be
measured, validated or plotted.
"""

from typing import Any, Dict, List, Optional, Sequence

import numpy as np
from shapely.geometry import Polygon

from .core.types import ArcDirection, ArcRef, TopoGeometry


def decode_arcs(
    arcs: Sequence[Sequence[Sequence[float]]],
    transform: Optional[Dict[str, Any]] = None,
) -> List[np.ndarray]:
    """Convert a raw arc table to arrays of absolute coordinates.

    Quantized topologies (those with a ``transform``) store each arc as
    integer deltas from the previous point. Those are accumulated and then
    scaled and translated. Without a transform, positions are used as-is.

    Args:
        arcs: Arc table, one list of positions per arc
        transform: Optional ``{"scale": [sx, sy], "translate": [tx, ty]}``

    Returns:
        List of (N, 2) float arrays, one per arc

    Examples:
        >>> arcs = decode_arcs([[[0, 0], [2, 0], [0, 3]]], {"scale": [0.5, 1], "translate": [10, 0]})
        >>> arcs[0].tolist()
        [[10.0, 0.0], [11.0, 0.0], [11.0, 3.0]]
    """
    if transform is not None:
        scale = np.asarray(transform.get('scale', (1.0, 1.0)), dtype=float)
        translate = np.asarray(transform.get('translate', (0.0, 0.0)), dtype=float)

    decoded = []
    for arc in arcs:
        # Extra dimensions beyond x, y are dropped.
        points = np.array([position[:2] for position in arc], dtype=float).reshape(-1, 2)
        if transform is not None:
            points = np.cumsum(points, axis=0) * scale + translate
        decoded.append(points)
    return decoded


def ring_coordinates(ring: Sequence[int], arcs: Sequence[np.ndarray]) -> np.ndarray:
    """Stitch the arcs of one ring into a single coordinate array.

    Consecutive arcs share their joint point, which is kept only once.
    """
    pieces = []
    for i, value in enumerate(ring):
        ref = ArcRef.decode(value)
        points = arcs[ref.index]
        if ref.direction is ArcDirection.REVERSE:
            points = points[::-1]
        if i > 0:
            points = points[1:]
        pieces.append(points)

    if not pieces:
        return np.empty((0, 2))
    return np.vstack(pieces)


def to_shapely(geometry: TopoGeometry, arcs: Sequence[np.ndarray]) -> Polygon:
    """Build a shapely polygon from a topology polygon.

    Args:
        geometry: Polygon referencing ``arcs``
        arcs: Decoded arc table (see :func:`decode_arcs`)

    Returns:
        Shapely Polygon with the first ring as shell and the rest as holes

    Raises:
        TypeError: If ``geometry`` is not a polygon
    """
    if not geometry.is_polygon:
        raise TypeError(f"Expected Polygon, got {geometry.type}")
    if not geometry.arcs:
        return Polygon()

    shell = ring_coordinates(geometry.arcs[0], arcs)
    holes = [ring_coordinates(ring, arcs) for ring in geometry.arcs[1:]]
    return Polygon(shell, holes=holes)


__all__ = [
    'decode_arcs',
    'ring_coordinates',
    'to_shapely',
]
