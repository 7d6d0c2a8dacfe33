"""Merging of two adjacent polygons that share a topology.

Two regions of a planar subdivision are adjacent when they walk a common
boundary arc in opposite directions. Merging them removes that arc: the ring
of the minor polygon is spliced into the ring of the major polygon at the
position where the shared arc used to be. No coordinates are read; only arc
identities and directions matter.
"""

import warnings
from dataclasses import replace
from typing import List, Sequence, Tuple

from .core.errors import (
    BothHaveHolesError,
    CollapsedOuterRingError,
    MergeWarning,
    MultipleCommonArcsError,
    NoCommonArcError,
    NotAPolygonError,
    SameDirectionArcError,
)
from .core.types import CommonArc, Ring, TopoGeometry
from .locate import locate_arcs


def find_common_arc(major: TopoGeometry, minor: TopoGeometry) -> CommonArc:
    """Find the single arc that ``major`` and ``minor`` both use.

    Args:
        major: Polygon whose identity is kept
        minor: Polygon that is absorbed

    Returns:
        CommonArc with the arc index and its location in each polygon

    Raises:
        DuplicateArcError: If either polygon uses an arc twice
        NoCommonArcError: If the polygons share no arc
        MultipleCommonArcsError: If they share more than one arc
        SameDirectionArcError: If the shared arc runs the same way in both
    """
    minor_locations = locate_arcs(minor)
    major_locations = locate_arcs(major)

    shared = [index for index in major_locations if index in minor_locations]
    if not shared:
        raise NoCommonArcError()
    if len(shared) > 1:
        raise MultipleCommonArcsError(shared)

    index = shared[0]
    common = CommonArc(index, major_locations[index], minor_locations[index])

    # Adjacent regions see their shared boundary from opposite sides.
    if common.major.direction is common.minor.direction:
        raise SameDirectionArcError(index)

    return common


def splice_rings(
    major_ring: Sequence[int],
    major_position: int,
    minor_ring: Sequence[int],
    minor_position: int,
) -> Ring:
    """Join two rings at a shared arc, dropping that arc.

    The minor ring is rotated so that it starts right after the shared arc,
    then inserted in place of the shared arc in the major ring.

    Examples:
        >>> splice_rings([1, 2, 3], 1, [~2, 5], 0)
        (1, 5, 3)
    """
    major_ring = tuple(major_ring)
    minor_ring = tuple(minor_ring)
    return (
        major_ring[:major_position]
        + minor_ring[minor_position + 1:]
        + minor_ring[:minor_position]
        + major_ring[major_position + 1:]
    )


def merge_with_common_arc(major: TopoGeometry, minor: TopoGeometry) -> Tuple[TopoGeometry, CommonArc]:
    """Merge ``minor`` into ``major`` across their shared arc.

    The result is a new geometry with every attribute of ``major`` except its
    rings. The ring that held the shared arc is replaced by the spliced ring,
    or removed when the splice leaves nothing (which is only valid for a
    hole). Neither input is modified.

    Args:
        major: Polygon whose name and properties are kept
        minor: Polygon that is absorbed into ``major``

    Returns:
        Tuple of (new TopoGeometry covering both regions, the CommonArc
        that was removed)

    Raises:
        NotAPolygonError: If either input is not a polygon
        BothHaveHolesError: If both inputs have interior rings
        DuplicateArcError: If either polygon uses an arc twice
        NoCommonArcError: If the polygons share no arc
        MultipleCommonArcsError: If they share more than one arc
        SameDirectionArcError: If the shared arc runs the same way in both
        CollapsedOuterRingError: If the splice empties the outer ring

    Examples:
        >>> a = TopoGeometry.polygon([1, 2, 3], properties={'name': 'A'})
        >>> b = TopoGeometry.polygon([~2, 5], properties={'name': 'B'})
        >>> merged, common = merge_with_common_arc(a, b)
        >>> merged.arcs, merged.name, common.index
        (((1, 5, 3),), 'A', 2)
    """
    for geometry in (major, minor):
        if not geometry.is_polygon:
            raise NotAPolygonError(geometry.type, geometry.id)

    if major.has_holes and minor.has_holes:
        raise BothHaveHolesError()

    common = find_common_arc(major, minor)

    merged_ring = splice_rings(
        major.arcs[common.major.ring_index],
        common.major.position,
        minor.arcs[common.minor.ring_index],
        common.minor.position,
    )

    rings: List[Ring] = list(major.arcs)
    if merged_ring:
        rings[common.major.ring_index] = merged_ring
    else:
        if common.major.ring_index == 0:
            raise CollapsedOuterRingError(common.index)
        del rings[common.major.ring_index]

    if minor.has_holes:
        warnings.warn(
            f"{len(minor.arcs) - 1} ring(s) of the minor polygon are not carried "
            "into the merged polygon",
            MergeWarning,
            stacklevel=2,
        )

    # The result owns its mappings; only the values are shared with major.
    merged = replace(
        major,
        arcs=tuple(rings),
        properties=dict(major.properties),
        extra=dict(major.extra),
    )
    return merged, common


def merge_polygons(major: TopoGeometry, minor: TopoGeometry) -> TopoGeometry:
    """Merge ``minor`` into ``major`` across their shared arc.

    Same as :func:`merge_with_common_arc` without the located arc.

    Examples:
        >>> a = TopoGeometry.polygon([1, 2, 3], properties={'name': 'A'})
        >>> b = TopoGeometry.polygon([~2, 5], properties={'name': 'B'})
        >>> merge_polygons(a, b).arcs
        ((1, 5, 3),)
    """
    return merge_with_common_arc(major, minor)[0]


__all__ = ['find_common_arc', 'splice_rings', 'merge_with_common_arc', 'merge_polygons']
