"""Topomerge - Merging of adjacent regions in arc-based polygon topologies.

This library merges two neighbouring polygons of a planar subdivision whose
boundaries are stored as shared arcs (TopoJSON style), removing the arc they
have in common. Shapely is used to rebuild and check merged shapes.
"""


# Arc lookup
from .locate import locate_arcs

# Merge functions
from .merge import find_common_arc, splice_rings, merge_with_common_arc, merge_polygons

# Topology container
from .topology import (
    TopoCollection,
    Topology,
    load_topology,
    dump_topology,
    merge_topology_file,
)

# Geometry reconstruction
from .geometry import decode_arcs, ring_coordinates, to_shapely

# Merge checks
from .metrics import measure_merge, check_merge

# Core types
from .core import (
    ArcDirection,
    ArcRef,
    ArcLocation,
    CommonArc,
    TopoGeometry,
    ValidationMode,
    MergeConfig,
)

# Core exceptions
from .core import (
    TopomergeError,
    MergeError,
    DuplicateArcError,
    NotAPolygonError,
    BothHaveHolesError,
    NoCommonArcError,
    MultipleCommonArcsError,
    SameDirectionArcError,
    CollapsedOuterRingError,
    InvalidMergeResultError,
    TopologyError,
    TopologyFormatError,
    ObjectNotFoundError,
    NameNotFoundError,
    MergeWarning,
)

__all__ = [

    # Arc lookup
    'locate_arcs',

    # Merge
    'find_common_arc',
    'splice_rings',
    'merge_with_common_arc',
    'merge_polygons',

    # Topology container
    'TopoCollection',
    'Topology',
    'load_topology',
    'dump_topology',
    'merge_topology_file',

    # Geometry reconstruction
    'decode_arcs',
    'ring_coordinates',
    'to_shapely',

    # Merge checks
    'measure_merge',
    'check_merge',

    # Core types
    'ArcDirection',
    'ArcRef',
    'ArcLocation',
    'CommonArc',
    'TopoGeometry',
    'ValidationMode',
    'MergeConfig',

    # Core exceptions
    'TopomergeError',
    'MergeError',
    'DuplicateArcError',
    'NotAPolygonError',
    'BothHaveHolesError',
    'NoCommonArcError',
    'MultipleCommonArcsError',
    'SameDirectionArcError',
    'CollapsedOuterRingError',
    'InvalidMergeResultError',
    'TopologyError',
    'TopologyFormatError',
    'ObjectNotFoundError',
    'NameNotFoundError',
    'MergeWarning',
]
