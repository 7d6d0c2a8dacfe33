"""Core types and utilities for topomerge.

This module provides the arc and geometry value types, configuration, and
the exception hierarchy used throughout the library.
"""

from .types import (
    Ring,
    ArcDirection,
    ArcRef,
    ArcLocation,
    CommonArc,
    ValidationMode,
    TopoGeometry,
    coerce_enum,
)

from .config import MergeConfig

from .errors import (
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
    # Value types
    'Ring',
    'ArcDirection',
    'ArcRef',
    'ArcLocation',
    'CommonArc',
    'ValidationMode',
    'TopoGeometry',
    'coerce_enum',

    # Configuration
    'MergeConfig',

    # Exceptions
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
