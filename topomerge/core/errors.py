"""Exception and warning types raised by topomerge.

Every merge failure is fatal: the operation stops at the first violated
precondition and nothing is returned or written.
"""

from typing import Optional, Sequence


class TopomergeError(Exception):
    """Base class for all topomerge errors."""


class MergeError(TopomergeError):
    """Raised when two polygons cannot be merged."""


class DuplicateArcError(MergeError):
    """A polygon references the same arc more than once."""

    def __init__(self, arc_index: int, geometry_id: Optional[object] = None):
        self.arc_index = arc_index
        self.geometry_id = geometry_id
        where = f" in geometry {geometry_id!r}" if geometry_id is not None else ""
        super().__init__(f"arc {arc_index} is referenced more than once{where}")


class NotAPolygonError(MergeError):
    """One of the inputs is not a polygon."""

    def __init__(self, geometry_type: Optional[str], geometry_id: Optional[object] = None):
        self.geometry_type = geometry_type
        self.geometry_id = geometry_id
        super().__init__(
            f"geometry {geometry_id!r} has type {geometry_type!r}, expected 'Polygon'"
        )


class BothHaveHolesError(MergeError):
    """Both inputs have interior rings."""

    def __init__(self):
        super().__init__("cannot merge two polygons that both have holes")


class NoCommonArcError(MergeError):
    """The two polygons share no arc."""

    def __init__(self):
        super().__init__("polygons have no arc in common")


class MultipleCommonArcsError(MergeError):
    """The two polygons share more than one arc."""

    def __init__(self, arc_indices: Sequence[int]):
        self.arc_indices = tuple(arc_indices)
        super().__init__(
            f"polygons share {len(self.arc_indices)} arcs {list(self.arc_indices)}, "
            "expected exactly one"
        )


class SameDirectionArcError(MergeError):
    """The shared arc is traversed in the same direction by both polygons."""

    def __init__(self, arc_index: int):
        self.arc_index = arc_index
        super().__init__(
            f"shared arc {arc_index} runs in the same direction in both polygons"
        )


class CollapsedOuterRingError(MergeError):
    """Splicing left the outer ring of the merged polygon empty."""

    def __init__(self, arc_index: int):
        self.arc_index = arc_index
        super().__init__(
            f"removing shared arc {arc_index} collapses the outer ring"
        )


class InvalidMergeResultError(MergeError):
    """The merged polygon does not form a valid shape."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"merged polygon is invalid: {reason}")


class TopologyError(TopomergeError):
    """Raised for problems with the topology container."""


class TopologyFormatError(TopologyError):
    """The input is not a readable topology."""


class ObjectNotFoundError(TopologyError):
    """A requested object collection does not exist."""

    def __init__(self, object_name: str):
        self.object_name = object_name
        super().__init__(f"topology has no object named {object_name!r}")


class NameNotFoundError(TopologyError):
    """No geometry carries the requested region name."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"no geometry named {name!r}")


class MergeWarning(UserWarning):
    """Non-fatal issue noticed while merging."""


__all__ = [
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
