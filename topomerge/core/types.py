"""Value types for arc-based polygon topology.

A ring is a sequence of directed arc references. Each reference is a signed
integer: ``i`` walks arc ``i`` forward and ``~i`` (``-(i + 1)``) walks it in
reverse. :class:`ArcRef` is the decoded form of such a reference.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, FrozenSet, Optional, Tuple, Type, TypeVar, Union

from .errors import TopologyFormatError

Ring = Tuple[int, ...]

E = TypeVar('E', bound=Enum)


class ArcDirection(Enum):
    """Direction in which a ring walks an arc.

    Attributes:
        FORWARD: Arc is walked from its first point to its last
        REVERSE: Arc is walked from its last point to its first

    Examples:
        >>> ArcDirection.FORWARD.opposite
        <ArcDirection.REVERSE: 'reverse'>
    """
    FORWARD = 'forward'
    REVERSE = 'reverse'

    @property
    def opposite(self) -> "ArcDirection":
        if self is ArcDirection.FORWARD:
            return ArcDirection.REVERSE
        return ArcDirection.FORWARD


@dataclass(frozen=True)
class ArcRef:
    """A decoded directed arc reference.

    Attributes:
        index: Global index of the arc in the topology's arc table
        direction: Direction in which the arc is walked

    Examples:
        >>> ArcRef.decode(~0)
        ArcRef(index=0, direction=<ArcDirection.REVERSE: 'reverse'>)
        >>> ArcRef(3, ArcDirection.REVERSE).encode()
        -4
    """
    index: int
    direction: ArcDirection = ArcDirection.FORWARD

    @classmethod
    def decode(cls, value: int) -> "ArcRef":
        value = int(value)
        if value < 0:
            return cls(-value - 1, ArcDirection.REVERSE)
        return cls(value, ArcDirection.FORWARD)

    def encode(self) -> int:
        if self.direction is ArcDirection.REVERSE:
            return -self.index - 1
        return self.index

    def reversed(self) -> "ArcRef":
        return ArcRef(self.index, self.direction.opposite)


@dataclass(frozen=True)
class ArcLocation:
    """Where an arc sits inside one polygon."""
    direction: ArcDirection
    ring_index: int
    position: int


@dataclass(frozen=True)
class CommonArc:
    """The arc shared by the major and minor polygons of a merge."""
    index: int
    major: ArcLocation
    minor: ArcLocation


class ValidationMode(Enum):
    """What to do when a merged polygon fails shapely validation.

    Attributes:
        OFF: Do not build or check the merged shape (default)
        WARN: Emit a MergeWarning for invalid results
        RAISE: Raise InvalidMergeResultError for invalid results

    Examples:
        >>> from topomerge import MergeConfig, ValidationMode
        >>> config = MergeConfig(validation=ValidationMode.WARN)
    """
    OFF = 'off'
    WARN = 'warn'
    RAISE = 'raise'


POLYGON = 'Polygon'


@dataclass(frozen=True)
class TopoGeometry:
    """A geometry object that references arcs of a shared topology.

    Only ``arcs`` is interpreted by the merge code. ``id``, ``properties`` and
    every other key of the source object (kept in ``extra``) are carried over
    unchanged.

    Attributes:
        type: Shape tag, e.g. ``"Polygon"``
        arcs: Rings of directed arc references; the first ring is the outer
            boundary, the rest are holes
        id: Optional object identifier
        properties: Descriptive properties such as ``name``
        extra: Any remaining keys of the source object
        present: Interpreted keys that the source object carried, so that
            empty or null values are written back rather than dropped
    """
    type: str
    arcs: Tuple[Any, ...] = ()
    id: Optional[Any] = None
    properties: Dict[str, Any] = field(default_factory=dict)
    extra: Dict[str, Any] = field(default_factory=dict)
    present: FrozenSet[str] = field(default=frozenset(), compare=False, repr=False)

    @property
    def is_polygon(self) -> bool:
        return isinstance(self.type, str) and self.type.lower() == POLYGON.lower()

    @property
    def has_holes(self) -> bool:
        return len(self.arcs) > 1

    @property
    def name(self) -> Optional[Any]:
        return self.properties.get('name')

    @classmethod
    def polygon(cls, *rings, **kwargs) -> "TopoGeometry":
        """Build a polygon from rings given as sequences of ints."""
        return cls(POLYGON, tuple(tuple(int(a) for a in ring) for ring in rings), **kwargs)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TopoGeometry":
        """Build a geometry from a TopoJSON geometry object.

        Raises:
            TopologyFormatError: If ``data`` is not a mapping
        """
        if not isinstance(data, dict):
            raise TopologyFormatError(f"geometry must be a mapping, got {type(data).__name__}")

        fields = ('type', 'arcs', 'id', 'properties')
        properties = data.get('properties')
        if properties is not None and not isinstance(properties, dict):
            raise TopologyFormatError(f"geometry properties must be a mapping, got {type(properties).__name__}")

        # A null "properties" stays in extra so it is written back as null.
        present = frozenset(k for k in fields if k in data and not (k == 'properties' and properties is None))
        extra = {k: v for k, v in data.items() if k not in present}
        return cls(
            type=data.get('type'),
            arcs=_freeze(data.get('arcs', ())),
            id=data.get('id'),
            properties=dict(properties or {}),
            extra=extra,
            present=present,
        )

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {'type': self.type}
        if self.arcs or 'arcs' in self.present:
            data['arcs'] = _thaw(self.arcs)
        if self.id is not None or 'id' in self.present:
            data['id'] = self.id
        if self.properties or 'properties' in self.present:
            data['properties'] = dict(self.properties)
        data.update(self.extra)
        return data


def _freeze(value):
    if isinstance(value, (list, tuple)):
        return tuple(_freeze(v) for v in value)
    return value


def _thaw(value):
    if isinstance(value, tuple):
        return [_thaw(v) for v in value]
    return value


def coerce_enum(value: Union[E, str], enum_cls: Type[E]) -> E:
    """Return ``value`` as a member of ``enum_cls``.

    Accepts an enum member, or a string matching a member's value or name.

    Raises:
        ValueError: If ``value`` does not name a member
    """
    if isinstance(value, enum_cls):
        return value
    if isinstance(value, str):
        lowered = value.lower()
        for member in enum_cls:
            if member.value == lowered or member.name.lower() == lowered:
                return member
    valid = ", ".join(repr(m.value) for m in enum_cls)
    raise ValueError(f"Invalid {enum_cls.__name__}: {value!r}. Expected one of {valid}")


__all__ = [
    'Ring',
    'ArcDirection',
    'ArcRef',
    'ArcLocation',
    'CommonArc',
    'ValidationMode',
    'POLYGON',
    'TopoGeometry',
    'coerce_enum',
]
