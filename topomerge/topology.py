"""Topology container: reading, writing and merging regions by name.

The container follows the TopoJSON layout::

    {
        "type": "Topology",
        "objects": {"regions": {"type": "GeometryCollection", "geometries": [...]}},
        "arcs": [[[x, y], ...], ...],
        "transform": {"scale": [sx, sy], "translate": [tx, ty]}
    }

Every key this module does not interpret is preserved when the topology is
written back.
"""

from __future__ import annotations

import json
import os
import tempfile
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional, Tuple, Union

import numpy as np

from .core.config import MergeConfig
from .core.errors import NameNotFoundError, ObjectNotFoundError, TopologyFormatError
from .core.types import TopoGeometry, ValidationMode
from .geometry import decode_arcs
from .merge import merge_with_common_arc
from .metrics import check_merge

PathLike = Union[str, Path]


@dataclass(frozen=True)
class TopoCollection:
    """A named object of a topology.

    TopoJSON objects are usually a GeometryCollection but may be a single
    geometry. Single geometries are held as a one-member collection and
    written back in their original form.
    """
    geometries: Tuple[TopoGeometry, ...] = ()
    extra: Dict[str, Any] = field(default_factory=dict)
    single: bool = False

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TopoCollection":
        if not isinstance(data, dict):
            raise TopologyFormatError(f"object must be a mapping, got {type(data).__name__}")
        if data.get('type') != 'GeometryCollection':
            return cls((TopoGeometry.from_dict(data),), single=True)

        members = data.get('geometries', [])
        if not isinstance(members, list):
            raise TopologyFormatError("collection 'geometries' must be a list")

        extra = {k: v for k, v in data.items() if k != 'geometries'}
        geometries = tuple(TopoGeometry.from_dict(g) for g in members)
        return cls(geometries, extra)

    def to_dict(self) -> Dict[str, Any]:
        if self.single:
            return self.geometries[0].to_dict()
        data = dict(self.extra)
        data.setdefault('type', 'GeometryCollection')
        data['geometries'] = [g.to_dict() for g in self.geometries]
        return data


@dataclass(frozen=True)
class Topology:
    """A set of named objects whose polygons share one arc table."""
    objects: Dict[str, TopoCollection]
    arcs: List[Any] = field(default_factory=list)
    transform: Optional[Dict[str, Any]] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Topology":
        """Parse a TopoJSON-style mapping.

        Raises:
            TopologyFormatError: If ``data`` is not a topology
        """
        if not isinstance(data, dict) or data.get('type') != 'Topology':
            raise TopologyFormatError("expected an object with type 'Topology'")

        objects = data.get('objects')
        arcs = data.get('arcs', [])
        if not isinstance(objects, dict):
            raise TopologyFormatError("topology 'objects' must be a mapping")
        if not isinstance(arcs, list):
            raise TopologyFormatError("topology 'arcs' must be a list")

        extra = {k: v for k, v in data.items() if k not in ('type', 'objects', 'arcs', 'transform')}
        return cls(
            objects={name: TopoCollection.from_dict(obj) for name, obj in objects.items()},
            arcs=arcs,
            transform=data.get('transform'),
            extra=extra,
        )

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {'type': 'Topology'}
        if self.transform is not None:
            data['transform'] = self.transform
        data.update(self.extra)
        data['objects'] = {name: obj.to_dict() for name, obj in self.objects.items()}
        data['arcs'] = self.arcs
        return data

    def decoded_arcs(self) -> List[np.ndarray]:
        """Absolute coordinates of every arc."""
        return decode_arcs(self.arcs, self.transform)

    def iter_geometries(self, object_name: Optional[str] = None) -> Iterator[Tuple[str, int, TopoGeometry]]:
        """Yield ``(object_name, index, geometry)`` for every geometry.

        Raises:
            ObjectNotFoundError: If ``object_name`` is given and missing
        """
        if object_name is not None:
            if object_name not in self.objects:
                raise ObjectNotFoundError(object_name)
            names = [object_name]
        else:
            names = list(self.objects)

        for name in names:
            for index, geometry in enumerate(self.objects[name].geometries):
                yield name, index, geometry

    def find_geometry(
        self,
        name: Any,
        object_name: Optional[str] = None,
        name_property: str = 'name',
    ) -> Tuple[str, int, TopoGeometry]:
        """Locate the geometry whose name is ``name``.

        A geometry that has ``properties[name_property]`` matches when that
        value equals ``name``. A geometry without it matches by ``id``. The
        first match wins.

        Returns:
            Tuple of (object name, index within the object, geometry)

        Raises:
            NameNotFoundError: If no geometry matches
            ObjectNotFoundError: If ``object_name`` is given and missing
        """
        for found in self.iter_geometries(object_name):
            if _matches(found[2], name, name_property):
                return found
        raise NameNotFoundError(name)

    def merge_named(
        self,
        major_name: Any,
        minor_name: Any,
        config: Optional[MergeConfig] = None,
    ) -> "Topology":
        """Merge the region ``minor_name`` into the region ``major_name``.

        The merged geometry takes the major's place and the minor geometry is
        removed. A new Topology is returned; ``self`` is unchanged.

        Raises:
            NameNotFoundError: If either name is not found
            ObjectNotFoundError: If ``config.object_name`` is missing
            MergeError: If the two regions cannot be merged
        """
        config = config or MergeConfig()

        major_object, major_index, major = self.find_geometry(
            major_name, config.object_name, config.name_property)
        minor_object, minor_index, minor = self.find_geometry(
            minor_name, config.object_name, config.name_property)

        merged, common = merge_with_common_arc(major, minor)

        if config.verbose:
            print(f"Merged {minor_name!r} into {major_name!r} across arc {common.index}")

        if config.validation is not ValidationMode.OFF:
            check_merge(major, minor, merged, self.decoded_arcs(), config.validation)

        if config.verbose:
            print(f"Merged polygon has {len(merged.arcs)} ring(s)")

        objects = dict(self.objects)
        objects[major_object] = _replace_member(objects[major_object], major_index, merged)
        objects[minor_object] = _remove_member(objects[minor_object], minor_index)
        return replace(self, objects=objects)


def _matches(geometry: TopoGeometry, name: Any, name_property: str) -> bool:
    if name_property in geometry.properties:
        return geometry.properties[name_property] == name
    return geometry.id is not None and (geometry.id == name or str(geometry.id) == str(name))


def _replace_member(collection: TopoCollection, index: int, geometry: TopoGeometry) -> TopoCollection:
    geometries = list(collection.geometries)
    geometries[index] = geometry
    return replace(collection, geometries=tuple(geometries))


def _remove_member(collection: TopoCollection, index: int) -> TopoCollection:
    geometries = collection.geometries[:index] + collection.geometries[index + 1:]
    if collection.single:
        # A lone geometry that was absorbed leaves an empty collection behind.
        return TopoCollection(geometries, {'type': 'GeometryCollection'})
    return replace(collection, geometries=geometries)


def load_topology(path: PathLike) -> Topology:
    """Read a topology from a JSON file.

    Raises:
        TopologyFormatError: If the file is not JSON or not a topology
    """
    with open(path, 'r', encoding='utf-8') as f:
        try:
            data = json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise TopologyFormatError(f"{path}: {e}") from e
    return Topology.from_dict(data)


def dump_topology(topology: Topology, path: PathLike, indent: Optional[int] = None) -> None:
    """Write ``topology`` to ``path`` as JSON.

    The JSON goes to a temporary file next to ``path`` that then replaces
    it, so a failed write leaves any existing file intact.
    """
    separators = (',', ':') if indent is None else None
    directory = os.path.dirname(os.path.abspath(path))
    f = tempfile.NamedTemporaryFile(
        'w', encoding='utf-8', dir=directory, suffix='.tmp', delete=False)
    try:
        with f:
            json.dump(topology.to_dict(), f, indent=indent, separators=separators)
        os.replace(f.name, path)
    except BaseException:
        if os.path.exists(f.name):
            os.unlink(f.name)
        raise


def merge_topology_file(
    input_path: PathLike,
    output_path: PathLike,
    major_name: Any,
    minor_name: Any,
    config: Optional[MergeConfig] = None,
) -> Topology:
    """Load a topology, merge two regions and write the result.

    Nothing is written unless the merge succeeds.
    """
    topology = load_topology(input_path)
    merged = topology.merge_named(major_name, minor_name, config)
    dump_topology(merged, output_path)
    return merged


__all__ = [
    'TopoCollection',
    'Topology',
    'load_topology',
    'dump_topology',
    'merge_topology_file',
]
