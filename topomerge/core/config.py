"""Configuration for named merges."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from .types import ValidationMode, coerce_enum


@dataclass
class MergeConfig:
    """Settings used when merging regions of a topology by name.

    Attributes:
        name_property: Property that holds a region's name. A geometry
            without this property is matched by its ``id`` instead.
        object_name: Object collection to search. ``None`` searches every
            collection in order.
        validation: Whether to rebuild the merged shape with shapely and
            check it (see :class:`ValidationMode`)
        verbose: Print progress information
    """

    name_property: str = 'name'
    object_name: Optional[str] = None
    validation: Union[ValidationMode, str] = ValidationMode.OFF
    verbose: bool = False

    def __post_init__(self):
        self.validation = coerce_enum(self.validation, ValidationMode)


__all__ = ['MergeConfig']
