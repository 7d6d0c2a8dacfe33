"""Measurements used to sanity-check a merge.

A merge is correct when the merged polygon covers exactly the union of the
two inputs. These helpers rebuild all three shapes with shapely and compare
them.
"""

from __future__ import annotations

import warnings
from typing import Dict, Optional, Sequence, Union

import numpy as np
from shapely.errors import GEOSException
from shapely.geometry import Polygon
from shapely.ops import unary_union
from shapely.validation import explain_validity

from .core.errors import InvalidMergeResultError, MergeWarning
from .core.types import TopoGeometry, ValidationMode, coerce_enum
from .geometry import to_shapely

AREA_TOLERANCE = 1e-9


def _safe_shape(geometry: TopoGeometry, arcs: Sequence[np.ndarray]) -> Optional[Polygon]:
    try:
        return to_shapely(geometry, arcs)
    except (ValueError, GEOSException):
        # Rings with fewer than four coordinates are rejected.
        return None


def measure_merge(
    major: TopoGeometry,
    minor: TopoGeometry,
    merged: TopoGeometry,
    arcs: Sequence[np.ndarray],
) -> Dict[str, object]:
    """Return area and validity metrics for a merge.

    Args:
        major: Major input polygon
        minor: Minor input polygon
        merged: Result of merging ``minor`` into ``major``
        arcs: Decoded arc table shared by all three

    Returns:
        Dictionary with keys:
            - 'is_valid': bool, shapely validity of the merged shape
            - 'validity_message': str
            - 'area': area of the merged shape (None if it cannot be built)
            - 'expected_area': area of the union of the inputs
            - 'area_difference': absolute difference of the two areas
    """
    shape = _safe_shape(merged, arcs)
    inputs = [s for s in (_safe_shape(major, arcs), _safe_shape(minor, arcs)) if s is not None]
    expected_area = unary_union(inputs).area if inputs else 0.0

    if shape is None:
        return {
            'is_valid': False,
            'validity_message': 'Merged rings cannot form a polygon',
            'area': None,
            'expected_area': expected_area,
            'area_difference': None,
        }

    return {
        'is_valid': shape.is_valid,
        'validity_message': explain_validity(shape),
        'area': shape.area,
        'expected_area': expected_area,
        'area_difference': abs(shape.area - expected_area),
    }


def check_merge(
    major: TopoGeometry,
    minor: TopoGeometry,
    merged: TopoGeometry,
    arcs: Sequence[np.ndarray],
    mode: Union[ValidationMode, str] = ValidationMode.WARN,
) -> Optional[Dict[str, object]]:
    """Validate a merge result according to ``mode``.

    Returns the metrics from :func:`measure_merge`, or None when ``mode`` is
    OFF.

    Raises:
        InvalidMergeResultError: If ``mode`` is RAISE and the result is invalid
    """
    mode = coerce_enum(mode, ValidationMode)
    if mode is ValidationMode.OFF:
        return None

    metrics = measure_merge(major, minor, merged, arcs)
    problem = _describe_problem(metrics)
    if problem is None:
        return metrics

    if mode is ValidationMode.RAISE:
        raise InvalidMergeResultError(problem)
    warnings.warn(f"merged polygon is invalid: {problem}", MergeWarning, stacklevel=2)
    return metrics


def _describe_problem(metrics: Dict[str, object]) -> Optional[str]:
    if not metrics['is_valid']:
        return str(metrics['validity_message'])

    expected = metrics['expected_area']
    difference = metrics['area_difference']
    if difference > AREA_TOLERANCE * max(1.0, expected):
        return f"area {metrics['area']} does not match union area {expected}"
    return None


__all__ = [
    'measure_merge',
    'check_merge',
]
