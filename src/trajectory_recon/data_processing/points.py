"""
Trajectory Point Model
======================

Labeled 3D samples and conversion to and from plain records.
"""

import json
import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Iterable, List, Tuple, Union

import numpy as np

from ..exceptions import DataIntegrityError

logger = logging.getLogger(__name__)


class PointType(Enum):
    """Provenance of a trajectory point."""
    NODE = "node"
    PRED = "pred"
    SPLINE = "spline"


# Labels a caller may supply; spline points are only produced by reconstruction.
INPUT_TYPES = (PointType.NODE, PointType.PRED)


@dataclass(frozen=True)
class Point:
    """
    A labeled 3D sample.

    Attributes:
        ts: Timestamp, the ordering key
        x: X coordinate
        y: Y coordinate
        z: Z coordinate (vertical)
        type: Provenance tag
    """
    ts: float
    x: float
    y: float
    z: float
    type: PointType

    @property
    def position(self) -> Tuple[float, float, float]:
        return (self.x, self.y, self.z)

    def to_record(self) -> Dict[str, Any]:
        """Convert to a flat JSON-friendly record."""
        return {
            'ts': self.ts,
            'x': self.x,
            'y': self.y,
            'z': self.z,
            'type': self.type.value
        }


def _parse_type(label: Any, index: int) -> PointType:
    try:
        point_type = PointType(label)
    except ValueError:
        raise DataIntegrityError(f"Record {index}: unknown point type {label!r}") from None

    if point_type not in INPUT_TYPES:
        raise DataIntegrityError(
            f"Record {index}: type {point_type.value!r} is reserved for reconstructed points"
        )
    return point_type


def point_from_record(record: Dict[str, Any], index: int = 0) -> Point:
    """
    Build an input point from a record.

    Accepts both the flat layout ``{ts, x, y, z, type}`` and the nested
    capture layout ``{ts, pos: {x, y, z}, type}``.
    """
    if not isinstance(record, dict):
        raise DataIntegrityError(f"Record {index}: expected an object, got {type(record).__name__}")

    coords = record.get('pos', record)
    if not isinstance(coords, dict):
        raise DataIntegrityError(f"Record {index}: 'pos' must be an object")

    point_type = _parse_type(record.get('type'), index)

    try:
        return Point(
            ts=float(record['ts']),
            x=float(coords['x']),
            y=float(coords['y']),
            z=float(coords['z']),
            type=point_type
        )
    except (KeyError, TypeError, ValueError) as e:
        raise DataIntegrityError(f"Record {index}: malformed point record ({e})") from e


def points_from_records(records: Iterable[Dict[str, Any]]) -> List[Point]:
    """Convert a sequence of records into input points."""
    return [point_from_record(record, i) for i, record in enumerate(records)]


def points_to_records(points: Iterable[Point]) -> List[Dict[str, Any]]:
    """Convert points to flat records, preserving order."""
    return [point.to_record() for point in points]


def load_points(path: Union[str, Path]) -> List[Point]:
    """
    Load input points from a JSON file.

    The file holds either a list of records or an object whose
    ``positions`` key holds that list.

    Args:
        path: Path to the JSON file

    Returns:
        Input points in file order
    """
    with open(path, 'r') as f:
        payload = json.load(f)

    if isinstance(payload, dict):
        if 'positions' not in payload:
            raise DataIntegrityError(f"{path}: expected a 'positions' list")
        payload = payload['positions']

    if not isinstance(payload, list):
        raise DataIntegrityError(f"{path}: expected a list of point records")

    points = points_from_records(payload)
    logger.info(f"Loaded {len(points)} points from {path}")
    return points


def trajectory_arrays(points: Iterable[Point]) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Split points into the parallel x, y, z arrays consumed by renderers."""
    points = list(points)
    xs = np.array([p.x for p in points], dtype=float)
    ys = np.array([p.y for p in points], dtype=float)
    zs = np.array([p.z for p in points], dtype=float)
    return xs, ys, zs
