"""
Data Processing Package
======================

Point model, cleaning and segmentation of raw trajectory samples.

Classes:
--------
- Point: Labeled 3D trajectory sample
- PointType: Provenance label (node, pred, spline)
- PointSetCleaner: Timestamp deduplication and ordering checks
- SegmentClassifier: Node/pred partitioning and gap location
- DataUtils: Trajectory statistics
"""

from .points import (
    Point,
    PointType,
    load_points,
    point_from_record,
    points_from_records,
    points_to_records,
    trajectory_arrays
)
from .preprocessing import PointSetCleaner, SegmentClassifier, Segments
from .utils import DataUtils, TrajectoryStats

__all__ = [
    'Point',
    'PointType',
    'load_points',
    'point_from_record',
    'points_from_records',
    'points_to_records',
    'trajectory_arrays',
    'PointSetCleaner',
    'SegmentClassifier',
    'Segments',
    'DataUtils',
    'TrajectoryStats'
]
