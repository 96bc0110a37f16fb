"""
Trajectory Preprocessing Module
===============================

Cleaning and segmentation of raw observed points before curve fitting.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, Tuple

import numpy as np

from .points import Point, PointType
from ..exceptions import DataIntegrityError, PreconditionError

logger = logging.getLogger(__name__)


class PointSetCleaner:
    """
    Deduplicates raw points by timestamp and orders them in time.

    A repeated timestamp keeps the point seen last in input order. The
    result is checked for strictly increasing timestamps.
    """

    def clean(self, points: Iterable[Point]) -> List[Point]:
        """
        Clean a raw point collection.

        Args:
            points: Raw points in input order (not modified)

        Returns:
            New list sorted by timestamp with unique timestamps

        Raises:
            DataIntegrityError: If a timestamp or coordinate is not finite,
                or timestamps are not strictly increasing after
                deduplication
        """
        unique: Dict[float, Point] = {}
        n_raw = 0
        for point in points:
            if not np.all(np.isfinite((point.ts,) + point.position)):
                raise DataIntegrityError(
                    f"Point {n_raw} has non-finite values: ts={point.ts}, position={point.position}"
                )
            unique[point.ts] = point
            n_raw += 1

        cleaned = sorted(unique.values(), key=lambda p: p.ts)

        n_dropped = n_raw - len(cleaned)
        if n_dropped:
            logger.warning(f"Dropped {n_dropped} points with duplicate timestamps")

        self.check_strictly_increasing(cleaned)

        logger.debug(f"Cleaned {n_raw} raw points into {len(cleaned)}")
        return cleaned

    @staticmethod
    def check_strictly_increasing(points: List[Point]) -> None:
        """Raise if any adjacent pair is not strictly increasing in time."""
        for i in range(1, len(points)):
            # Written as a negated comparison so NaN timestamps fail too
            if not points[i].ts > points[i - 1].ts:
                raise DataIntegrityError(
                    f"Timestamps not strictly increasing at index {i}: "
                    f"{points[i - 1].ts} -> {points[i].ts}"
                )


@dataclass(frozen=True)
class Segments:
    """Observed segments of a cleaned trajectory."""
    nodes: Tuple[Point, ...]
    preds: Tuple[Point, ...]


class SegmentClassifier:
    """Partitions cleaned points into the node and pred segments."""

    def classify(self, points: Iterable[Point]) -> Segments:
        points = list(points)
        nodes = tuple(p for p in points if p.type == PointType.NODE)
        preds = tuple(p for p in points if p.type == PointType.PRED)

        logger.debug(f"Classified {len(nodes)} node points and {len(preds)} pred points")
        return Segments(nodes=nodes, preds=preds)

    @staticmethod
    def locate_gap(segments: Segments) -> Tuple[float, float]:
        """
        Locate the gap between the observed segments.

        Returns:
            (start_ts, end_ts): last node timestamp and first pred timestamp

        Raises:
            PreconditionError: If either segment is empty
        """
        if not segments.nodes:
            raise PreconditionError("No 'node' points present; cannot locate the gap start")
        if not segments.preds:
            raise PreconditionError("No 'pred' points present; cannot locate the gap end")

        return segments.nodes[-1].ts, segments.preds[0].ts
