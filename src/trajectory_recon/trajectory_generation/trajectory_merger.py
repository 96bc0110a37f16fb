"""
Trajectory Merging
==================

Combines observed points with curve-estimated gap points into a single
time-ordered trajectory and flags physically implausible heights.
"""

import logging
from typing import List, Sequence

import numpy as np

from ..data_processing.points import Point, PointType
from .curve_fitting import TrajectoryCurve

logger = logging.getLogger(__name__)


class TrajectoryMerger:
    """
    Merges observed and synthetic points.

    Observed coordinates are never changed. When a query timestamp
    coincides with an observed one, the observed point is kept and the
    synthetic point is left out, so merged timestamps stay strictly
    increasing.
    """

    def __init__(self, z_floor: float = 0.0):
        """
        Initialize merger.

        Args:
            z_floor: Heights below this value trigger a plausibility warning
        """
        self.z_floor = z_floor

    def build_spline_points(self, curve: TrajectoryCurve, query_ts: Sequence[float]) -> List[Point]:
        """Evaluate the curve at each query timestamp as ``spline`` points."""
        query_ts = np.asarray(query_ts, dtype=float)
        return self.points_from_positions(query_ts, curve.evaluate(query_ts))

    @staticmethod
    def points_from_positions(timestamps: np.ndarray, positions: np.ndarray) -> List[Point]:
        """Wrap estimated positions [n, 3] as ``spline`` points."""
        return [
            Point(ts=float(t), x=float(pos[0]), y=float(pos[1]), z=float(pos[2]), type=PointType.SPLINE)
            for t, pos in zip(timestamps, positions)
        ]

    def merge(self, observed: Sequence[Point], synthetic: Sequence[Point]) -> List[Point]:
        """
        Merge observed and synthetic points and sort by timestamp.

        Args:
            observed: Cleaned observed points
            synthetic: Curve-estimated points

        Returns:
            New time-ordered list
        """
        taken = {p.ts for p in observed}
        merged = list(observed)
        n_skipped = 0

        for point in synthetic:
            if point.ts in taken:
                n_skipped += 1
                continue
            taken.add(point.ts)
            merged.append(point)

        merged.sort(key=lambda p: p.ts)

        if n_skipped:
            logger.debug(f"Kept observed points at {n_skipped} timestamps shared with the gap samples")

        self.check_plausibility(merged)
        return merged

    def check_plausibility(self, points: Sequence[Point]) -> List[Point]:
        """
        Flag points whose height is below the floor.

        Offending points are reported, never removed or clamped.

        Returns:
            Points below the floor
        """
        below = [p for p in points if p.z < self.z_floor]

        if below:
            lowest = min(below, key=lambda p: p.z)
            logger.warning(
                f"{len(below)} points have z below {self.z_floor} and may violate physical "
                f"constraints (lowest z={lowest.z:.4f} at ts={lowest.ts})"
            )

        return below
