"""
Data Processing Utilities
=========================

Summary statistics for reconstructed trajectories.
"""

import logging
from dataclasses import dataclass
from typing import Dict, List, Tuple

import numpy as np

from .points import Point, PointType

logger = logging.getLogger(__name__)


@dataclass
class TrajectoryStats:
    """Statistics for trajectory analysis."""
    num_points: int
    counts_by_type: Dict[str, int]
    duration: float
    total_length: float
    z_range: Tuple[float, float]
    num_below_floor: int


class DataUtils:
    """Utility functions for trajectory data."""

    @staticmethod
    def compute_trajectory_stats(points: List[Point], z_floor: float = 0.0) -> TrajectoryStats:
        """Compute summary statistics for an ordered trajectory."""
        num_points = len(points)
        counts_by_type = {t.value: 0 for t in PointType}
        for point in points:
            counts_by_type[point.type.value] += 1

        if num_points == 0:
            return TrajectoryStats(
                num_points=0,
                counts_by_type=counts_by_type,
                duration=0.0,
                total_length=0.0,
                z_range=(0.0, 0.0),
                num_below_floor=0
            )

        positions = np.array([p.position for p in points], dtype=float)
        duration = points[-1].ts - points[0].ts

        # Path length
        if num_points > 1:
            total_length = float(np.sum(np.linalg.norm(np.diff(positions, axis=0), axis=1)))
        else:
            total_length = 0.0

        z = positions[:, 2]

        return TrajectoryStats(
            num_points=num_points,
            counts_by_type=counts_by_type,
            duration=float(duration),
            total_length=total_length,
            z_range=(float(np.min(z)), float(np.max(z))),
            num_below_floor=int(np.sum(z < z_floor))
        )
