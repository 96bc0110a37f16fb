"""
Trajectory Interpolator
=======================

High-level interface for reconstructing the unobserved gap between the
node and pred segments of a trajectory.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Tuple

import numpy as np

from ..config import ReconstructionConfig, create_default_config
from ..data_processing.points import Point
from ..data_processing.preprocessing import PointSetCleaner, SegmentClassifier, Segments
from .curve_fitting import BSplineCurve, CurveFitter, FitMethod, TrajectoryCurve
from .gap_sampling import GapSampler
from .trajectory_merger import TrajectoryMerger

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CleanedTrajectory:
    """
    Cleaned observed trajectory with its gap boundaries.

    Attributes:
        points: Observed points ordered by unique timestamps
        segments: Node and pred segments
        start_ts: Last node timestamp
        end_ts: First pred timestamp
    """
    points: Tuple[Point, ...]
    segments: Segments
    start_ts: float
    end_ts: float

    @classmethod
    def from_points(cls, points: Iterable[Point]) -> 'CleanedTrajectory':
        """
        Clean, classify and locate the gap.

        Raises:
            DataIntegrityError: If timestamps cannot be strictly ordered
            PreconditionError: If the node or pred segment is empty
        """
        cleaned = PointSetCleaner().clean(points)
        classifier = SegmentClassifier()
        segments = classifier.classify(cleaned)
        start_ts, end_ts = classifier.locate_gap(segments)

        return cls(
            points=tuple(cleaned),
            segments=segments,
            start_ts=start_ts,
            end_ts=end_ts
        )


class TrajectoryInterpolator:
    """
    Reconstructs a trajectory across the gap between observed segments.

    Input points are cleaned once on construction; a failed construction
    raises and leaves no instance. Every reconstruction call reads the
    cleaned state and returns a new list.
    """

    def __init__(self, points: Iterable[Point], config: Optional[ReconstructionConfig] = None):
        """
        Initialize interpolator.

        Args:
            points: Raw node and pred points in any order
            config: Reconstruction configuration
        """
        self.config = config or create_default_config()

        self.trajectory = CleanedTrajectory.from_points(points)

        self.fitter = CurveFitter(FitMethod(self.config.fit_method), self.config.bspline_degree)
        self.sampler = GapSampler(self.config.sampling_step)
        self.merger = TrajectoryMerger(self.config.z_floor)

        logger.info(
            f"Initialized TrajectoryInterpolator with {len(self.points)} points "
            f"({len(self.nodes)} node, {len(self.preds)} pred), "
            f"gap [{self.start_ts}, {self.end_ts}], method: {self.fitter.method.value}"
        )

    @property
    def points(self) -> Tuple[Point, ...]:
        return self.trajectory.points

    @property
    def nodes(self) -> Tuple[Point, ...]:
        return self.trajectory.segments.nodes

    @property
    def preds(self) -> Tuple[Point, ...]:
        return self.trajectory.segments.preds

    @property
    def start_ts(self) -> float:
        return self.trajectory.start_ts

    @property
    def end_ts(self) -> float:
        return self.trajectory.end_ts

    def fit_curve(self) -> TrajectoryCurve:
        """Fit the configured curve over all observed points."""
        return self.fitter.fit(list(self.points))

    def gap_timestamps(self) -> np.ndarray:
        """Query timestamps covering the gap at the configured step."""
        return self.sampler.sample(self.start_ts, self.end_ts)

    def interpolate(self, query_ts: Sequence[float]) -> List[Point]:
        """
        Estimate points at arbitrary timestamps.

        Args:
            query_ts: Timestamps within the observed time range

        Returns:
            ``spline`` points in query order
        """
        return self.merger.build_spline_points(self.fit_curve(), query_ts)

    def interpolate_miss_range(self) -> List[Point]:
        """Estimate points at the sampled gap timestamps."""
        return self.interpolate(self.gap_timestamps())

    def get_full_trajectory(self, query_ts: Sequence[float]) -> List[Point]:
        """
        Merge observed points with points estimated at ``query_ts``.

        Returns:
            Time-ordered merged trajectory
        """
        synthetic = self.interpolate(query_ts)
        merged = self.merger.merge(self.points, synthetic)

        logger.info(
            f"Reconstructed trajectory with {len(merged)} points "
            f"({len(merged) - len(self.points)} estimated)"
        )
        return merged

    def get_full_miss_trajectory(self) -> List[Point]:
        """Merge observed points with the estimated gap: the main entry point."""
        return self.get_full_trajectory(self.gap_timestamps())

    def resample(self, count: Optional[int] = None) -> List[Point]:
        """
        Sample the fitted curve at evenly spaced positions over the whole
        observed range.

        For B-splines the samples are equally spaced in the normalized
        parameter; for cubic splines they are equally spaced in time. The
        two coincide because the parameter is linear in time.

        Args:
            count: Number of samples, defaults to ``config.bspline_samples``

        Returns:
            ``spline`` points ordered by timestamp
        """
        if count is None:
            count = self.config.bspline_samples
        curve = self.fit_curve()

        if isinstance(curve, BSplineCurve):
            timestamps, positions = curve.sample(count)
        else:
            if count < 2:
                raise ValueError(f"Sample count must be at least 2, got {count}")
            timestamps = np.linspace(curve.ts_min, curve.ts_max, count)
            positions = curve.evaluate(timestamps)

        return self.merger.points_from_positions(timestamps, positions)


def reconstruct_trajectory(points: Iterable[Point],
                           config: Optional[ReconstructionConfig] = None) -> List[Point]:
    """Clean, fit and merge in one call."""
    return TrajectoryInterpolator(points, config).get_full_miss_trajectory()
