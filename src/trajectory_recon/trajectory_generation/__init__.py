"""
Trajectory Generation Package
============================

Curve fitting, gap sampling and merging for reconstructing the
unobserved part of a trajectory.

Classes:
--------
- TrajectoryInterpolator: Main reconstruction interface
- CurveFitter: Per-axis natural cubic spline or uniform cubic B-spline fitting
- GapSampler: Query timestamps over the gap
- TrajectoryMerger: Merge and plausibility checking
"""

from .curve_fitting import (
    BSplineCurve,
    CubicSplineCurve,
    CurveFitter,
    FitMethod,
    TrajectoryCurve,
    uniform_knot_vector
)
from .gap_sampling import GapSampler
from .trajectory_merger import TrajectoryMerger
from .trajectory_interpolator import CleanedTrajectory, TrajectoryInterpolator, reconstruct_trajectory

__all__ = [
    'BSplineCurve',
    'CubicSplineCurve',
    'CurveFitter',
    'FitMethod',
    'TrajectoryCurve',
    'uniform_knot_vector',
    'GapSampler',
    'TrajectoryMerger',
    'CleanedTrajectory',
    'TrajectoryInterpolator',
    'reconstruct_trajectory'
]
