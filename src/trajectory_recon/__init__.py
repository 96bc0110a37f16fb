"""
Trajectory Reconstruction
=========================

Reconstructs the unobserved gap between the leading ("node") and trailing
("pred") segments of a sparse 3D trajectory by per-axis curve fitting,
and merges the estimate with the observed points into one time-ordered
trajectory.

Example:
--------
    from trajectory_recon import TrajectoryInterpolator, load_points

    interpolator = TrajectoryInterpolator(load_points("positions.json"))
    trajectory = interpolator.get_full_miss_trajectory()
"""

from .config import ReconstructionConfig, create_bspline_config, create_default_config
from .data_processing import (
    DataUtils,
    Point,
    PointType,
    TrajectoryStats,
    load_points,
    points_from_records,
    points_to_records,
    trajectory_arrays
)
from .exceptions import DataIntegrityError, FitError, PreconditionError, QueryRangeError, ReconstructionError
from .trajectory_generation import (
    CurveFitter,
    FitMethod,
    GapSampler,
    TrajectoryInterpolator,
    TrajectoryMerger,
    reconstruct_trajectory
)

__version__ = "0.1.0"

__all__ = [
    'ReconstructionConfig',
    'create_default_config',
    'create_bspline_config',
    'DataUtils',
    'Point',
    'PointType',
    'TrajectoryStats',
    'load_points',
    'points_from_records',
    'points_to_records',
    'trajectory_arrays',
    'ReconstructionError',
    'DataIntegrityError',
    'FitError',
    'PreconditionError',
    'QueryRangeError',
    'CurveFitter',
    'FitMethod',
    'GapSampler',
    'TrajectoryInterpolator',
    'TrajectoryMerger',
    'reconstruct_trajectory'
]
