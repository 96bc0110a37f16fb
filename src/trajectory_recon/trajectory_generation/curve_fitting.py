"""
Curve Fitting
=============

Per-axis curve fitting over the observed trajectory points.

Two strategies are available and are selected per reconstruction:

- Natural cubic spline over real timestamps (C2, zero second derivative
  at both ends). Passes through every observed point.
- Clamped uniform cubic B-spline over a normalized parameter in [0, 1].
  Observed coordinates act as control points, so the curve passes through
  the first and last points only. Timestamps are mapped to the parameter
  with ``u = (ts - ts_min) / (ts_max - ts_min)``.

Each axis is fitted independently.
"""

import logging
from abc import ABC, abstractmethod
from enum import Enum
from typing import Dict, List, Sequence, Tuple

import numpy as np
from scipy.interpolate import BSpline, CubicSpline

from ..data_processing.points import Point
from ..exceptions import FitError, QueryRangeError

logger = logging.getLogger(__name__)

AXES = ('x', 'y', 'z')

# Tolerance for queries that land on the domain boundary after float stepping
DOMAIN_TOLERANCE = 1e-9


class FitMethod(Enum):
    """Curve-fitting strategies."""
    CUBIC_SPLINE = "cubic_spline"
    BSPLINE = "bspline"


def uniform_knot_vector(n_points: int, degree: int) -> np.ndarray:
    """
    Build a clamped uniform knot vector on [0, 1].

    The end knots are repeated ``degree`` extra times so the curve starts
    at the first control point and ends at the last one. Interior knots
    are evenly spaced. The vector has ``n_points + degree + 1`` entries.
    """
    interior = np.linspace(0.0, 1.0, n_points - degree + 1)
    return np.concatenate((np.zeros(degree), interior, np.ones(degree)))


class TrajectoryCurve(ABC):
    """
    Fitted curve mapping timestamps to 3D positions.

    Attributes:
        ts_min: First observed timestamp
        ts_max: Last observed timestamp
        method: Strategy used to build the curve
    """

    method: FitMethod

    def __init__(self, timestamps: np.ndarray):
        self.ts_min = float(timestamps[0])
        self.ts_max = float(timestamps[-1])

    @property
    def domain(self) -> Tuple[float, float]:
        return self.ts_min, self.ts_max

    def _check_domain(self, query_ts: np.ndarray) -> None:
        if query_ts.size == 0:
            return
        low = self.ts_min - DOMAIN_TOLERANCE
        high = self.ts_max + DOMAIN_TOLERANCE
        if np.min(query_ts) < low or np.max(query_ts) > high:
            raise QueryRangeError(
                f"Query timestamps [{np.min(query_ts)}, {np.max(query_ts)}] fall outside "
                f"the fitted range [{self.ts_min}, {self.ts_max}]"
            )

    def evaluate(self, query_ts: Sequence[float]) -> np.ndarray:
        """
        Evaluate the curve at query timestamps.

        Args:
            query_ts: Timestamps within the fitted range

        Returns:
            positions: Estimated positions [n_queries, 3]
        """
        query_ts = np.asarray(query_ts, dtype=float)
        self._check_domain(query_ts)
        query_ts = np.clip(query_ts, self.ts_min, self.ts_max)

        positions = np.zeros((len(query_ts), len(AXES)))
        for j, axis in enumerate(AXES):
            positions[:, j] = self._evaluate_axis(axis, query_ts)
        return positions

    @abstractmethod
    def _evaluate_axis(self, axis: str, query_ts: np.ndarray) -> np.ndarray:
        """Evaluate a single axis at in-range timestamps."""


class CubicSplineCurve(TrajectoryCurve):
    """Natural cubic spline through every observed point."""

    method = FitMethod.CUBIC_SPLINE
    min_points = 2

    def __init__(self, timestamps: np.ndarray, coordinates: np.ndarray):
        super().__init__(timestamps)
        self.splines: Dict[str, CubicSpline] = {}
        for j, axis in enumerate(AXES):
            self.splines[axis] = CubicSpline(timestamps, coordinates[:, j], bc_type='natural')

    def _evaluate_axis(self, axis: str, query_ts: np.ndarray) -> np.ndarray:
        return self.splines[axis](query_ts)


class BSplineCurve(TrajectoryCurve):
    """Clamped uniform B-spline with the observed points as control points."""

    method = FitMethod.BSPLINE

    def __init__(self, timestamps: np.ndarray, coordinates: np.ndarray, degree: int = 3):
        super().__init__(timestamps)
        self.degree = degree
        self.knots = uniform_knot_vector(len(timestamps), degree)
        self.splines: Dict[str, BSpline] = {}
        for j, axis in enumerate(AXES):
            self.splines[axis] = BSpline(self.knots, coordinates[:, j], degree)

    def to_parameter(self, query_ts: np.ndarray) -> np.ndarray:
        """Map timestamps onto the normalized parameter in [0, 1]."""
        return (np.asarray(query_ts, dtype=float) - self.ts_min) / (self.ts_max - self.ts_min)

    def from_parameter(self, u: np.ndarray) -> np.ndarray:
        """Map normalized parameters back onto timestamps."""
        return self.ts_min + np.asarray(u, dtype=float) * (self.ts_max - self.ts_min)

    def _evaluate_axis(self, axis: str, query_ts: np.ndarray) -> np.ndarray:
        u = np.clip(self.to_parameter(query_ts), 0.0, 1.0)
        return self.splines[axis](u)

    def sample(self, count: int) -> Tuple[np.ndarray, np.ndarray]:
        """
        Sample the curve at equally spaced parameter values.

        Args:
            count: Number of samples (at least 2)

        Returns:
            timestamps: Sample timestamps mapped back to real time [count]
            positions: Sampled positions [count, 3]
        """
        if count < 2:
            raise ValueError(f"Sample count must be at least 2, got {count}")

        u = np.linspace(0.0, 1.0, count)
        positions = np.column_stack([self.splines[axis](u) for axis in AXES])
        return self.from_parameter(u), positions


class CurveFitter:
    """
    Fits one interpolating curve per spatial axis.

    The same strategy is applied to x, y and z within one fit.
    """

    def __init__(self, method: FitMethod = FitMethod.CUBIC_SPLINE, degree: int = 3):
        """
        Initialize curve fitter.

        Args:
            method: Fitting strategy
            degree: B-spline degree (ignored for cubic splines)
        """
        self.method = FitMethod(method)
        self.degree = degree

    @property
    def min_points(self) -> int:
        if self.method == FitMethod.BSPLINE:
            return self.degree + 1
        return CubicSplineCurve.min_points

    def fit(self, points: List[Point]) -> TrajectoryCurve:
        """
        Fit curves over time-ordered points with unique timestamps.

        Args:
            points: Cleaned observed points

        Returns:
            Fitted curve

        Raises:
            FitError: If there are too few points for the strategy
        """
        if len(points) < self.min_points:
            raise FitError(
                f"{self.method.value} fitting needs at least {self.min_points} points, "
                f"got {len(points)}"
            )

        timestamps = np.array([p.ts for p in points], dtype=float)
        coordinates = np.array([p.position for p in points], dtype=float)

        if self.method == FitMethod.BSPLINE:
            curve = BSplineCurve(timestamps, coordinates, self.degree)
        else:
            curve = CubicSplineCurve(timestamps, coordinates)

        logger.debug(f"Fitted {self.method.value} curves over {len(points)} points")
        return curve
