"""
Visualization Package
====================

Rendering of reconstructed trajectories.

Classes:
--------
- TrajectoryPlotter: 3D scatter and line plot colored by height
"""

from .trajectory_plotter import TrajectoryPlotter

__all__ = [
    'TrajectoryPlotter'
]
