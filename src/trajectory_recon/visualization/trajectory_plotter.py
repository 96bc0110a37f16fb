"""
Trajectory plotting for reconstructed trajectories.

This module renders a merged trajectory as a 3D scatter and line plot,
with markers colored by height. It only consumes the parallel x, y, z
arrays extracted from the reconstruction output.
"""

import logging
from typing import Any, Dict, Optional, Sequence

import numpy as np

logger = logging.getLogger(__name__)


class TrajectoryPlotter:
    """
    3D trajectory plotter.

    Draws markers colored by z on top of a connecting line, with labeled
    X, Y and Z axes.
    """

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        """
        Initialize the trajectory plotter.

        Args:
            config: Plot settings (colorscale, marker_size, title, height)
        """
        self.config = config or {}

        self.colorscale = self.config.get('colorscale', 'viridis')
        self.marker_size = self.config.get('marker_size', 3)
        self.title = self.config.get('title', 'Reconstructed trajectory')
        self.height = self.config.get('height', 5.0)  # Figure height in inches
        self.line_color = self.config.get('line_color', (0.4, 0.4, 0.8, 0.5))
        self.dpi = self.config.get('dpi', 150)

        self.fig = None
        self.ax = None

        self.setup_matplotlib()

    def setup_matplotlib(self):
        """Setup matplotlib for plotting."""
        import matplotlib.pyplot as plt

        self.plt = plt

    def render(self, xs: Sequence[float], ys: Sequence[float], zs: Sequence[float]):
        """
        Render the trajectory.

        Args:
            xs: X coordinates in trajectory order
            ys: Y coordinates in trajectory order
            zs: Z coordinates in trajectory order

        Returns:
            The matplotlib figure
        """
        xs, ys, zs = (np.asarray(a, dtype=float) for a in (xs, ys, zs))
        if not (len(xs) == len(ys) == len(zs)):
            raise ValueError(f"Coordinate arrays differ in length: {len(xs)}, {len(ys)}, {len(zs)}")

        self.close()
        self.fig = self.plt.figure(figsize=(self.height * 1.6, self.height))
        self.ax = self.fig.add_subplot(111, projection='3d')

        self.ax.plot(xs, ys, zs, color=self.line_color, linewidth=1)
        scatter = self.ax.scatter(xs, ys, zs, c=zs, cmap=self.colorscale, s=self.marker_size * 4, alpha=0.8)
        self.fig.colorbar(scatter, ax=self.ax, shrink=0.6, label='Z')

        self.ax.set_xlabel('X')
        self.ax.set_ylabel('Y')
        self.ax.set_zlabel('Z')
        self.ax.set_title(self.title)

        logger.debug(f"Rendered trajectory with {len(xs)} points")
        return self.fig

    def save_plot(self, filename: str, **kwargs) -> bool:
        """
        Save the current plot to file.

        Args:
            filename: Output filename
            **kwargs: Additional arguments for savefig

        Returns:
            bool: True if a figure was saved
        """
        if self.fig is None:
            logger.warning("No figure rendered; nothing to save")
            return False

        self.fig.savefig(filename, dpi=self.dpi, bbox_inches='tight', **kwargs)
        logger.info(f"Plot saved to {filename}")
        return True

    def close(self):
        """Close the current figure."""
        if self.fig is not None:
            self.plt.close(self.fig)
        self.fig = None
        self.ax = None
