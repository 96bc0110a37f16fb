"""
Gap Sampling
============

Query timestamps covering the unobserved interval between segments.
"""

import logging

import numpy as np

logger = logging.getLogger(__name__)

# Guards the sample count against float error in (end - start) / step
STEP_EPSILON = 1e-9


class GapSampler:
    """
    Enumerates timestamps over ``[start_ts, end_ts]`` at a fixed step.

    The first sample is ``start_ts`` and the last is the largest
    ``start_ts + i * step`` not beyond ``end_ts``.
    """

    def __init__(self, step: float = 0.5):
        if not step > 0:
            raise ValueError(f"Sampling step must be positive, got {step}")
        self.step = float(step)

    def sample(self, start_ts: float, end_ts: float) -> np.ndarray:
        """
        Sample the closed gap interval.

        Args:
            start_ts: Last node timestamp
            end_ts: First pred timestamp

        Returns:
            Ordered query timestamps; empty when start_ts > end_ts and a
            single element when they are equal
        """
        if start_ts > end_ts:
            logger.debug(f"No gap to sample: start {start_ts} is after end {end_ts}")
            return np.array([], dtype=float)

        # start + i * step, never accumulated
        count = int(np.floor((end_ts - start_ts) / self.step + STEP_EPSILON)) + 1
        samples = start_ts + self.step * np.arange(count, dtype=float)
        samples[-1] = min(samples[-1], end_ts)

        logger.debug(f"Sampled {count} gap timestamps over [{start_ts}, {end_ts}]")
        return samples
