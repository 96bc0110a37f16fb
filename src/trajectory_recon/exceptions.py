"""
Reconstruction errors.

All errors raised by the reconstruction engine derive from
``ReconstructionError`` so callers can surface a failed reconstruction
with a single ``except`` clause.
"""


class ReconstructionError(ValueError):
    """Base class for trajectory reconstruction failures."""


class DataIntegrityError(ReconstructionError):
    """Cleaned input still violates strict timestamp ordering, or carries an invalid label."""


class FitError(ReconstructionError):
    """Too few points for the selected curve-fitting strategy."""


class PreconditionError(ReconstructionError):
    """The node or pred segment is empty, so no gap can be located."""


class QueryRangeError(ReconstructionError):
    """A curve was queried outside the observed time range."""
