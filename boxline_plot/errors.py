from __future__ import annotations


class PlotDataError(ValueError):
    """Raised when series data cannot be charted."""


class EmptyInputError(PlotDataError):
    """Raised when a range scan has no values to work with."""


class ResampleError(PlotDataError):
    """Raised when a series cannot be resampled to the requested width."""
