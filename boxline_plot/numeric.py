from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from boxline_plot.errors import EmptyInputError, ResampleError


MISSING = float("nan")

ArrayLike = Sequence[float] | np.ndarray


def min_max(values: ArrayLike) -> tuple[float, float]:
    """Return ``(min, max)`` of ``values``.

    Missing entries are not filtered; they simply never win a comparison.
    """
    arr = np.asarray(values, dtype=np.float64)
    if arr.size == 0:
        raise EmptyInputError("cannot take min/max of an empty sequence")
    return float(np.fmin.reduce(arr)), float(np.fmax.reduce(arr))


def round_half_away_from_zero(value: float | np.ndarray) -> float | np.ndarray:
    """Round the magnitude half up and reapply the sign (2.5 -> 3, -2.5 -> -3)."""
    arr = np.asarray(value, dtype=np.float64)
    magnitude = np.abs(arr)
    lower = np.floor(magnitude)
    with np.errstate(invalid="ignore"):
        rounded = np.where(magnitude - lower >= 0.5, np.ceil(magnitude), lower)
    out = np.copysign(rounded, arr)
    if out.ndim == 0:
        return float(out)
    return out


def linear_interpolate(before: float | np.ndarray, after: float | np.ndarray, at_point: float | np.ndarray):
    return before + (after - before) * at_point


def resample(series: ArrayLike, target_count: int) -> np.ndarray:
    """Stretch or squeeze ``series`` onto exactly ``target_count`` points.

    The endpoints are copied; every interior point is interpolated between
    its floor and ceiling neighbours in the source. Gaps propagate: any
    interior point touching a missing neighbour is missing too.
    """
    arr = np.asarray(series, dtype=np.float64)
    if target_count < 2:
        raise ResampleError(f"target count must be >= 2, got {target_count}")
    if arr.size < 2:
        raise ResampleError(f"need at least 2 points to resample, got {arr.size}")

    spring = (arr.size - 1) / (target_count - 1)
    positions = np.arange(1, target_count - 1, dtype=np.float64) * spring
    before = np.floor(positions)
    after = np.minimum(np.ceil(positions), arr.size - 1)

    out = np.empty(target_count, dtype=np.float64)
    out[0] = arr[0]
    out[-1] = arr[-1]
    out[1:-1] = linear_interpolate(
        arr[before.astype(np.intp)],
        arr[after.astype(np.intp)],
        positions - before,
    )
    return out


def pad_missing(series: ArrayLike, length: int) -> np.ndarray:
    """Extend ``series`` with trailing missing values up to ``length``."""
    arr = np.asarray(series, dtype=np.float64)
    if arr.size >= length:
        return arr
    return np.concatenate([arr, np.full(length - arr.size, np.nan, dtype=np.float64)])
