from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
import logging
import math

import numpy as np

from boxline_plot.errors import EmptyInputError
from boxline_plot.numeric import min_max, pad_missing, resample, round_half_away_from_zero
from boxline_plot.options import DEFAULT_OFFSET, ChartConfig


LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class ChartScale:
    """Mapping from data values onto the integer row grid.

    Row coordinates run from 0 (``minimum``) to ``rows`` (``maximum``); the
    grid itself stores the maximum on its first line.
    """

    minimum: float
    maximum: float
    interval: float
    height: int
    offset: int
    ratio: float
    min2: int
    max2: int
    rows: int
    len_max: int

    @property
    def width(self) -> int:
        return self.len_max + self.offset

    def row_of(self, value: float) -> int:
        return int(round_half_away_from_zero(value * self.ratio)) - self.min2

    def grid_row(self, value: float) -> int:
        return self.rows - self.row_of(value)


def prepare_series(data: Sequence[np.ndarray], config: ChartConfig) -> tuple[list[np.ndarray], int]:
    """Pad and resample ``data`` to the configured width.

    Returns the column-aligned series and the number of data columns.
    """
    len_max = max((arr.size for arr in data), default=0)
    if config.width <= 0:
        for index, arr in enumerate(data):
            if arr.size == 0:
                raise EmptyInputError(f"series {index} is empty and resampling is off")
        return [np.asarray(arr, dtype=np.float64) for arr in data], len_max

    prepared: list[np.ndarray] = []
    for index, arr in enumerate(data):
        if arr.size < len_max:
            LOGGER.debug("padding series %d from %d to %d points", index, arr.size, len_max)
        prepared.append(resample(pad_missing(arr, len_max), config.width))
    return prepared, config.width


def compute_scale(data: Sequence[np.ndarray], config: ChartConfig, len_max: int) -> ChartScale:
    finite = [arr[np.isfinite(arr)] for arr in data]
    values = np.concatenate(finite) if finite else np.empty(0, dtype=np.float64)
    if values.size == 0:
        raise EmptyInputError("no finite values to scale")

    minimum, maximum = min_max(values)
    interval = abs(maximum - minimum)

    height = config.height
    if height <= 0:
        # A flat series has no range to spread over rows.
        height = 0 if interval == 0 else int(math.floor(interval))

    offset = config.offset if config.offset > 0 else DEFAULT_OFFSET
    ratio = height / interval if interval != 0 else 1.0

    min2 = int(round_half_away_from_zero(minimum * ratio))
    max2 = int(round_half_away_from_zero(maximum * ratio))
    rows = abs(max2 - min2)

    LOGGER.debug(
        "scale: min=%g max=%g interval=%g height=%d ratio=%g rows=%d",
        minimum,
        maximum,
        interval,
        height,
        ratio,
        rows,
    )
    return ChartScale(
        minimum=minimum,
        maximum=maximum,
        interval=interval,
        height=height,
        offset=offset,
        ratio=ratio,
        min2=min2,
        max2=max2,
        rows=rows,
        len_max=len_max,
    )
