from __future__ import annotations

import numpy as np

from boxline_plot.colors import AnsiColor
from boxline_plot.raster.grid import Grid
from boxline_plot.scales import ChartScale


ORIGIN = "┼"
HORIZONTAL = "─"
VERTICAL = "│"
DANGLING_END = "╴"
DANGLING_START = "╶"
FALL_TOP = "╮"
FALL_BOTTOM = "╰"
RISE_TOP = "╭"
RISE_BOTTOM = "╯"


def draw_series(grid: Grid, series: np.ndarray, scale: ChartScale, color: AnsiColor, axis_color: AnsiColor) -> None:
    if series.size == 0:
        return
    rows = scale.rows
    axis_col = scale.offset - 1

    if np.isfinite(series[0]):
        grid.put(scale.grid_row(series[0]), axis_col, ORIGIN, axis_color)

    for x in range(series.size - 1):
        d0 = float(series[x])
        d1 = float(series[x + 1])
        col = x + scale.offset
        missing0 = not np.isfinite(d0)
        missing1 = not np.isfinite(d1)

        if missing0 and missing1:
            continue
        if missing1:
            grid.put(scale.grid_row(d0), col, DANGLING_END, color)
            continue
        if missing0:
            grid.put(scale.grid_row(d1), col, DANGLING_START, color)
            continue

        y0 = scale.row_of(d0)
        y1 = scale.row_of(d1)
        if y0 == y1:
            grid.put(rows - y0, col, HORIZONTAL)
        else:
            if y0 > y1:
                grid.put(rows - y1, col, FALL_BOTTOM)
                grid.put(rows - y0, col, FALL_TOP)
            else:
                grid.put(rows - y1, col, RISE_TOP)
                grid.put(rows - y0, col, RISE_BOTTOM)
            for y in range(min(y0, y1) + 1, max(y0, y1)):
                grid.put(rows - y, col, VERTICAL)

        for y in range(min(y0, y1), max(y0, y1) + 1):
            grid.paint(rows - y, col, color)
