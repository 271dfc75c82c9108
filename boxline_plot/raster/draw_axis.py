from __future__ import annotations

from boxline_plot.colors import AnsiColor
from boxline_plot.labels import AxisLabels
from boxline_plot.raster.grid import Grid


AXIS = "┤"


def draw_axis(grid: Grid, labels: AxisLabels, offset: int, label_color: AnsiColor, axis_color: AnsiColor) -> None:
    """Write one label and one axis tick per grid row.

    A label occupies a single logical cell placed so that it ends just before
    the axis column when the gutter is wide enough.
    """
    for row, label in enumerate(labels.labels):
        col = max(offset - len(label), 0)
        grid.put(row, col, label, label_color)
        grid.put(row, offset - 1, AXIS, axis_color)
