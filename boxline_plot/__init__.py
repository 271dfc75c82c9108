from boxline_plot.api import plot, plot_many, render
from boxline_plot.colors import AnsiColor, parse_color
from boxline_plot.errors import EmptyInputError, PlotDataError, ResampleError
from boxline_plot.options import ChartConfig, configure

__all__ = [
    "AnsiColor",
    "ChartConfig",
    "EmptyInputError",
    "PlotDataError",
    "ResampleError",
    "configure",
    "parse_color",
    "plot",
    "plot_many",
    "render",
]
