from .draw_axis import draw_axis
from .draw_lines import draw_series
from .grid import Cell, Grid, new_grid

__all__ = [
    "Cell",
    "Grid",
    "draw_axis",
    "draw_series",
    "new_grid",
]
