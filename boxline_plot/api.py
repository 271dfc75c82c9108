from __future__ import annotations

from collections.abc import Sequence
import logging
from typing import Any

import numpy as np

from boxline_plot.adapters.normalize import normalize_many
from boxline_plot.compose import compose
from boxline_plot.labels import build_axis_labels
from boxline_plot.options import ChartConfig, ChartOption, configure, options_from_overrides
from boxline_plot.raster import draw_axis, draw_series, new_grid
from boxline_plot.scales import compute_scale, prepare_series


LOGGER = logging.getLogger(__name__)


def plot(series: Any, *options: ChartOption, **overrides: Any) -> str:
    """Render a single series as a line chart."""
    return plot_many([series], *options, **overrides)


def plot_many(data: Any, *options: ChartOption, **overrides: Any) -> str:
    """Render several series onto one shared chart.

    ``options`` are setters from :mod:`boxline_plot.options` applied in order;
    keyword ``overrides`` (``height=4``) are applied after them.
    """
    config = configure([*options, *options_from_overrides(overrides)])
    return render(normalize_many(data), config)


def render(data: Sequence[np.ndarray], config: ChartConfig) -> str:
    series, len_max = prepare_series(data, config)
    scale = compute_scale(series, config, len_max)
    labels = build_axis_labels(scale, config.precision)

    grid = new_grid(scale.rows + 1, scale.width)
    draw_axis(grid, labels, scale.offset, config.label_color, config.axis_color)
    for index, values in enumerate(series):
        if not np.any(np.isfinite(values)):
            LOGGER.warning("series %d has no finite values; nothing drawn", index)
            continue
        draw_series(grid, values, scale, config.series_color(index), config.axis_color)

    return compose(
        grid,
        caption=config.caption,
        caption_color=config.caption_color,
        indent=scale.offset + labels.max_width,
        len_max=scale.len_max,
    )
