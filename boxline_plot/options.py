from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping, Sequence
from dataclasses import dataclass, replace
from typing import Any

from boxline_plot.colors import AnsiColor, parse_color


DEFAULT_WIDTH = 150
DEFAULT_HEIGHT = 10
DEFAULT_OFFSET = 3
DEFAULT_PRECISION = 2


@dataclass(frozen=True)
class ChartConfig:
    """Fully resolved display options for one render call.

    ``width`` of 0 disables resampling and ``height`` of 0 derives the row
    count from the data range. ``offset`` is normalized by the scaling step.
    """

    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    offset: int = DEFAULT_OFFSET
    caption: str = ""
    precision: int = DEFAULT_PRECISION
    caption_color: AnsiColor = AnsiColor.WHITE
    axis_color: AnsiColor = AnsiColor.WHITE
    label_color: AnsiColor = AnsiColor.ALICE_BLUE
    series_colors: tuple[AnsiColor, ...] = (
        AnsiColor.ALICE_BLUE,
        AnsiColor.SILVER,
        AnsiColor.WHITE,
        AnsiColor.BLACK,
    )

    def series_color(self, index: int) -> AnsiColor:
        if 0 <= index < len(self.series_colors):
            return self.series_colors[index]
        return AnsiColor.DEFAULT


DEFAULT_CONFIG = ChartConfig()

ChartOption = Callable[[ChartConfig], ChartConfig]


def width(w: int) -> ChartOption:
    value = int(w) if w > 0 else 0
    return lambda c: replace(c, width=value)


def height(h: int) -> ChartOption:
    value = int(h) if h > 0 else 0
    return lambda c: replace(c, height=value)


def offset(o: int) -> ChartOption:
    value = int(o)
    return lambda c: replace(c, offset=value)


def precision(p: int) -> ChartOption:
    value = max(0, int(p))
    return lambda c: replace(c, precision=value)


def caption(text: str) -> ChartOption:
    value = str(text).strip()
    return lambda c: replace(c, caption=value)


def caption_color(color: AnsiColor | str) -> ChartOption:
    value = parse_color(color)
    return lambda c: replace(c, caption_color=value)


def axis_color(color: AnsiColor | str) -> ChartOption:
    value = parse_color(color)
    return lambda c: replace(c, axis_color=value)


def label_color(color: AnsiColor | str) -> ChartOption:
    value = parse_color(color)
    return lambda c: replace(c, label_color=value)


def series_colors(colors: Sequence[AnsiColor | str]) -> ChartOption:
    value = tuple(parse_color(color) for color in colors)
    return lambda c: replace(c, series_colors=value)


OPTION_SETTERS: dict[str, Callable[[Any], ChartOption]] = {
    "width": width,
    "height": height,
    "offset": offset,
    "precision": precision,
    "caption": caption,
    "caption_color": caption_color,
    "axis_color": axis_color,
    "label_color": label_color,
    "series_colors": series_colors,
}


def configure(options: Iterable[ChartOption] = (), base: ChartConfig = DEFAULT_CONFIG) -> ChartConfig:
    config = base
    for option in options:
        config = option(config)
    return config


def options_from_overrides(overrides: Mapping[str, Any]) -> list[ChartOption]:
    """Translate keyword overrides (``height=4``) into option setters."""

    unknown = sorted(key for key in overrides if key not in OPTION_SETTERS)
    if unknown:
        raise TypeError(f"unknown chart option(s): {', '.join(unknown)}")
    return [OPTION_SETTERS[key](value) for key, value in overrides.items()]
