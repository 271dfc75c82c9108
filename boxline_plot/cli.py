from __future__ import annotations

import argparse
import logging
import re
import sys
from typing import TextIO

import numpy as np

from boxline_plot import options as opt
from boxline_plot.api import plot_many
from boxline_plot.colors import COLOR_NAMES
from boxline_plot.errors import PlotDataError
from boxline_plot.terminal import clear_screen


_FIELDS = re.compile(r"\s*,\s*|\s+")


def demo_series() -> np.ndarray:
    i = np.arange(105, dtype=np.float64)
    return 15.0 * np.sin(i * (4.0 * np.pi / 120.0))


def parse_values(tokens: list[str]) -> list[float]:
    """Parse whitespace or comma separated numbers.

    An empty field between commas (``1,,3``) is a missing value.
    """
    text = " ".join(tokens).strip()
    if not text:
        return []
    values: list[float] = []
    for part in _FIELDS.split(text):
        if not part:
            values.append(float("nan"))
            continue
        try:
            values.append(float(part))
        except ValueError as exc:
            raise PlotDataError(f"not a number: {part!r}") from exc
    return values


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="boxline-plot", description="Draw a line chart in the terminal.")
    parser.add_argument("values", nargs="*", help="Data points. Read from stdin when omitted.")
    parser.add_argument("--width", type=int, default=None, help="Resample to this many columns (0 disables).")
    parser.add_argument("--height", type=int, default=None, help="Chart height in rows (0 derives it from the data).")
    parser.add_argument("--offset", type=int, default=None, help="Columns reserved for the axis gutter.")
    parser.add_argument("--precision", type=int, default=None, help="Digits after the decimal point in labels.")
    parser.add_argument("--caption", default=None)
    colors = sorted(COLOR_NAMES)
    parser.add_argument("--caption-color", choices=colors, default=None)
    parser.add_argument("--axis-color", choices=colors, default=None)
    parser.add_argument("--label-color", choices=colors, default=None)
    parser.add_argument(
        "--series-color",
        choices=colors,
        action="append",
        default=None,
        help="Series color; repeat for additional series.",
    )
    parser.add_argument("--demo", action="store_true", help="Plot a built-in sine wave.")
    parser.add_argument("--clear", action="store_true", help="Clear the screen before drawing.")
    parser.add_argument("--verbose", action="store_true")
    return parser


def _chart_options(args: argparse.Namespace) -> list[opt.ChartOption]:
    chosen: list[opt.ChartOption] = []
    if args.width is not None:
        chosen.append(opt.width(args.width))
    if args.height is not None:
        chosen.append(opt.height(args.height))
    if args.offset is not None:
        chosen.append(opt.offset(args.offset))
    if args.precision is not None:
        chosen.append(opt.precision(args.precision))
    if args.caption is not None:
        chosen.append(opt.caption(args.caption))
    if args.caption_color is not None:
        chosen.append(opt.caption_color(args.caption_color))
    if args.axis_color is not None:
        chosen.append(opt.axis_color(args.axis_color))
    if args.label_color is not None:
        chosen.append(opt.label_color(args.label_color))
    if args.series_color:
        chosen.append(opt.series_colors(args.series_color))
    return chosen


def main(argv: list[str] | None = None, *, stdin: TextIO | None = None, stdout: TextIO | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)
    out = stdout if stdout is not None else sys.stdout

    try:
        if args.demo:
            series = demo_series()
            chosen = [opt.height(10), *_chart_options(args)]
        else:
            tokens = args.values or (stdin if stdin is not None else sys.stdin).read().split()
            series = np.asarray(parse_values(tokens), dtype=np.float64)
            chosen = _chart_options(args)
        chart = plot_many([series], *chosen)
    except (PlotDataError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    if args.clear:
        clear_screen(out)
    out.write(chart + "\n")
    return 0
