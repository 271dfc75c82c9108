from __future__ import annotations

from dataclasses import dataclass
import math

from boxline_plot.scales import ChartScale


@dataclass(frozen=True)
class AxisLabels:
    precision: int
    max_width: int
    labels: tuple[str, ...]

    @property
    def label_width(self) -> int:
        return self.max_width + 1


def resolve_precision(minimum: float, maximum: float, precision: int) -> int:
    """Adjust the configured decimal count to the magnitude of the data.

    Small values gain digits so they stay distinguishable; values of 1000 and
    up drop decimals entirely.
    """
    if minimum == 0 and maximum == 0:
        log_max = -1
    else:
        log_max = math.floor(math.log10(max(abs(maximum), abs(minimum))))

    if log_max < 0:
        # log_max is whole after floor(), so the leading zero is already counted.
        return precision + abs(log_max) - 1
    if log_max > 2:
        return 0
    return precision


def format_value(value: float, precision: int, width: int = 0) -> str:
    return f"{value:>{width}.{precision}f}"


def build_axis_labels(scale: ChartScale, precision: int) -> AxisLabels:
    resolved = resolve_precision(scale.minimum, scale.maximum, precision)
    max_width = max(
        len(format_value(scale.maximum, resolved)),
        len(format_value(scale.minimum, resolved)),
    )

    labels: list[str] = []
    for y in range(scale.min2, scale.max2 + 1):
        if scale.rows > 0:
            magnitude = scale.maximum - (y - scale.min2) * scale.interval / scale.rows
        else:
            magnitude = float(y)
        labels.append(format_value(magnitude, resolved, max_width + 1))
    return AxisLabels(precision=resolved, max_width=max_width, labels=tuple(labels))
