from __future__ import annotations

from enum import Enum


ESC = "\x1b"


class AnsiColor(Enum):
    """Color tags understood by the compositor.

    Values are the legacy 256-color codes. Several tags share one escape
    sequence; see ``ESCAPE_SEQUENCES``.
    """

    DEFAULT = 0
    ALICE_BLUE = 255
    SILVER = 7
    WHITE = 15
    BLACK = 188

    @property
    def escape(self) -> str:
        return ESCAPE_SEQUENCES.get(self, f"{ESC}[38;5;{self.value}m")

    def __str__(self) -> str:
        return self.escape


ESCAPE_SEQUENCES: dict[AnsiColor, str] = {
    AnsiColor.DEFAULT: f"{ESC}[0m",
    AnsiColor.BLACK: f"{ESC}[30m",
    AnsiColor.ALICE_BLUE: f"{ESC}[37m",
    AnsiColor.SILVER: f"{ESC}[37m",
    AnsiColor.WHITE: f"{ESC}[37m",
}

RESET = ESCAPE_SEQUENCES[AnsiColor.DEFAULT]

COLOR_NAMES: dict[str, AnsiColor] = {
    "default": AnsiColor.DEFAULT,
    "aliceblue": AnsiColor.ALICE_BLUE,
    "silver": AnsiColor.SILVER,
    "black": AnsiColor.BLACK,
    "white": AnsiColor.WHITE,
}


def parse_color(value: AnsiColor | str) -> AnsiColor:
    if isinstance(value, AnsiColor):
        return value
    if not isinstance(value, str):
        raise ValueError(f"unsupported color value: {value!r}")
    key = value.strip().lower().replace(" ", "").replace("_", "").replace("-", "")
    try:
        return COLOR_NAMES[key]
    except KeyError:
        known = ", ".join(sorted(COLOR_NAMES))
        raise ValueError(f"unknown color {value!r} (expected one of: {known})") from None
