from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

import numpy as np

from boxline_plot.colors import AnsiColor


BLANK = " "


@dataclass(frozen=True)
class Cell:
    text: str = BLANK
    color: AnsiColor = AnsiColor.DEFAULT

    @property
    def blank(self) -> bool:
        return self.text == BLANK


@dataclass
class Grid:
    """Character cells addressed as ``[row, column]``, row 0 at the top."""

    text: np.ndarray
    color: np.ndarray

    @property
    def shape(self) -> tuple[int, int]:
        return self.text.shape

    def cell(self, row: int, col: int) -> Cell:
        return Cell(text=self.text[row, col], color=self.color[row, col])

    def put(self, row: int, col: int, text: str, color: AnsiColor | None = None) -> None:
        self.text[row, col] = text
        if color is not None:
            self.color[row, col] = color

    def paint(self, row: int, col: int, color: AnsiColor) -> None:
        self.color[row, col] = color

    def iter_rows(self) -> Iterator[list[Cell]]:
        height, width = self.shape
        for row in range(height):
            yield [self.cell(row, col) for col in range(width)]


def new_grid(rows: int, width: int) -> Grid:
    text = np.full((rows, width), BLANK, dtype=object)
    color = np.full((rows, width), AnsiColor.DEFAULT, dtype=object)
    return Grid(text=text, color=color)
