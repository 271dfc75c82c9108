from __future__ import annotations

from boxline_plot.colors import RESET, AnsiColor
from boxline_plot.raster.grid import Cell, Grid


def compose_row(cells: list[Cell]) -> str:
    """Serialize one grid row, dropping trailing blanks.

    Escapes are emitted only where the color changes from the previous cell.
    """
    last = 0
    for index in range(len(cells) - 1, -1, -1):
        if not cells[index].blank:
            last = index
            break

    parts: list[str] = []
    current = AnsiColor.DEFAULT
    for cell in cells[: last + 1]:
        if cell.color != current:
            current = cell.color
            parts.append(current.escape)
        parts.append(cell.text)
    if current != AnsiColor.DEFAULT:
        parts.append(RESET)
    return "".join(parts)


def compose_caption(caption: str, color: AnsiColor, *, indent: int, len_max: int) -> str:
    pad = " " * indent
    if len(caption) < len_max:
        pad += " " * ((len_max - len(caption)) // 2)
    if color != AnsiColor.DEFAULT:
        return f"{pad}{color.escape}{caption}{RESET}"
    return f"{pad}{caption}"


def compose(grid: Grid, *, caption: str = "", caption_color: AnsiColor = AnsiColor.DEFAULT, indent: int = 0, len_max: int = 0) -> str:
    text = "\n".join(compose_row(cells) for cells in grid.iter_rows())
    if caption:
        text += "\n" + compose_caption(caption, caption_color, indent=indent, len_max=len_max)
    return text
