from dataclasses import dataclass
from typing import Optional

from common.config_tools import config
from .grid import CellKind, Grid

@config
@dataclass
class GlyphConfig:
    """The characters used to draw each kind of cell.
    """
    open: str = '.'
    wall: str = '#'
    path: str = '+'

    def for_kind(self, kind: int) -> str:
        return (self.open, self.wall, self.path)[kind]

def format_steps(steps: Optional[int]) -> str:
    """Returns the message reporting the solution length, or that there is no solution if steps is None.
    """
    if steps is None:
        return "No solution."
    return f"Solution in {steps} steps."

def format_border(cols: int) -> str:
    return "|-" + "--" * cols + "|"

def format_grid(grid: Grid, glyphs: Optional[GlyphConfig] = None) -> str:
    """Draws the grid inside a frame. The frame is open to the left of the first row (the entrance)
    and to the right of the last row (the exit). For example, the maze "00\\n10" is drawn as:

    |-----|
      . . |
    | # .
    |-----|

    Parameters
    ----------
    grid : Grid
        The grid to draw.
    glyphs : Optional[GlyphConfig], optional
        The characters used for each kind of cell. If None, the defaults are used. (Default: None)

    Returns
    -------
    str
        The drawing, one line per row plus the top and bottom borders. There is no trailing newline.
    """
    glyphs = glyphs or GlyphConfig()
    table = [glyphs.for_kind(kind) for kind in CellKind]
    border = format_border(grid.cols)
    kinds = grid.kinds.reshape(grid.rows, grid.cols)
    lines = [border]
    for y, row in enumerate(kinds):
        left = "  " if y == 0 else "| "
        right = " " if y == grid.rows - 1 else "|"
        lines.append(left + "".join(f"{table[kind]} " for kind in row) + right)
    lines.append(border)
    return "\n".join(lines)
