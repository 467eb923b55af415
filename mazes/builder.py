import logging
from typing import Iterable
import numpy as np

from .errors import MalformedInputError
from .grid import Grid

logger = logging.getLogger(__name__)

# Maps the maze characters to the values of CellKind ('0' -> OPEN, '1' -> WALL)
__TO_KIND = bytes.maketrans(b"01", b"\x00\x01")

def build_grid(lines: Iterable[str]) -> Grid:
    """Build a grid from a sequence of lines.

    Whitespace inside a line is ignored. The lines that only contain '0' (open) and '1' (wall)
    define the maze rows from top to bottom, and all other lines (e.g. blank lines or comments)
    are skipped. The number of rows and columns is inferred from the input, where the width of the
    first row decides the width of the maze.

    The lines are consumed one by one, so a file object can be passed directly.

    Parameters
    ----------
    lines : Iterable[str]
        The input lines.

    Returns
    -------
    Grid
        The maze grid.

    Raises
    ------
    MalformedInputError
        If there are no maze rows or a row has a different width than the first row.
    """
    cells = bytearray()
    rows, cols = 0, 0
    for line_number, line in enumerate(lines, start=1):
        row = "".join(line.split())
        if len(row) == 0 or row.strip("01") != "":
            if row: logger.debug("Ignoring line %d: %r", line_number, line)
            continue
        if rows == 0:
            cols = len(row)
        elif len(row) != cols:
            raise MalformedInputError(
                f"Line {line_number}: expected a row of {cols} cells, got {len(row)}",
                line_number = line_number,
                expected = cols,
                actual = len(row)
            )
        cells.extend(row.encode("ascii").translate(__TO_KIND))
        rows += 1
    if rows == 0:
        raise MalformedInputError("The input does not contain any maze rows")
    logger.debug("Read a %dx%d maze", rows, cols)
    return Grid(rows, cols, np.frombuffer(bytes(cells), dtype=np.int8))

def parse_maze(text: str) -> Grid:
    """Build a grid from a string. See 'build_grid' for the format.
    """
    return build_grid(text.splitlines())
