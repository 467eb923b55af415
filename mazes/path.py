import logging
from typing import Iterator, List, Tuple

from .errors import UnsolvedMazeError
from .grid import CellKind, Grid

logger = logging.getLogger(__name__)

# The character used for each move (dx, dy) when a path is written as a string of actions
ACTIONS = {(1, 0): 'r', (-1, 0): 'l', (0, 1): 'd', (0, -1): 'u'}

# Internal function: yields the cell indices from the goal back to the entry.
def __walk_back(grid: Grid) -> Iterator[int]:
    if not grid.visited[grid.goal]:
        raise UnsolvedMazeError("The goal was not reached, solve the maze first")
    index = grid.goal
    while index is not None:
        yield index
        index = grid.parent(index)

def reconstruct(grid: Grid) -> int:
    """Marks the shortest path found by 'solver.solve' on the grid.

    Starting from the goal, every cell is marked as a path cell, then the parent links are
    followed until the entry (the only reached cell with no parent) is marked.

    Parameters
    ----------
    grid : Grid
        A grid on which 'solve' reported that the goal is reachable.

    Returns
    -------
    int
        The number of cells on the path, including the entry and the goal.

    Raises
    ------
    UnsolvedMazeError
        If the goal was not reached.
    """
    steps = 0
    for index in __walk_back(grid):
        grid.kinds[index] = CellKind.PATH
        steps += 1
    logger.debug("Marked a path of %d cells", steps)
    return steps

def trace(grid: Grid) -> List[Tuple[int, int]]:
    """Returns the path found by 'solver.solve' as a list of (x, y) from the entry to the goal.
    Unlike 'reconstruct', the grid is not modified.
    """
    path = [grid.coordinates(index) for index in __walk_back(grid)]
    return path[::-1]

def to_actions(path: List[Tuple[int, int]]) -> str:
    """Converts a path (as returned by 'trace') to a string of moves where
    r, l, d, u represent moving right, left, down, up.
    """
    return ''.join(ACTIONS[(x2 - x1, y2 - y1)] for (x1, y1), (x2, y2) in zip(path, path[1:]))
