import logging
from collections import deque
from dataclasses import dataclass

from .grid import Grid

logger = logging.getLogger(__name__)

@dataclass
class SolveResult:
    """The outcome of a search.

    Attributes
    ----------
    reachable : bool
        True if the goal can be reached from the entry.
    enqueued : int
        The number of cells that were added to the frontier (the entry included).
    expanded : int
        The number of cells that were taken out of the frontier.
    """
    reachable: bool
    enqueued: int = 0
    expanded: int = 0

    def __bool__(self) -> bool:
        return self.reachable

def solve(grid: Grid) -> SolveResult:
    """Runs a breadth first search from the entry (top-left) to the goal (bottom-right).

    The grid is modified in-place: every reached cell is marked as visited and gets a link
    to the cell it was first reached from. Since the search is breadth first, following
    the links back from the goal gives a shortest path (see 'path.reconstruct').

    A cell is marked as visited when it is added to the frontier, so it can never be
    added twice and its parent never changes afterwards. The neighbours are checked in the
    order: west, north, east, south.

    Parameters
    ----------
    grid : Grid
        The grid to search. It should not contain results from a previous search (see 'Grid.reset').

    Returns
    -------
    SolveResult
        Whether the goal is reachable, along with some search statistics.
    """
    entry, goal = grid.entry, grid.goal
    if not grid.is_open(entry) or not grid.is_open(goal):
        logger.debug("The entry or the goal is a wall, skipping the search")
        return SolveResult(False)

    visited, parents = grid.visited, grid.parents
    frontier = deque()
    frontier.append(entry)
    visited[entry] = True
    enqueued, expanded = 1, 0
    while frontier:
        current = frontier.popleft()
        expanded += 1
        if current == goal:
            logger.debug("Reached the goal after expanding %d cells", expanded)
            return SolveResult(True, enqueued, expanded)
        for neighbour in grid.neighbours(current):
            if visited[neighbour] or not grid.is_open(neighbour): continue
            parents[neighbour] = current
            visited[neighbour] = True
            frontier.append(neighbour)
            enqueued += 1
    logger.debug("The frontier is empty after expanding %d cells, no solution", expanded)
    return SolveResult(False, enqueued, expanded)
