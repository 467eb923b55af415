import statistics
from typing import Any, Dict, List, Optional
import numpy as np

from .grid import CellKind, Grid
from .path import reconstruct, trace, to_actions
from .solver import solve

def analyze(grids: List[Grid], names: Optional[List[str]] = None) -> List[Dict[str, Any]]:
    """Solves every grid (in-place) and returns a dictionary of information about each one.

    The dictionary contains:
    - name: the maze name (or its index if no names are given).
    - rows, cols: the maze size.
    - walls, wall-ratio: the number of walls and their ratio to the area.
    - solvable: whether the goal can be reached from the entry.
    - steps: the number of cells on the shortest path (-1 if not solvable).
    - actions: the shortest path as moves over 'rldu' (empty if not solvable).
    - explored: the number of cells added to the search frontier.

    Parameters
    ----------
    grids : List[Grid]
        The grids to analyze. They should not contain results from a previous search.
    names : Optional[List[str]], optional
        The maze names. (Default: None)

    Returns
    -------
    List[Dict[str, Any]]
        A list of information about the given grids.
    """
    names = names or [str(i) for i in range(len(grids))]
    results = []
    for name, grid in zip(names, grids):
        walls = int(np.count_nonzero(grid.kinds == CellKind.WALL))
        result = {
            "name": name,
            "rows": grid.rows,
            "cols": grid.cols,
            "walls": walls,
            "wall-ratio": walls / grid.size,
        }
        outcome = solve(grid)
        result["solvable"] = outcome.reachable
        result["explored"] = outcome.enqueued
        if outcome.reachable:
            result["actions"] = to_actions(trace(grid))
            result["steps"] = reconstruct(grid)
        else:
            result["actions"] = ""
            result["steps"] = -1
        results.append(result)
    return results

def summary(prefix: str, data: List[float]) -> Dict[str, float]:
    if not data:
        return {}
    return {
        f"{prefix}-mean": statistics.mean(data),
        f"{prefix}-median": statistics.median(data),
        f"{prefix}-stdev": statistics.stdev(data) if len(data) > 1 else 0.0,
        f"{prefix}-min": min(data),
        f"{prefix}-max": max(data),
    }

def summarize(info: List[Dict[str, Any]]) -> Dict[str, Any]:
    """Computes statistics over the output of 'analyze'.
    """
    total = len(info)
    solvable = [item for item in info if item["solvable"]]
    return {
        "Count": total,
        "Solvable%": len(solvable) / max(total, 1) * 100,
        **summary("steps", [item["steps"] for item in solvable]),
        **summary("wall-ratio", [item["wall-ratio"] for item in info]),
    }
