import os
import warnings
from typing import List, Optional, Tuple

from .builder import build_grid
from .errors import MalformedInputError
from .grid import CellKind, Grid

def load_dataset(path: str) -> Tuple[List[Grid], List[str]]:
    """Reads a maze dataset from a file (or from all the files in a directory).

    The file should consist of zero or more mazes where each maze is defined as follows:

    0001
    1101    <- This is a 3x4 maze.
    1000
    ; maze name    <- This delimits the maze and defines its name (it can contain spaces).

    Empty lines are ignored. If the last maze is not followed by a delimiter, its index is used as its name.
    Mazes that are not rectangular are skipped with a warning.

    Parameters
    ----------
    path : str
        The path to the dataset file or directory.

    Returns
    -------
    Tuple[List[Grid], List[str]]
        A list of grids and a list of the corresponding names.
    """
    grids = []
    names = []

    def add(lines: List[str], name: str, fname: str):
        try:
            grid = build_grid(lines)
        except MalformedInputError as error:
            warnings.warn(f"Skipping the maze '{name}' in {fname}: {error}")
            return
        grids.append(grid)
        names.append(name)

    files = sorted(os.path.join(path, fname) for fname in os.listdir(path)) if os.path.isdir(path) else [path]
    for fname in files:
        with open(fname, 'r', errors='replace') as f:
            lines = f.read().splitlines()
        maze_lines = []
        for line in lines:
            line = line.strip()
            if len(line) == 0: continue
            if line.startswith(';'):
                if maze_lines:
                    add(maze_lines, line[1:].strip(), fname)
                    maze_lines.clear()
            else:
                maze_lines.append(line)
        if maze_lines:
            add(maze_lines, str(len(grids)), fname)
    return grids, names

def format_maze(grid: Grid) -> str:
    """Formats a grid as rows of 0 and 1, which can be read back by 'builder.parse_maze'.
    Path markers are written as open cells.
    """
    return '\n'.join(''.join('1' if kind == CellKind.WALL else '0' for kind in row) for row in grid.kinds.reshape(grid.shape))

def save_dataset(path: str, grids: List[Grid], names: Optional[List[str]] = None):
    """Save a maze dataset to a file. See 'load_dataset' for the file format.

    Parameters
    ----------
    path : str
        The path to the dataset file.
    grids : List[Grid]
        A list of grids.
    names : Optional[List[str]], optional
        A list of the corresponding names. If None, the maze index will be used as its name. (Default: None)
    """
    names = names or [str(i) for i in range(len(grids))]
    file_content = '\n\n'.join(f'{format_maze(grid)}\n; {name}' for name, grid in zip(names, grids))
    with open(path, 'w') as f:
        f.write(file_content + '\n')
