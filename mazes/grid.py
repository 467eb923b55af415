from dataclasses import dataclass
from enum import IntEnum
from typing import Iterator, List, Optional, Tuple
import numpy as np

# A Level is a 2D Array of integers (a list of lists) where 0 is open and 1 is a wall
Level = List[List[int]]

# Marks a cell that has no parent (the entry cell or a cell that was never reached)
NO_PARENT = -1

# The neighbour offsets (dx, dy) in the order they are expanded: west, north, east, south.
# The order decides which one of several equally short paths is recorded.
DIRECTIONS = [(-1, 0), (0, -1), (1, 0), (0, 1)]

class CellKind(IntEnum):
    OPEN = 0
    WALL = 1
    PATH = 2

@dataclass(frozen=True)
class Cell:
    """A read-only snapshot of a single maze position.
    """
    kind: CellKind
    x: int
    y: int
    visited: bool = False
    parent: Optional[Tuple[int, int]] = None

    @property
    def coordinates(self) -> Tuple[int, int]:
        return self.x, self.y

class Grid:
    """The maze grid. It owns the state of every cell.

    The cells are stored in flat arrays in row-major order, so the cell at column 'x'
    and row 'y' lives at index 'y * cols + x'. Use 'index' and 'coordinates' to convert
    between the two forms instead of repeating the arithmetic.

    The parent links created by the solver are indices into the same storage, so a
    cell never owns or references another cell object.
    """

    def __init__(self, rows: int, cols: int, kinds: Optional[np.ndarray] = None) -> None:
        """The init function.

        Parameters
        ----------
        rows : int
            The number of rows (the maze height).
        cols : int
            The number of columns (the maze width).
        kinds : Optional[np.ndarray], optional
            The cell kinds in row-major order. If None, all the cells will be open. (Default: None)
        """
        assert rows > 0 and cols > 0, f"A grid must have a positive size, got {rows}x{cols}"
        self.rows = rows
        self.cols = cols
        size = rows * cols
        if kinds is None:
            self.kinds = np.full(size, CellKind.OPEN, dtype=np.int8)
        else:
            self.kinds = np.asarray(kinds, dtype=np.int8).reshape(-1).copy()
            assert self.kinds.size == size, f"Expected {size} cells, got {self.kinds.size}"
        self.visited = np.zeros(size, dtype=bool)
        self.parents = np.full(size, NO_PARENT, dtype=np.int64)

    @staticmethod
    def from_level(level: Level) -> "Grid":
        """Create a grid from a level (a list of rows where 0 is open and 1 is a wall).
        """
        kinds = np.array(level, dtype=np.int8)
        assert kinds.ndim == 2, "A level must be a rectangular list of rows"
        rows, cols = kinds.shape
        return Grid(rows, cols, kinds)

    def to_level(self) -> Level:
        """Returns the grid as a level. Path markers are reported as open cells.
        """
        walls = (self.kinds == CellKind.WALL).astype(int)
        return walls.reshape(self.rows, self.cols).tolist()

    @property
    def size(self) -> int:
        return self.rows * self.cols

    @property
    def shape(self) -> Tuple[int, int]:
        return self.rows, self.cols

    @property
    def entry(self) -> int:
        """The index of the top-left cell."""
        return 0

    @property
    def goal(self) -> int:
        """The index of the bottom-right cell."""
        return self.size - 1

    def index(self, x: int, y: int) -> int:
        return y * self.cols + x

    def coordinates(self, index: int) -> Tuple[int, int]:
        y, x = divmod(int(index), self.cols)
        return x, y

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.cols and 0 <= y < self.rows

    def kind(self, x: int, y: int) -> CellKind:
        return CellKind(int(self.kinds[self.index(x, y)]))

    def is_open(self, index: int) -> bool:
        return self.kinds[index] != CellKind.WALL

    def parent(self, index: int) -> Optional[int]:
        parent = int(self.parents[index])
        return None if parent == NO_PARENT else parent

    def cell(self, x: int, y: int) -> Cell:
        assert self.in_bounds(x, y), f"({x}, {y}) is outside the {self.rows}x{self.cols} grid"
        index = self.index(x, y)
        parent = self.parent(index)
        return Cell(
            kind = CellKind(int(self.kinds[index])),
            x = x, y = y,
            visited = bool(self.visited[index]),
            parent = None if parent is None else self.coordinates(parent)
        )

    def cells(self) -> Iterator[Cell]:
        for y in range(self.rows):
            for x in range(self.cols):
                yield self.cell(x, y)

    def neighbours(self, index: int) -> Iterator[int]:
        """Yields the indices of the in-bounds neighbours of a cell in the order: west, north, east, south.
        Walls are not filtered out.
        """
        x, y = self.coordinates(index)
        for dx, dy in DIRECTIONS:
            nx, ny = x + dx, y + dy
            if self.in_bounds(nx, ny):
                yield self.index(nx, ny)

    def reset(self):
        """Forget any search results: clears the visited flags and the parent links
        and turns the path markers back into open cells.
        """
        self.visited[:] = False
        self.parents[:] = NO_PARENT
        self.kinds[self.kinds == CellKind.PATH] = CellKind.OPEN

    def copy(self) -> "Grid":
        grid = Grid(self.rows, self.cols, self.kinds)
        grid.visited[:] = self.visited
        grid.parents[:] = self.parents
        return grid

    def __repr__(self) -> str:
        return f"Grid(rows={self.rows}, cols={self.cols})"
