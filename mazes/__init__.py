from dataclasses import dataclass, field, fields
from typing import Any, Dict, Optional, Union

from common.config_tools import ConfigError, config
from .errors import MazeError, MalformedInputError, UnsolvedMazeError, FileOpenError
from .grid import Cell, CellKind, Grid, Level
from .builder import build_grid, parse_maze
from .solver import SolveResult, solve
from .path import reconstruct, trace, to_actions
from .render import GlyphConfig, format_grid, format_steps

# Internal function: make sure a plain mapping only holds the fields of a config class.
def _check_fields(cls, options) -> Dict[str, Any]:
    if not isinstance(options, dict):
        raise ConfigError(f"Expected a mapping for {cls.__name__}, got {type(options).__name__}")
    unknown = set(options) - {f.name for f in fields(cls)}
    if unknown:
        raise ConfigError(f"Unknown fields for {cls.__name__}: {', '.join(sorted(map(str, unknown)))}")
    return options

@config
@dataclass
class SolverConfig:
    """A config class to define how mazes are solved and printed.
    The flags 'display', 'steps' and 'path' are the defaults of the command line flags '-d', '-s' and '-p'
    (a flag is on if it is set here or on the command line).
    """
    glyphs: GlyphConfig = field(default_factory=GlyphConfig)
    display: bool = False
    steps: bool = False
    path: bool = False

    @staticmethod
    def from_object(obj: Union["SolverConfig", Dict[str, Any], None]) -> "SolverConfig":
        """Create a solver config from a config object or a plain dictionary (e.g. a YAML file without tags).
        """
        if isinstance(obj, SolverConfig):
            return obj
        if obj is None:
            return SolverConfig()
        options = dict(_check_fields(SolverConfig, obj))
        glyphs = options.pop("glyphs", None)
        if isinstance(glyphs, dict):
            glyphs = GlyphConfig(**_check_fields(GlyphConfig, glyphs))
        elif glyphs is not None and not isinstance(glyphs, GlyphConfig):
            raise ConfigError(f"Expected the glyphs to be a mapping, got {type(glyphs).__name__}")
        return SolverConfig(glyphs=glyphs or GlyphConfig(), **options)

def solve_and_mark(grid: Grid) -> Optional[int]:
    """Solves the grid and marks the shortest path on it.

    Returns
    -------
    Optional[int]
        The number of cells on the path, or None if the maze has no solution.
    """
    if not solve(grid):
        return None
    return reconstruct(grid)
