import argparse
import sys

from common import config_tools
from mazes import build_grid, format_grid, format_steps, solve_and_mark
from actions.utils import add_logging_arguments, load_solver_config, open_stream, setup_logging

#####################################
#####################################
'''
Find the shortest path through a maze given as rows of 0 (open) and 1 (wall),
from the top-left cell to the bottom-right cell.

Arguments:
    * -d: Print the maze after reading it.
    * -s: Print the number of cells on the shortest path (or "No solution.").
    * -p: Print the maze with the shortest path marked on it.
    * -i: The input file (Default: stdin).
    * -o: The output file (Default: stdout).
    * -cfg & -ovr: The solver configuration (see 'mazes.SolverConfig').

The output is written in the order: maze, solution length, solved maze.
'''

def action_solve(args: argparse.Namespace):
    setup_logging(args)
    config = load_solver_config(args)
    display = args.display or config.display
    steps = args.steps or config.steps
    path = args.path or config.path

    in_file = open_stream(args.input, 'r', sys.stdin)
    try:
        out_file = open_stream(args.output, 'w', sys.stdout)
        try:
            grid = build_grid(in_file)
            if display:
                print(format_grid(grid, config.glyphs), file=out_file)
            if steps or path:
                length = solve_and_mark(grid)
                if steps:
                    print(format_steps(length), file=out_file)
                if path:
                    print(format_grid(grid, config.glyphs), file=out_file)
        finally:
            if out_file is not sys.stdout: out_file.close()
    finally:
        if in_file is not sys.stdin: in_file.close()

def register_solve(parser: argparse.ArgumentParser):
    parser.add_argument("-d", dest="display", action="store_true", help="print the maze after reading it")
    parser.add_argument("-s", dest="steps", action="store_true", help="print the number of steps of the shortest solution")
    parser.add_argument("-p", dest="path", action="store_true", help="print the maze with an optimal path marked on it")
    parser.add_argument("-i", dest="input", type=str, default=None, metavar="INFILE", help="read the maze from INFILE (default: stdin)")
    parser.add_argument("-o", dest="output", type=str, default=None, metavar="OUTFILE", help="write all output to OUTFILE (default: stdout)")
    add_logging_arguments(parser)
    config_tools.add_config_arguments(parser)
    parser.set_defaults(func=action_solve)
