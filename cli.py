import argparse
import sys
from actions.solve_actions import register_solve
from actions.statistics_actions import register_analyze
from common.config_tools import ConfigError
from mazes.errors import MazeError

# This file is the main entry point of the project
# from here you can call all the subcommands

def main(argv=None):
    parser = argparse.ArgumentParser("mopsolver", description="Find the shortest path through a maze of 0s and 1s")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # Here we register all the subcommands which can be called as follows:
    # >>> python cli.py subcommand-name [args]

    # Solve a single maze, e.g. "python cli.py solve -dsp -i maze.txt"
    register_solve(subparsers.add_parser("solve", aliases=["mop"], help="solve a single maze"))
    # Solve every maze in a dataset and compute statistics
    register_analyze(subparsers.add_parser("analyze", aliases=["stats"], help="solve and analyze a maze dataset"))

    args = parser.parse_args(argv)
    try:
        args.func(args)
    except (MazeError, ConfigError) as error:
        print(error, file=sys.stderr)
        sys.exit(1)

if __name__ == "__main__":
    main()
