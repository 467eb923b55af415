import argparse
import logging
import sys
from typing import IO, Optional

from common import config_tools
from mazes import SolverConfig
from mazes.errors import FileOpenError

def open_stream(path: Optional[str], mode: str, default: IO[str]) -> IO[str]:
    """Open a file for reading or writing, or return the default stream if no path is given.
    Input is decoded with undecodable bytes replaced. Such bytes can only be part of lines that
    are not maze rows, and those lines are ignored by the builder.

    Parameters
    ----------
    path : Optional[str]
        The file path (or None).
    mode : str
        The mode passed to 'open' (e.g. 'r' or 'w').
    default : IO[str]
        The stream to use if path is None (e.g. sys.stdin).

    Returns
    -------
    IO[str]
        The opened stream.

    Raises
    ------
    FileOpenError
        If the file cannot be opened.
    """
    errors = "replace" if "r" in mode else None
    if path is None:
        if errors is not None and hasattr(default, "reconfigure"):
            default.reconfigure(errors=errors)
        return default
    try:
        return open(path, mode, errors=errors)
    except OSError as error:
        raise FileOpenError(path, error.strerror or str(error)) from error

def add_logging_arguments(parser: argparse.ArgumentParser):
    parser.add_argument("-v", "--verbose", action="store_true", help="log the solver progress to stderr")

def setup_logging(args: argparse.Namespace):
    if getattr(args, "verbose", False):
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr, format="%(levelname)s %(name)s: %(message)s")

def load_solver_config(args: argparse.Namespace) -> SolverConfig:
    """Read the solver config from the config files and the overrides given via the CLI.
    """
    return SolverConfig.from_object(config_tools.get_config_from_namespace(args, SolverConfig()))
