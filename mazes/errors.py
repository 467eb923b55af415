from typing import Optional

class MazeError(Exception):
    """The base class for all the errors raised while reading or solving a maze.
    """
    pass

class MalformedInputError(MazeError, ValueError):
    """Raised when the input does not describe a rectangular maze.

    Parameters
    ----------
    message : str
        A description of the problem.
    line_number : Optional[int], optional
        The (1-based) input line where the problem was found. (Default: None)
    expected : Optional[int], optional
        The expected row width. (Default: None)
    actual : Optional[int], optional
        The row width that was found. (Default: None)
    """

    def __init__(self, message: str, line_number: Optional[int] = None, expected: Optional[int] = None, actual: Optional[int] = None) -> None:
        super().__init__(message)
        self.line_number = line_number
        self.expected = expected
        self.actual = actual

class UnsolvedMazeError(MazeError):
    """Raised when a path is requested from a grid whose goal was never reached.
    """
    pass

class FileOpenError(MazeError, OSError):
    """Raised when an input or output file cannot be opened.
    """

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason
