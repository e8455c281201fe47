"""
Line sources for reading text files one line at a time.

Provides the scoped line reader shared by every operation and the errors
raised when a file cannot be opened or read.
"""

from contextlib import contextmanager
from pathlib import Path
from typing import Iterator


class LineToolsError(Exception):
    """Base exception for line tools errors."""

    pass


class FileOpenError(LineToolsError):
    """Exception raised when a file cannot be opened for reading."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to open file {path}: {reason}")


class LineReadError(LineToolsError):
    """Exception raised when reading a line from an open file fails."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to read line from {path}: {reason}")


def strip_newline(line: str) -> str:
    """Remove a trailing line delimiter (``\\n`` or ``\\r\\n``) and nothing else."""
    if line.endswith("\n"):
        line = line[:-1]
        if line.endswith("\r"):
            line = line[:-1]
    return line


def _iter_stripped(handle, path: str) -> Iterator[str]:
    """
    Yield lines from an open handle with delimiters removed.

    Args:
        handle: Open text file
        path: Path the handle was opened from, used in error messages

    Raises:
        LineReadError: If the underlying read fails
    """
    while True:
        try:
            line = handle.readline()
        except (OSError, UnicodeDecodeError) as e:
            raise LineReadError(path, str(e)) from e

        if not line:
            return

        yield strip_newline(line)


@contextmanager
def open_lines(path: str | Path) -> Iterator[Iterator[str]]:
    """
    Open a file and expose it as a lazy sequence of lines.

    The file is closed when the ``with`` block exits, whether it finished,
    stopped early, or raised.

    Args:
        path: Path of the file to read

    Yields:
        Iterator over the file's lines with delimiters stripped

    Raises:
        FileOpenError: If the file does not exist or cannot be opened
        LineReadError: If a read fails while iterating
    """
    path_str = str(path)

    try:
        # Only "\n" ends a line; a preceding "\r" is removed by strip_newline
        handle = open(path_str, "r", encoding="utf-8", newline="\n")
    except OSError as e:
        raise FileOpenError(path_str, e.strerror or str(e)) from e

    with handle:
        yield _iter_stripped(handle, path_str)
