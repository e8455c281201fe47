"""
Unique line filter.

Emits every distinct line of a source once, at the position it first appears.
"""

from pathlib import Path
from typing import Iterable, Iterator

from .reader import open_lines


class UniqueFilter:
    """Streams the first occurrence of each line and drops later repeats."""

    def filter(self, lines: Iterable[str]) -> Iterator[str]:
        """
        Yield each line the first time it is seen.

        Lines are yielded as soon as they are read, not after the whole
        source has been consumed.

        Args:
            lines: Lines to filter, delimiters already stripped

        Yields:
            Unique lines in order of first appearance
        """
        seen: set[str] = set()

        for line in lines:
            if line in seen:
                continue
            seen.add(line)
            yield line

    def filter_file(self, path: str | Path) -> Iterator[str]:
        """
        Yield the unique lines of a file.

        The file stays open while the generator is consumed and is closed
        once it is exhausted, fails, or is closed early.

        Args:
            path: Path to the file to read

        Yields:
            Unique lines in order of first appearance

        Raises:
            FileOpenError: If the file cannot be opened
            LineReadError: If reading the file fails
        """
        with open_lines(path) as lines:
            yield from self.filter(lines)
