"""
Line comparer for finding the first difference between two files.

Walks two line sources in lockstep and reports the first position where
they disagree, together with the matched pairs leading up to it.
"""

from pathlib import Path
from typing import Iterable

from .models import ContextWindow, Difference, join_pair
from .reader import open_lines

DEFAULT_CONTEXT_SIZE = 5


class LineComparer:
    """
    Compares two line sources position by position.

    Only the first difference is reported. Sources of unequal length whose
    shared lines all match are treated as equivalent.
    """

    def __init__(self, context_size: int = DEFAULT_CONTEXT_SIZE) -> None:
        """
        Initialize the line comparer.

        Args:
            context_size: Number of matched pairs to report before a difference

        Raises:
            ValueError: If context_size is not a non-negative integer
        """
        # ContextWindow owns the size validation
        ContextWindow(context_size)

        self.context_size = context_size

    def compare(self, first_lines: Iterable[str], second_lines: Iterable[str]) -> Difference | None:
        """
        Compare two sequences of lines.

        Args:
            first_lines: Lines from the first source, delimiters already stripped
            second_lines: Lines from the second source, delimiters already stripped

        Returns:
            Difference for the first mismatching pair, or None if every pair
            matched before either source ran out
        """
        window = ContextWindow(self.context_size)

        # zip stops as soon as either source is exhausted
        for line_number, (first, second) in enumerate(zip(first_lines, second_lines), 1):
            if first != second:
                return Difference(
                    line_number=line_number,
                    first_line=first,
                    second_line=second,
                    context=tuple(window),
                )

            window.push(join_pair(first, second))

        return None

    def compare_files(self, first_path: str | Path, second_path: str | Path) -> Difference | None:
        """
        Compare two files line by line.

        Both files are closed before this returns, including on error.

        Args:
            first_path: Path to the first file
            second_path: Path to the second file

        Returns:
            Difference for the first mismatching line, or None

        Raises:
            FileOpenError: If either file cannot be opened
            LineReadError: If reading either file fails
        """
        with open_lines(first_path) as first_lines, open_lines(second_path) as second_lines:
            return self.compare(first_lines, second_lines)
