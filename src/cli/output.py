"""
Terminal output formatter for CLI.

Handles all display logic - no business logic, just presentation.
"""

from typing import Iterable

from linetools.models import Difference


def print_difference(difference: Difference) -> None:
    """
    Print a difference report to stdout.

    Prints the header, the context pairs (oldest first) and finally the
    mismatched pair, one per line.

    Args:
        difference: Difference found by the comparer
    """
    for line in difference.to_lines():
        print(line)


def print_lines(lines: Iterable[str]) -> None:
    """
    Print lines to stdout as they are produced.

    Args:
        lines: Lines to print, consumed lazily
    """
    for line in lines:
        print(line, flush=True)
