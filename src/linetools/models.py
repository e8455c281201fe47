"""
Core data models for the line tools engine.

All models are pure data structures owned by a single operation and reused
by the CLI to render results.
"""

from collections import deque
from dataclasses import dataclass, field
from typing import Iterator


class ContextWindow:
    """
    Bounded FIFO of the most recently matched line pairs.

    Holds at most ``size`` entries; pushing onto a full window evicts the
    oldest entry first. A window of size 0 never holds anything.
    """

    def __init__(self, size: int) -> None:
        """
        Initialize an empty context window.

        Args:
            size: Maximum number of entries to keep

        Raises:
            ValueError: If size is not a non-negative integer
        """
        if not isinstance(size, int) or isinstance(size, bool) or size < 0:
            raise ValueError(f"Context size must be a non-negative integer: {size!r}")

        self.size = size
        self._entries: deque[str] = deque(maxlen=size)

    def push(self, entry: str) -> None:
        """Append an entry, evicting the oldest one if the window is full."""
        if self.size == 0:
            return
        self._entries.append(entry)

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)


def join_pair(first_line: str, second_line: str) -> str:
    """Format a pair of lines the way they are reported (space joined)."""
    return f"{first_line} {second_line}"


@dataclass(frozen=True)
class Difference:
    """
    The first position where two line sources disagree.

    Frozen so a report cannot change once it has been produced.
    """

    line_number: int  # 1-based index of the mismatching pair
    first_line: str
    second_line: str
    context: tuple[str, ...] = field(default_factory=tuple)  # Matched pairs, oldest first

    @property
    def header(self) -> str:
        """Report line announcing where the difference was found."""
        return f"difference found at line {self.line_number}"

    @property
    def mismatch(self) -> str:
        """The mismatched pair formatted like the context entries."""
        return join_pair(self.first_line, self.second_line)

    def to_lines(self) -> list[str]:
        """
        Render the full report in output order.

        Returns:
            Header, every context entry (oldest first), then the mismatch line
        """
        return [self.header, *self.context, self.mismatch]
