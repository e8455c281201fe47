"""
Line tools engine.

Core engine for comparing two text files line by line and for extracting the
unique lines of a file. Designed to be reusable by the CLI and by other code.
"""

from .comparer import DEFAULT_CONTEXT_SIZE, LineComparer
from .models import ContextWindow, Difference
from .reader import FileOpenError, LineReadError, LineToolsError, open_lines
from .uniques import UniqueFilter

__version__ = "0.1.0"

__all__ = [
    # Models
    "ContextWindow",
    "Difference",
    # Line sources and errors
    "open_lines",
    "LineToolsError",
    "FileOpenError",
    "LineReadError",
    # Operations
    "DEFAULT_CONTEXT_SIZE",
    "LineComparer",
    "UniqueFilter",
]
