"""
CLI main entry point for the line tools.

Thin wrapper around the core engine - no business logic here.
"""

import argparse
import os
import sys

from linetools import (
    DEFAULT_CONTEXT_SIZE,
    LineComparer,
    LineToolsError,
    UniqueFilter,
    __version__,
)

from .output import print_difference, print_lines

COMPARE_VERSION = "1.0.1"
UNIQUES_VERSION = "0.1.0"


class LineToolsArgumentParser(argparse.ArgumentParser):
    """Argument parser that reports usage errors as a single line."""

    def error(self, message: str) -> None:
        self.exit(2, f"{self.prog}: error: {message}\n")


def _silence_stdout() -> None:
    """Point stdout at devnull so the interpreter's final flush cannot fail."""
    devnull = os.open(os.devnull, os.O_WRONLY)
    try:
        os.dup2(devnull, sys.stdout.fileno())
    except (OSError, ValueError):
        # stdout is not backed by a file descriptor; nothing left to flush
        pass
    finally:
        os.close(devnull)


def non_negative_int(value: str) -> int:
    """
    Convert a command-line value to a non-negative integer.

    Args:
        value: Raw argument string

    Returns:
        Parsed integer

    Raises:
        argparse.ArgumentTypeError: If value is not a non-negative integer
    """
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Couldn't convert context to number ({value})")

    if number < 0:
        raise argparse.ArgumentTypeError(f"Context must not be negative ({value})")

    return number


def build_parser() -> argparse.ArgumentParser:
    """
    Build the argument parser with its subcommands.

    Returns:
        Configured parser
    """
    parser = LineToolsArgumentParser(
        prog="linetools",
        description="Some misc tools to help with emu dev.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s compare expected.log actual.log
  %(prog)s cmp expected.log actual.log -c 10
  %(prog)s uniques trace.log
        """,
    )

    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command", metavar="<command>")

    compare_parser = subparsers.add_parser(
        "compare",
        aliases=["cmp", "cp"],
        help="Print the first line where two files differ",
        description=(
            "Compares two files and prints the first line they are different "
            "(+context lines before it) along with the line number."
        ),
    )
    compare_parser.add_argument("file_1", type=str, help="The first file")
    compare_parser.add_argument("file_2", type=str, help="The second file")
    compare_parser.add_argument(
        "-c",
        "--context",
        type=non_negative_int,
        default=DEFAULT_CONTEXT_SIZE,
        help=f"The number of lines to show before the diff (default: {DEFAULT_CONTEXT_SIZE})",
    )
    compare_parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {COMPARE_VERSION}",
    )
    compare_parser.set_defaults(handler=run_compare)

    uniques_parser = subparsers.add_parser(
        "uniques",
        help="Print the unique lines of a file",
        description="Gets all the unique lines in a file, in order of first appearance.",
    )
    uniques_parser.add_argument("file", type=str, help="The file to check")
    uniques_parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {UNIQUES_VERSION}",
    )
    uniques_parser.set_defaults(handler=run_uniques)

    return parser


def run_compare(args: argparse.Namespace) -> None:
    """Run the compare subcommand."""
    comparer = LineComparer(context_size=args.context)
    difference = comparer.compare_files(args.file_1, args.file_2)

    if difference is not None:
        print_difference(difference)


def run_uniques(args: argparse.Namespace) -> None:
    """Run the uniques subcommand."""
    print_lines(UniqueFilter().filter_file(args.file))


def main(argv: list[str] | None = None) -> None:
    """
    Main CLI entry point.

    Parses arguments, dispatches to the chosen subcommand and turns engine
    errors into a message on stderr and a non-zero exit status.

    Args:
        argv: Arguments to parse (default: sys.argv[1:])
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    # A subcommand is required; show help instead of a bare error
    if args.command is None:
        parser.print_help(sys.stderr)
        sys.exit(2)

    try:
        args.handler(args)
    except LineToolsError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    except BrokenPipeError:
        # Reader of stdout went away (e.g. piped into head); stop quietly
        _silence_stdout()
        sys.exit(1)


if __name__ == "__main__":
    main()
