"""
CLI (Command Line Interface) for the line tools.

This is a thin wrapper around the core engine. All business logic lives
in the linetools package so it can be reused outside the command line.
"""
