"""Join two commands with a pipe between an input file and an output file, plus small text helpers."""

__version__ = "1.0.0"
__all__ = ["cli", "textutils"]