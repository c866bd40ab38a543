"""Output sinks.

Printing pushes one line at a time to an object exposing ``push(line)`` and
``clear()``. Two sinks are provided: :class:`ListOutput` collects lines in
memory, :class:`ConsoleOutput` writes them to standard output.


File: output.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from typing import Protocol


class OutputSink(Protocol):
    """Anything printed lines can be pushed to."""

    def push(self, line: str) -> None:
        """Append one line of output."""

    def clear(self) -> None:
        """Forget previously pushed output."""


class ListOutput:
    """Collect output lines in ``lines``."""

    def __init__(self):
        self.lines: list[str] = []

    def push(self, line: str) -> None:
        self.lines.append(line)

    def clear(self) -> None:
        self.lines = []


class ConsoleOutput:
    """Print output lines as they come."""

    def push(self, line: str) -> None:
        print(line)

    def clear(self) -> None:
        pass
