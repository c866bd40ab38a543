"""Source positions and diagnostic rendering.

Every token, AST node and error carries a :class:`Position`: the start and end
offsets into the original source text plus the 1-based line number of the
start offset. The helpers below turn such a position back into something a
person can read: a caret-annotated excerpt of the offending line, or a 1-based
:class:`Marker` an editor can use to draw a squiggly underline.


File: diagnostics.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from dataclasses import dataclass
from typing import NamedTuple


class Position(NamedTuple):
    """
    Location of a token, node or diagnostic in the source text.
    """
    start: int
    end: int
    line: int


@dataclass(frozen=True)
class Marker:
    """
    Editor highlight for a diagnostic. Lines and columns are 1-based.
    """
    message: str
    start_line: int
    start_column: int
    end_line: int
    end_column: int


def line_start(source: str, index: int) -> int:
    """
    Return the offset of the first character of the line containing ``index``.
    """
    return source.rfind("\n", 0, max(index, 0)) + 1


def get_column(source: str, index: int) -> int:
    """
    Return the 0-based column of ``index``, measured from the nearest preceding newline.
    """
    return max(index - line_start(source, index), 0)


def get_line(source: str, index: int) -> str:
    """
    Return the full text of the line containing ``index``, without its newline.
    """
    start = line_start(source, index)
    end = source.find("\n", start)
    return source[start:] if end == -1 else source[start:end]


def render(label: str, message: str, position: Position, source: str) -> str:
    """
    Render a caret-annotated diagnostic block.

    Parameters:
        label (str): The diagnostic kind, e.g. ``Erreur de syntaxe``.
        message (str): The human readable message.
        position (Position): Where the diagnostic points to.
        source (str): The original source text.

    Returns:
        str: The header line, the offending source line, a caret span under the
        offending range and the message aligned with it.
    """
    column = get_column(source, position.start)
    text = get_line(source, position.start)
    # The caret span never runs past the end of the line it starts on.
    width = min(position.end, line_start(source, position.start) + len(text)) - position.start
    padding = " " * column
    return (
        f"{label}: ligne {position.line}, colonne {column}\n"
        f"\n"
        f"{text}\n"
        f"{padding}{'^' * max(width, 1)}\n"
        f"{padding}{message}"
    )


def marker(message: str, position: Position, source: str) -> Marker:
    """
    Build the 1-based editor marker for ``position``.
    """
    start_column = get_column(source, position.start) + 1
    end = max(position.end, position.start)
    end_line = position.line + source.count("\n", position.start, end)
    end_column = get_column(source, end) + 1
    if end_line == position.line and end == position.start:
        end_column = start_column + 1
    return Marker(
        message=message,
        start_line=position.line,
        start_column=start_column,
        end_line=end_line,
        end_column=end_column,
    )


NO_POSITION = Position(0, 0, 1)
