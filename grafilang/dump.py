"""AST dump.

Serializes the tree the parser builds for a piece of source to JSON, for
debugging and for the ``--ast`` command line switch.


File: dump.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import json

from grafilang.lexer import tokenize
from grafilang.nodes import to_data
from grafilang.parser import Parser


def dump_ast(source: str, indent: int = 2) -> str:
    """
    Parse ``source`` and return its AST as a JSON document.

    Raises:
        CodeError: If the source does not lex or parse.
    """
    program = Parser(tokenize(source)).parse()
    return json.dumps(to_data(program), ensure_ascii=False, indent=indent)
