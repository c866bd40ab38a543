"""Grafilang.

A small teaching language with French and English keywords. Source text goes
through :func:`tokenize`, :class:`Parser` and :class:`Interpreter`; the
:func:`interpret` shortcut runs all three in a fresh session.


File: __init__.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from grafilang.dump import dump_ast
from grafilang.exceptions import (
    CallDepthError,
    CodeError,
    ExecutionError,
    LoopLimitError,
    ParseError,
    RedeclaredVariableError,
    UndefinedVariableError,
    UnexpectedTokenError,
)
from grafilang.interpreter import Interpreter, interpret
from grafilang.lexer import Token, tokenize
from grafilang.output import ConsoleOutput, ListOutput
from grafilang.parser import Parser

__version__ = "0.1.0"

__all__ = [
    "CallDepthError",
    "CodeError",
    "ConsoleOutput",
    "ExecutionError",
    "Interpreter",
    "ListOutput",
    "LoopLimitError",
    "ParseError",
    "Parser",
    "RedeclaredVariableError",
    "Token",
    "UndefinedVariableError",
    "UnexpectedTokenError",
    "dump_ast",
    "interpret",
    "tokenize",
]
