"""Invocable values.

Native library functions and user-defined functions share the
:class:`Callable` interface, so the interpreter's call evaluation does not
need to know which one it is dealing with. The set of variants is closed:
:class:`NativeFunction` and :class:`UserFunction`.


File: callable.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable as PyCallable

from grafilang.diagnostics import Position

if TYPE_CHECKING:
    from grafilang.interpreter import Interpreter
    from grafilang.memory import Memory
    from grafilang.nodes import FunctionStatement


class NativeError(Exception):
    """
    Raised by native functions on misuse. The interpreter re-raises it as a
    positioned runtime error pointing at the call.
    """


class Callable:
    """
    A value that can be called with a fixed number of arguments.
    """
    def __init__(self, name: str, arity: int):
        self.name = name
        self.arity = arity

    def call(self, interpreter: Interpreter, args: list, position: Position) -> Any:
        """
        Invoke the callable with already evaluated arguments.

        Parameters:
            interpreter (Interpreter): The running session.
            args (list): The evaluated arguments, ``len(args) == self.arity``.
            position (Position): The call expression, for diagnostics.
        """
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"<fonction {self.name}>"


class NativeFunction(Callable):
    """
    A library function implemented in Python. ``fn`` receives the output sink
    followed by the arguments.
    """
    def __init__(self, name: str, arity: int, fn: PyCallable[..., Any]):
        super().__init__(name, arity)
        self.fn = fn

    def call(self, interpreter: Interpreter, args: list, position: Position) -> Any:
        return self.fn(interpreter.out, *args)


class UserFunction(Callable):
    """
    A function declared in Grafilang source.

    ``closure`` is the scope that was active when the declaration ran; calls
    chain their parameter scope onto it.
    """
    def __init__(self, declaration: FunctionStatement, closure: Memory):
        super().__init__(declaration.name.value, len(declaration.parameters))
        self.declaration = declaration
        self.closure = closure

    def call(self, interpreter: Interpreter, args: list, position: Position) -> Any:
        return interpreter.call_function(self, args, position)
