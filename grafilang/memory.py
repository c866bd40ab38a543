"""Variable storage.

A :class:`Memory` is one scope: a table of bindings plus an optional parent
scope. Scopes form a singly-linked chain from the innermost block out to the
library scope. Definitions only touch the scope they are made in; lookups and
assignments walk outward until the name is found.


File: memory.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from __future__ import annotations

from typing import Any, Optional

from grafilang.diagnostics import NO_POSITION, Position
from grafilang.exceptions import RedeclaredVariableError, UndefinedVariableError


class Memory:
    """
    A scope mapping names to values.
    """
    def __init__(self, parent: Optional[Memory] = None):
        self.parent = parent
        self.values: dict[str, Any] = {}

    def _resolve(self, name: str) -> Optional[Memory]:
        """
        Return the nearest scope, starting with this one, that binds ``name``.
        """
        scope: Optional[Memory] = self
        while scope is not None:
            if name in scope.values:
                return scope
            scope = scope.parent
        return None

    def define(self, name: str, value: Any, position: Position = NO_POSITION) -> Any:
        """
        Bind ``name`` in this scope.

        Raises:
            RedeclaredVariableError: If this scope already binds ``name``.
        """
        if name in self.values:
            raise RedeclaredVariableError(name, position)
        self.values[name] = value
        return value

    def assign(self, name: str, value: Any, position: Position = NO_POSITION) -> Any:
        """
        Update the nearest existing binding of ``name``.

        Raises:
            UndefinedVariableError: If no scope in the chain binds ``name``.
        """
        scope = self._resolve(name)
        if scope is None:
            raise UndefinedVariableError(name, position)
        scope.values[name] = value
        return value

    def get(self, name: str, position: Position = NO_POSITION) -> Any:
        """
        Read the nearest binding of ``name``.

        Raises:
            UndefinedVariableError: If no scope in the chain binds ``name``.
        """
        scope = self._resolve(name)
        if scope is None:
            raise UndefinedVariableError(name, position)
        return scope.values[name]

    def clear(self) -> None:
        """
        Drop every binding of this scope. Parent scopes are left untouched.
        """
        self.values.clear()

    def __contains__(self, name: str) -> bool:
        return self._resolve(name) is not None
