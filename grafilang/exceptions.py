"""Errors.

All errors raised while lexing, parsing or running a Grafilang program derive
from :class:`CodeError`. Each one carries the :class:`Position` of the
offending source range so callers can render a caret diagnostic or an editor
marker from the original source text.


File: exceptions.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from grafilang import diagnostics
from grafilang.diagnostics import Marker, Position


class CodeError(Exception):
    """
    Base class for positioned diagnostics.
    """
    label = "Erreur"

    def __init__(self, message: str, position: Position):
        self.message = message
        self.position = position
        super().__init__(message)

    def render(self, source: str) -> str:
        """
        Render this error as a caret-annotated block of ``source``.
        """
        return diagnostics.render(self.label, self.message, self.position, source)

    def marker(self, source: str) -> Marker:
        """
        Return the 1-based editor marker for this error.
        """
        return diagnostics.marker(self.message, self.position, source)

    def __str__(self) -> str:
        return f"{self.message} (ligne {self.position.line})"


class ParseError(CodeError):
    """
    Lexical error: unrecognized character or unterminated string.
    """
    label = "Erreur de syntaxe"


class UnexpectedTokenError(CodeError):
    """
    Grammar violation at a specific token.
    """
    label = "Erreur de syntaxe"

    def __init__(self, token, expected: str):
        self.token = token
        self.expected = expected
        got = token.value if token.value is not None else "fin du fichier"
        super().__init__(f"{got} inattendu, {expected}", token.position)


class ExecutionError(CodeError):
    """
    Runtime error: type violation, bad call, bad index...
    """
    label = "Erreur à l'exécution"


class UndefinedVariableError(ExecutionError):
    """
    Error for reading or assigning a variable that was never declared.
    """
    def __init__(self, varname: str, position: Position):
        self.varname = varname
        super().__init__(f"La variable {varname} n'existe pas", position)


class RedeclaredVariableError(ExecutionError):
    """
    Error for declaring a name twice in the same scope.
    """
    def __init__(self, varname: str, position: Position):
        self.varname = varname
        super().__init__(f"Impossible de redéclarer la variable {varname}", position)


class LoopLimitError(ExecutionError):
    """
    A ``tantque`` loop went over the iteration cap.
    """
    def __init__(self, limit: int, position: Position):
        self.limit = limit
        super().__init__(
            "Boucle infinie, la condition de cette boucle ne devient jamais fausse "
            f"(plus de {limit} itérations)",
            position,
        )


class CallDepthError(ExecutionError):
    """
    Too many nested function calls.
    """
    def __init__(self, limit: int, position: Position):
        self.limit = limit
        super().__init__(
            f"Trop d'appels de fonction imbriqués (limite: {limit})", position
        )
