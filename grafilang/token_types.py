"""Shared definitions for token kinds.

Token kinds produced by the lexer and consumed by the parser and interpreter.


File: token_types.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from enum import Enum


class TokenType(str, Enum):
    """
    Enumeration of token kinds.

    Punctuation kinds use their own lexeme as value, the other kinds a readable
    (French) name which is what error messages show.
    """

    # Single-character tokens
    LEFT_PAREN = "("
    RIGHT_PAREN = ")"
    LEFT_BRACE = "{"
    RIGHT_BRACE = "}"
    LEFT_BRACKET = "["
    RIGHT_BRACKET = "]"
    COMMA = ","
    DOT = "."
    MINUS = "-"
    PLUS = "+"
    SEMICOLON = ";"
    SLASH = "/"
    STAR = "*"

    # One or two character tokens
    BANG = "!"
    BANG_EQUAL = "!="
    EQUAL = "="
    EQUAL_EQUAL = "=="
    GREATER = ">"
    GREATER_EQUAL = ">="
    LESS = "<"
    LESS_EQUAL = "<="

    # Literals
    IDENTIFIER = "Identifiant"
    STRING = "Chaine"
    NUMBER = "Nombre"

    # Keywords
    AND = "Et"
    OR = "Ou"
    IF = "Si"
    THEN = "Alors"
    ELSE = "Sinon"
    END = "Fin"
    WHILE = "TantQue"
    FOR = "Pour"
    FROM = "Entre"
    FUNCTION = "Fonction"
    RETURN = "Retourner"
    PRINT = "Afficher"
    VAR = "Var"
    TRUE = "Vrai"
    FALSE = "Faux"

    EOF = "EOF"

    def __str__(self) -> str:  # pragma: no cover - trivial
        """
        Return the underlying string value for nicer debug output.
        """
        return self.value


__all__ = ["TokenType"]
