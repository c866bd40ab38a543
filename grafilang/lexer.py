"""Lexer for Grafilang.

This lexer performs a single pass over the source code using a combined
regular expression of named groups. Each match yields a :class:`Token`
containing its kind, value and :class:`Position` in the source text.

Tokens cover literals (numbers, strings), keywords (``si``, ``tantque``,
``afficher`` …), operators and delimiters. Keywords are matched
case-insensitively and every keyword has a French and an English spelling
resolving to the same kind. Whitespace and ``//`` comments are skipped; line
breaks only advance the line counter.


File: lexer.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import re

from grafilang.diagnostics import Position
from grafilang.exceptions import ParseError
from grafilang.token_types import TokenType


KEYWORDS: dict[str, TokenType] = {
    "et": TokenType.AND,
    "and": TokenType.AND,
    "ou": TokenType.OR,
    "or": TokenType.OR,
    "si": TokenType.IF,
    "if": TokenType.IF,
    "alors": TokenType.THEN,
    "then": TokenType.THEN,
    "faire": TokenType.THEN,
    "do": TokenType.THEN,
    "sinon": TokenType.ELSE,
    "else": TokenType.ELSE,
    "fin": TokenType.END,
    "end": TokenType.END,
    "tantque": TokenType.WHILE,
    "while": TokenType.WHILE,
    "pour": TokenType.FOR,
    "for": TokenType.FOR,
    "entre": TokenType.FROM,
    "between": TokenType.FROM,
    "from": TokenType.FROM,
    "fonction": TokenType.FUNCTION,
    "function": TokenType.FUNCTION,
    "retourner": TokenType.RETURN,
    "return": TokenType.RETURN,
    "afficher": TokenType.PRINT,
    "print": TokenType.PRINT,
    "var": TokenType.VAR,
    "vrai": TokenType.TRUE,
    "true": TokenType.TRUE,
    "faux": TokenType.FALSE,
    "false": TokenType.FALSE,
}


class Token:
    """
    Represents a lexical token with a kind, a value and a position.
    """
    def __init__(self, type_: TokenType, value, position: Position):
        """
        Initialize a new token.

        Parameters:
            type_ (TokenType): The token kind.
            value (str | float | None): The lexeme, the string contents or the parsed number.
            position (Position): Where the token sits in the source.
        """
        self.type = type_
        self.value = value
        self.position = position

    @property
    def line(self) -> int:
        """
        Line number of the token.
        """
        return self.position.line

    def __repr__(self) -> str:
        """
        Return a string representation of the token.
        """
        return f"Token({self.type.name}, {self.value!r}, {tuple(self.position)})"


token_specification: list[tuple[str, str]] = [
    ('COMMENT',      r'//[^\n]*'),
    ('NEWLINE',      r'\n'),
    ('SKIP',         r'[ \t\r]+'),

    # Literals
    ('NUMBER',       r'[0-9]+(?:\.[0-9]+)?'),
    ('STRING',       r'"[^"]*"|\'[^\']*\''),
    ('UNTERMINATED', r'["\']'),
    ('ID',           r'[A-Za-z_][A-Za-z0-9_]*'),

    # Two-character operators before their one-character prefixes
    ('BANG_EQUAL',    r'!='),
    ('EQUAL_EQUAL',   r'=='),
    ('GREATER_EQUAL', r'>='),
    ('LESS_EQUAL',    r'<='),

    # Delimiters and operators
    ('LEFT_PAREN',    r'\('),
    ('RIGHT_PAREN',   r'\)'),
    ('LEFT_BRACE',    r'\{'),
    ('RIGHT_BRACE',   r'\}'),
    ('LEFT_BRACKET',  r'\['),
    ('RIGHT_BRACKET', r'\]'),
    ('COMMA',         r','),
    ('DOT',           r'\.'),
    ('MINUS',         r'-'),
    ('PLUS',          r'\+'),
    ('SEMICOLON',     r';'),
    ('SLASH',         r'/'),
    ('STAR',          r'\*'),
    ('BANG',          r'!'),
    ('EQUAL',         r'='),
    ('GREATER',       r'>'),
    ('LESS',          r'<'),

    ('MISMATCH',      r'.'),
]

tok_regex = re.compile('|'.join(f'(?P<{name}>{pattern})' for name, pattern in token_specification))


def tokenize(code: str) -> list[Token]:
    """
    Convert a string of source code into a list of tokens.

    Parameters:
        code (str): The source code to tokenize.

    Returns:
        list[Token]: The tokens in source order, terminated by an EOF token.

    Raises:
        ParseError: If an unterminated string or an unexpected character is encountered.
    """
    tokens: list[Token] = []
    line_num = 1

    for match_obj in tok_regex.finditer(code):
        kind = match_obj.lastgroup
        value = match_obj.group()
        start, end = match_obj.span()
        position = Position(start, end, line_num)

        if kind == 'NEWLINE':
            line_num += 1
            continue
        if kind in ('SKIP', 'COMMENT'):
            continue
        if kind == 'MISMATCH':
            raise ParseError(f"{value} inattendu", position)
        if kind == 'UNTERMINATED':
            line_end = code.find('\n', start)
            raise ParseError(
                f"Chaîne de caractères non fermée, {value} attendu",
                Position(start, len(code) if line_end == -1 else line_end, line_num),
            )

        if kind == 'NUMBER':
            tokens.append(Token(TokenType.NUMBER, float(value), position))
        elif kind == 'STRING':
            tokens.append(Token(TokenType.STRING, value[1:-1], position))
            # Strings may span lines
            line_num += value.count('\n')
        elif kind == 'ID':
            tokens.append(Token(KEYWORDS.get(value.lower(), TokenType.IDENTIFIER), value, position))
        else:
            tokens.append(Token(TokenType[kind], value, position))

    tokens.append(Token(TokenType.EOF, None, Position(len(code), len(code), line_num)))
    return tokens
