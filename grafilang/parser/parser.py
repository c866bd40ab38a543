"""
Main parser entry point for Grafilang.

This module defines the `Parser` class, which coordinates the recursive
descent parsing process. The actual parsing routines are split across
`grafilang.parser.expressions` and `grafilang.parser.statements`.


File: parser.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from grafilang.exceptions import UnexpectedTokenError
from grafilang.lexer import Token
from grafilang.nodes import BlockStatement, Expression, Program, Statement
from grafilang.token_types import TokenType

from . import expressions as _expr
from . import statements as _stmt


class Parser:
    """Grafilang parser."""

    def __init__(self, tokens: list[Token]):
        """
        Initialize the parser with a list of tokens.

        Parameters:
            tokens (list): A list of Token instances terminated by an EOF token.
        """
        self.tokens = tokens
        self.position = 0

    @property
    def curr_token(self) -> Token:
        """
        The token under the cursor.
        """
        return self.tokens[self.position]

    def previous(self) -> Token:
        """
        The most recently consumed token.
        """
        return self.tokens[self.position - 1]

    def is_end(self) -> bool:
        """
        Return ``True`` once the cursor reached the EOF token.
        """
        return self.curr_token.type == TokenType.EOF

    def check(self, *token_types: TokenType) -> bool:
        """
        Return ``True`` if the current token is one of ``token_types``.
        """
        return self.curr_token.type in token_types

    def advance(self) -> Token:
        """
        Consume the current token and return it. The EOF token is never consumed.
        """
        if not self.is_end():
            self.position += 1
        return self.previous()

    def match(self, *token_types: TokenType) -> bool:
        """
        Consume the current token if it is one of ``token_types``.

        Returns:
            bool: Whether a token was consumed.
        """
        if self.check(*token_types):
            self.advance()
            return True
        return False

    def eat(self, token_types: list[TokenType], message: str) -> Token:
        """
        Consume the current token if it matches one of the expected kinds.

        Parameters:
            token_types (list): The accepted token kinds.
            message (str): Describes what was expected, used in the error.

        Returns:
            Token: The consumed token.

        Raises:
            UnexpectedTokenError: If the token does not match the expected kinds.
        """
        if self.check(*token_types):
            return self.advance()
        raise UnexpectedTokenError(self.curr_token, message)


    # Expression wrappers
    def expr(self) -> Expression:
        """
        Parse a full expression, starting from the lowest-precedence rule.
        """
        return _expr.parse_expr(self)

    def assignment(self) -> Expression:
        """
        Parse a right-associative assignment.
        """
        return _expr.parse_assignment(self)

    def logical_or(self) -> Expression:
        """
        Parse a logical OR expression.
        """
        return _expr.parse_logical_or(self)

    def logical_and(self) -> Expression:
        """
        Parse a logical AND expression.
        """
        return _expr.parse_logical_and(self)

    def equality(self) -> Expression:
        """
        Parse an equality expression (==, !=).
        """
        return _expr.parse_equality(self)

    def comparison(self) -> Expression:
        """
        Parse a comparison expression using relational operators.
        """
        return _expr.parse_comparison(self)

    def term(self) -> Expression:
        """
        Parse an addition or subtraction expression.
        """
        return _expr.parse_term(self)

    def factor(self) -> Expression:
        """
        Parse a multiplication or division expression.
        """
        return _expr.parse_factor(self)

    def unary(self) -> Expression:
        """
        Parse a prefix negation.
        """
        return _expr.parse_unary(self)

    def call(self) -> Expression:
        """
        Parse postfix calls and array accesses.
        """
        return _expr.parse_call(self)

    def array(self) -> Expression:
        """
        Parse an array literal.
        """
        return _expr.parse_array(self)

    def primary(self) -> Expression:
        """
        Parse a literal, variable, or parenthesized group.
        """
        return _expr.parse_primary(self)


    # Statement wrappers
    def statement(self) -> Statement:
        """
        Parse a single statement.
        """
        return _stmt.parse_statement(self)

    def block(self, delimiters: list[TokenType], message: str) -> BlockStatement:
        """
        Parse statements up to and including one of ``delimiters``.
        """
        return _stmt.parse_block(self, delimiters, message)


    def parse(self) -> Program:
        """
        Parse the full input into a program.
        """
        statements = []
        while not self.is_end():
            statements.append(self.statement())
        return Program(tuple(statements))
