"""
Expression parsing utilities for Grafilang.

These functions operate on a `grafilang.parser.parser.Parser` instance and
implement the recursive descent logic for expressions, maintaining operator
precedence and associativity. Binary and logical operators are left
associative: each loop iteration wraps the expression built so far as the
left operand of a new node whose position runs from that left operand to the
new right operand.


File: expressions.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from dataclasses import replace
from typing import TYPE_CHECKING

from grafilang.diagnostics import Position
from grafilang.exceptions import UnexpectedTokenError
from grafilang.nodes import (
    ArrayAccessExpression,
    ArrayExpression,
    AssignmentExpression,
    BinaryExpression,
    CallExpression,
    Expression,
    LiteralExpression,
    LogicalExpression,
    UnaryExpression,
    VariableExpression,
)
from grafilang.token_types import TokenType

if TYPE_CHECKING:
    from grafilang.parser import Parser


def span(first: Position, last: Position) -> Position:
    """Position running from the start of ``first`` to the end of ``last``."""
    return Position(first.start, last.end, first.line)


# ---- Entry point ----

def parse_expr(parser: 'Parser') -> Expression:
    """Parse an expression starting from the lowest-precedence operator."""
    return parser.assignment()


def parse_assignment(parser: 'Parser') -> Expression:
    """Parse ``target = value``; the value side is itself an assignment."""
    expr = parser.logical_or()
    if parser.match(TokenType.EQUAL):
        equal_tok = parser.previous()
        value = parser.assignment()
        if not isinstance(expr, VariableExpression):
            raise UnexpectedTokenError(
                equal_tok, "l'expression à gauche d'un = doit être une variable"
            )
        return AssignmentExpression(expr, value, span(expr.position, value.position))
    return expr


def parse_logical_or(parser: 'Parser') -> Expression:
    """Parse logical OR expressions using the 'ou' keyword."""
    result = parser.logical_and()
    while parser.match(TokenType.OR):
        op_tok = parser.previous()
        right = parser.logical_and()
        result = LogicalExpression(op_tok, result, right, span(result.position, right.position))
    return result


def parse_logical_and(parser: 'Parser') -> Expression:
    """Parse logical AND expressions using the 'et' keyword."""
    result = parser.equality()
    while parser.match(TokenType.AND):
        op_tok = parser.previous()
        right = parser.equality()
        result = LogicalExpression(op_tok, result, right, span(result.position, right.position))
    return result


def parse_equality(parser: 'Parser') -> Expression:
    """Parse equality expressions (==, !=)."""
    result = parser.comparison()
    while parser.match(TokenType.EQUAL_EQUAL, TokenType.BANG_EQUAL):
        op_tok = parser.previous()
        right = parser.comparison()
        result = BinaryExpression(op_tok, result, right, span(result.position, right.position))
    return result


def parse_comparison(parser: 'Parser') -> Expression:
    """Parse comparison expressions (<, >, <=, >=)."""
    result = parser.term()
    while parser.match(
        TokenType.GREATER,
        TokenType.GREATER_EQUAL,
        TokenType.LESS,
        TokenType.LESS_EQUAL,
    ):
        op_tok = parser.previous()
        right = parser.term()
        result = BinaryExpression(op_tok, result, right, span(result.position, right.position))
    return result


def parse_term(parser: 'Parser') -> Expression:
    """Parse addition and subtraction expressions."""
    result = parser.factor()
    while parser.match(TokenType.PLUS, TokenType.MINUS):
        op_tok = parser.previous()
        right = parser.factor()
        result = BinaryExpression(op_tok, result, right, span(result.position, right.position))
    return result


def parse_factor(parser: 'Parser') -> Expression:
    """Parse multiplication and division expressions."""
    result = parser.unary()
    while parser.match(TokenType.STAR, TokenType.SLASH):
        op_tok = parser.previous()
        right = parser.unary()
        result = BinaryExpression(op_tok, result, right, span(result.position, right.position))
    return result


def parse_unary(parser: 'Parser') -> Expression:
    """Parse prefix '-' and '!'."""
    if parser.match(TokenType.MINUS, TokenType.BANG):
        op_tok = parser.previous()
        operand = parser.unary()
        return UnaryExpression(op_tok, operand, span(op_tok.position, operand.position))
    return parser.call()


def parse_call(parser: 'Parser') -> Expression:
    """
    Parse postfix calls ``callee(args)`` and array accesses ``source[index]``.

    Postfix operators chain, so ``table[0](1)`` and ``f(1)[0]`` are both valid.
    """
    expr = parser.array()
    while parser.check(TokenType.LEFT_PAREN, TokenType.LEFT_BRACKET):
        if parser.match(TokenType.LEFT_PAREN):
            open_tok = parser.previous()
            args = []
            if not parser.check(TokenType.RIGHT_PAREN):
                args.append(parser.expr())
                while parser.match(TokenType.COMMA):
                    args.append(parser.expr())
            close_tok = parser.eat(
                [TokenType.RIGHT_PAREN], "')' attendu à la fin de la liste de paramètres"
            )
            expr = CallExpression(
                expr,
                tuple(args),
                span(expr.position, close_tok.position),
                Position(open_tok.position.start, close_tok.position.end, open_tok.position.line),
            )
        else:
            parser.advance()
            index = parser.expr()
            close_tok = parser.eat(
                [TokenType.RIGHT_BRACKET], "']' attendu après l'index d'un tableau"
            )
            expr = ArrayAccessExpression(expr, index, span(expr.position, close_tok.position))
    return expr


def parse_array(parser: 'Parser') -> Expression:
    """Parse a bracketed, comma separated array literal."""
    if not parser.match(TokenType.LEFT_BRACKET):
        return parser.primary()
    open_tok = parser.previous()
    elements = []
    while not parser.match(TokenType.RIGHT_BRACKET):
        elements.append(parser.expr())
        if parser.match(TokenType.RIGHT_BRACKET):
            break
        parser.eat([TokenType.COMMA], "',' attendu entre les éléments d'un tableau")
    close_tok = parser.previous()
    return ArrayExpression(tuple(elements), span(open_tok.position, close_tok.position))


# ---- Highest precedence ----

def parse_primary(parser: 'Parser') -> Expression:
    """Parse a literal, a variable, or a parenthesized expression."""
    tok = parser.curr_token

    if parser.match(TokenType.TRUE):
        return LiteralExpression(True, tok.position)
    if parser.match(TokenType.FALSE):
        return LiteralExpression(False, tok.position)
    if parser.match(TokenType.NUMBER, TokenType.STRING):
        return LiteralExpression(tok.value, tok.position)
    if parser.match(TokenType.IDENTIFIER):
        return VariableExpression(tok, tok.position)

    if parser.match(TokenType.LEFT_PAREN):
        node = parser.expr()
        close_tok = parser.eat(
            [TokenType.RIGHT_PAREN], "')' attendu pour fermer la parenthèse ouvrante"
        )
        return replace(node, position=span(tok.position, close_tok.position))

    raise UnexpectedTokenError(tok, "expression attendue (nombre, chaîne, variable...)")
