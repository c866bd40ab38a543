"""Abstract syntax tree node definitions for Grafilang.

The parser builds these immutable nodes and the interpreter dispatches on
their class. Every node carries the :class:`Position` of the source range it
was parsed from, spanning its first to its last consumed token.


File: nodes.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from __future__ import annotations

from dataclasses import dataclass, fields, is_dataclass
from enum import Enum
from typing import Union

from grafilang.diagnostics import Position
from grafilang.lexer import Token


# ---- Expressions ----

@dataclass(frozen=True)
class LiteralExpression:
    """A string, number, boolean or null literal."""
    value: Union[str, float, bool, None]
    position: Position


@dataclass(frozen=True)
class VariableExpression:
    """A reference to a named binding."""
    name: Token
    position: Position


@dataclass(frozen=True)
class AssignmentExpression:
    """``name = value``, assigning an existing binding."""
    variable: VariableExpression
    value: Expression
    position: Position


@dataclass(frozen=True)
class BinaryExpression:
    """Arithmetic, comparison or equality operator."""
    operator: Token
    left: Expression
    right: Expression
    position: Position


@dataclass(frozen=True)
class LogicalExpression:
    """Short-circuiting ``et`` / ``ou``."""
    operator: Token
    left: Expression
    right: Expression
    position: Position


@dataclass(frozen=True)
class UnaryExpression:
    """``-operand`` or ``!operand``."""
    operator: Token
    operand: Expression
    position: Position


@dataclass(frozen=True)
class CallExpression:
    """
    A call. ``args_position`` spans the parenthesized argument list and is
    where arity mismatches are reported.
    """
    callee: Expression
    args: tuple[Expression, ...]
    position: Position
    args_position: Position


@dataclass(frozen=True)
class ArrayExpression:
    """A bracketed array literal."""
    elements: tuple[Expression, ...]
    position: Position


@dataclass(frozen=True)
class ArrayAccessExpression:
    """``source[index]``."""
    source: Expression
    index: Expression
    position: Position


Expression = Union[
    LiteralExpression,
    VariableExpression,
    AssignmentExpression,
    BinaryExpression,
    LogicalExpression,
    UnaryExpression,
    CallExpression,
    ArrayExpression,
    ArrayAccessExpression,
]


# ---- Statements ----

@dataclass(frozen=True)
class ExpressionStatement:
    """An expression evaluated for its side effects."""
    expression: Expression
    position: Position


@dataclass(frozen=True)
class PrintStatement:
    """``afficher expression``."""
    expression: Expression
    position: Position


@dataclass(frozen=True)
class DeclarationStatement:
    """``var name = expression``."""
    name: Token
    expression: Expression
    position: Position


@dataclass(frozen=True)
class BlockStatement:
    """A sequence of statements run in a fresh scope."""
    body: tuple[Statement, ...]
    position: Position


@dataclass(frozen=True)
class IfStatement:
    """``si condition alors ... [sinon ...] fin``."""
    condition: Expression
    then_branch: BlockStatement
    else_branch: BlockStatement | None
    position: Position


@dataclass(frozen=True)
class WhileStatement:
    """``tantque condition faire ... fin``."""
    condition: Expression
    body: BlockStatement
    position: Position


@dataclass(frozen=True)
class ForStatement:
    """``pour variable entre start et end ... fin``, inclusive in both directions."""
    variable: Token
    start: Expression
    end: Expression
    body: tuple[Statement, ...]
    position: Position


@dataclass(frozen=True)
class FunctionStatement:
    """``fonction name(params) ... fin``."""
    name: Token
    parameters: tuple[Token, ...]
    body: tuple[Statement, ...]
    position: Position


@dataclass(frozen=True)
class ReturnStatement:
    """``retourner expression``."""
    expression: Expression
    position: Position


Statement = Union[
    ExpressionStatement,
    PrintStatement,
    DeclarationStatement,
    BlockStatement,
    IfStatement,
    WhileStatement,
    ForStatement,
    FunctionStatement,
    ReturnStatement,
]


@dataclass(frozen=True)
class Program:
    """The top-level statements of a source file."""
    body: tuple[Statement, ...]


def to_data(node):
    """
    Convert a node (or any value found inside one) into JSON-compatible data.

    Nodes become dictionaries tagged with their class name, tokens become
    ``{"type", "value", "position"}`` dictionaries and positions become
    ``[start, end, line]`` lists.
    """
    if isinstance(node, Position):
        return list(node)
    if isinstance(node, Token):
        return {
            "type": node.type.name,
            "value": node.value,
            "position": list(node.position),
        }
    if is_dataclass(node):
        data = {"type": type(node).__name__}
        for field in fields(node):
            data[field.name] = to_data(getattr(node, field.name))
        return data
    if isinstance(node, (list, tuple)):
        return [to_data(item) for item in node]
    if isinstance(node, Enum):
        return node.name
    return node
