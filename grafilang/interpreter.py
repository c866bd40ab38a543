"""Interpreter.

This is a tree-walk interpreter for evaluating the AST produced by the parser. It supports
arithmetic, strings, arrays, variables, function definitions and calls, conditionals, loops,
and output statements.

1. Execution Model
The interpreter evaluates an abstract syntax tree (AST) in a top-down, recursive manner.
Statements are executed via the `execute()` method, and expressions are evaluated using
`eval_expr()`. Both dispatch on the node class with a `match` statement.

2. Environment
Each `Interpreter` is a session holding the current scope, the output sink and the call
depth. Scopes are `Memory` instances chained to their parent; the session's top-level scope
is chained to the process-wide library scope and is cleared at the start of every run.
Blocks, loop iterations and function calls push a child scope and restore the previous one
when they exit, whether normally or through an error.

3. Expression Evaluation
Expressions are evaluated recursively with strict runtime typing: arithmetic and comparisons
need numbers, `+` needs two numbers or two strings, conditions and logical operands need
booleans. Violations raise `ExecutionError` positioned on the offending expression.

4. Control Flow
`retourner` does not raise. Executing a statement returns `None` when it ran normally or a
`Returning` carrying the value; blocks and loops hand it upward untouched until the
enclosing function call consumes it. Exceptions are reserved for genuine errors.

5. Resource Guards
`tantque` loops abort after `MAX_LOOP_ITERATIONS` iterations and nested user function calls
are limited to `max_call_depth`, so runaway programs end with a diagnostic instead of
hanging or exhausting the Python stack.

6. Error Handling
Nothing is recovered: the first error propagates to the caller with its source position.
Lines already pushed to the output sink stay there.


File: interpreter.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from __future__ import annotations

import logging
import sys
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, Optional

from grafilang.callable import Callable, NativeError, UserFunction
from grafilang.diagnostics import Position
from grafilang.exceptions import CallDepthError, ExecutionError, LoopLimitError
from grafilang.lexer import tokenize
from grafilang.memory import Memory
from grafilang.nodes import (
    ArrayAccessExpression,
    ArrayExpression,
    AssignmentExpression,
    BinaryExpression,
    BlockStatement,
    CallExpression,
    DeclarationStatement,
    Expression,
    ExpressionStatement,
    ForStatement,
    FunctionStatement,
    IfStatement,
    LiteralExpression,
    LogicalExpression,
    PrintStatement,
    Program,
    ReturnStatement,
    Statement,
    UnaryExpression,
    VariableExpression,
    WhileStatement,
)
from grafilang.output import OutputSink
from grafilang.parser import Parser
from grafilang.stdlib import LIBRARY
from grafilang.token_types import TokenType
from grafilang.values import VOID, display, is_number, strict_equals, type_name

logger = logging.getLogger(__name__)

MAX_LOOP_ITERATIONS = 10_000
DEFAULT_MAX_CALL_DEPTH = 256

# Python frames one level of Grafilang call nesting may use
FRAMES_PER_CALL = 40


@dataclass(frozen=True)
class Returning:
    """
    Result of a statement that executed ``retourner``.
    """
    value: Any
    position: Position


@contextmanager
def recursion_headroom(frames: int):
    """
    Temporarily raise Python's recursion limit by ``frames``.
    """
    previous = sys.getrecursionlimit()
    sys.setrecursionlimit(previous + frames)
    try:
        yield
    finally:
        sys.setrecursionlimit(previous)


class Interpreter:
    """Tree-walk interpreter for Grafilang."""

    def __init__(
        self,
        out: OutputSink,
        library: Optional[Memory] = None,
        max_call_depth: int = DEFAULT_MAX_CALL_DEPTH,
        max_loop_iterations: int = MAX_LOOP_ITERATIONS,
    ):
        """
        Initialize the interpreter.

        Parameters:
            out (OutputSink): Receives one line per printed value.
            library (Memory): Scope holding the native functions, shared by default.
            max_call_depth (int): Maximum number of nested user function calls.
            max_loop_iterations (int): Maximum number of iterations of a single loop.
        """
        self.out = out
        self.library = LIBRARY if library is None else library
        self.globals = Memory(self.library)
        self.memory = self.globals
        self.max_call_depth = max_call_depth
        self.max_loop_iterations = max_loop_iterations
        self.depth = 0

    def run(self, source: str, reset: bool = True) -> None:
        """
        Lex, parse and execute ``source``.

        Parameters:
            source (str): The program text.
            reset (bool): Clear the top-level scope first. The REPL keeps it between entries.

        Raises:
            CodeError: The first lexical, syntax or runtime error encountered.
        """
        with recursion_headroom(self.max_call_depth * FRAMES_PER_CALL):
            program = Parser(tokenize(source)).parse()
            logger.debug("AST: %s", program)
            self.execute_program(program, reset)

    def execute_program(self, program: Program, reset: bool = True) -> None:
        """
        Execute a parsed program, by default in a freshly cleared top-level scope.
        """
        if reset:
            self.globals.clear()
        self.memory = self.globals
        self.depth = 0
        for stmt in program.body:
            result = self.execute(stmt)
            if result is not None:
                raise ExecutionError(
                    "RETOURNER ne peut être utilisé qu'à l'intérieur d'une fonction",
                    result.position,
                )

    # ------------------------------------------------------------------
    # Statements
    # ------------------------------------------------------------------

    def execute(self, stmt: Statement) -> Optional[Returning]:
        """
        Execute a single statement.

        Returns:
            Returning | None: The pending return, if the statement executed ``retourner``.

        Raises:
            TypeError: For unknown statement types.
        """
        match stmt:
            case ExpressionStatement():
                self.eval_expr(stmt.expression)
            case DeclarationStatement():
                value = self.eval_expr(stmt.expression)
                self.memory.define(stmt.name.value, value, stmt.name.position)
            case BlockStatement():
                return self.execute_block(stmt.body)
            case PrintStatement():
                self.out.push(display(self.eval_expr(stmt.expression)))
            case IfStatement():
                condition = self.eval_expr(stmt.condition)
                self._ensure_boolean(
                    condition, "Un booléen doit être utilisé pour une condition", stmt.condition
                )
                branch = stmt.then_branch if condition else stmt.else_branch
                if branch is not None:
                    return self.execute_block(branch.body)
            case WhileStatement():
                return self._execute_while(stmt)
            case ForStatement():
                return self._execute_for(stmt)
            case FunctionStatement():
                self.memory.define(
                    stmt.name.value, UserFunction(stmt, self.memory), stmt.name.position
                )
            case ReturnStatement():
                return Returning(self.eval_expr(stmt.expression), stmt.position)
            case _:
                raise TypeError(f"Unknown statement type: {type(stmt).__name__}")
        return None

    def execute_block(self, statements, scope: Optional[Memory] = None) -> Optional[Returning]:
        """
        Execute statements in ``scope`` (a new child of the current scope by default).

        The previous scope is restored on exit, including when an error propagates.
        """
        previous = self.memory
        self.memory = Memory(previous) if scope is None else scope
        try:
            for stmt in statements:
                result = self.execute(stmt)
                if result is not None:
                    return result
            return None
        finally:
            self.memory = previous

    def _execute_while(self, stmt: WhileStatement) -> Optional[Returning]:
        iterations = 0
        while True:
            condition = self.eval_expr(stmt.condition)
            self._ensure_boolean(
                condition, "Un booléen doit être utilisé pour une condition", stmt.condition
            )
            if not condition:
                return None
            iterations += 1
            if iterations > self.max_loop_iterations:
                raise LoopLimitError(self.max_loop_iterations, stmt.condition.position)
            result = self.execute_block(stmt.body.body)
            if result is not None:
                return result

    def _execute_for(self, stmt: ForStatement) -> Optional[Returning]:
        start = self.eval_expr(stmt.start)
        self._ensure_number(start, "La valeur de départ de la boucle doit être un nombre", stmt.start)
        end = self.eval_expr(stmt.end)
        self._ensure_number(end, "La valeur de fin de la boucle doit être un nombre", stmt.end)

        step = 1 if start <= end else -1
        value = start
        while (value <= end) if step > 0 else (value >= end):
            scope = Memory(self.memory)
            scope.define(stmt.variable.value, value, stmt.variable.position)
            result = self.execute_block(stmt.body, scope)
            if result is not None:
                return result
            value += step
        return None

    def call_function(self, function: UserFunction, args: list, position: Position) -> Any:
        """
        Invoke a user function: bind the parameters in a scope chained to the
        function's closure and run the body.

        Returns:
            The value carried by ``retourner``, or ``VOID``.

        Raises:
            CallDepthError: If the call would exceed ``max_call_depth``.
        """
        if self.depth >= self.max_call_depth:
            raise CallDepthError(self.max_call_depth, position)

        scope = Memory(function.closure)
        for param, arg in zip(function.declaration.parameters, args):
            scope.define(param.value, arg, param.position)

        self.depth += 1
        try:
            result = self.execute_block(function.declaration.body, scope)
        finally:
            self.depth -= 1
        return VOID if result is None else result.value

    # ------------------------------------------------------------------
    # Expressions
    # ------------------------------------------------------------------

    def eval_expr(self, node: Expression) -> Any:
        """
        Recursively evaluate an expression node and return its computed value.

        Raises:
            ExecutionError: On type violations, unknown names, bad calls or bad indices.
            TypeError: For unknown expression types.
        """
        match node:
            case LiteralExpression():
                return node.value
            case VariableExpression():
                return self.memory.get(node.name.value, node.position)
            case AssignmentExpression():
                value = self.eval_expr(node.value)
                return self.memory.assign(node.variable.name.value, value, node.variable.position)
            case UnaryExpression():
                return self._eval_unary(node)
            case BinaryExpression():
                return self._eval_binary(node)
            case LogicalExpression():
                return self._eval_logical(node)
            case CallExpression():
                return self._eval_call(node)
            case ArrayExpression():
                return [self.eval_expr(element) for element in node.elements]
            case ArrayAccessExpression():
                return self._eval_array_access(node)
            case _:
                raise TypeError(f"Unknown expression type: {type(node).__name__}")

    def _eval_unary(self, node: UnaryExpression) -> Any:
        operand = self.eval_expr(node.operand)
        match node.operator.type:
            case TokenType.MINUS:
                self._ensure_number(
                    operand,
                    "Impossible d'utiliser l'opérateur \"-\" sur une valeur qui n'est pas un nombre",
                    node,
                )
                return -operand
            case TokenType.BANG:
                self._ensure_boolean(
                    operand,
                    "Impossible d'utiliser l'opérateur \"!\" sur une valeur qui n'est pas "
                    "un booléen (vrai / faux)",
                    node,
                )
                return not operand
        raise TypeError(f"Unknown unary operator: {node.operator.type.name}")

    def _eval_binary(self, node: BinaryExpression) -> Any:
        lhs = self.eval_expr(node.left)
        rhs = self.eval_expr(node.right)
        match node.operator.type:
            # Arithmetic
            case TokenType.PLUS:
                if is_number(lhs):
                    self._ensure_numbers((lhs, rhs), "Un nombre doit être ajouté à un autre nombre", node)
                    return lhs + rhs
                if isinstance(lhs, str):
                    self._ensure_strings(
                        (lhs, rhs), "Une chaîne de caractères doit être ajoutée à une autre chaîne", node
                    )
                    return lhs + rhs
                raise ExecutionError(
                    f"Impossible d'additionner ces types ensemble ({type_name(lhs)})", node.position
                )
            case TokenType.MINUS:
                self._ensure_numbers((lhs, rhs), "Seuls des nombres peuvent être soustraits", node)
                return lhs - rhs
            case TokenType.STAR:
                self._ensure_numbers((lhs, rhs), "Seuls des nombres peuvent être multipliés", node)
                return lhs * rhs
            case TokenType.SLASH:
                self._ensure_numbers((lhs, rhs), "Seuls des nombres peuvent être divisés", node)
                if rhs == 0:
                    raise ExecutionError("Division par zéro", node.right.position)
                return lhs / rhs
            # Comparison
            case TokenType.GREATER:
                self._ensure_numbers((lhs, rhs), "Seuls des nombres peuvent être comparés", node)
                return lhs > rhs
            case TokenType.GREATER_EQUAL:
                self._ensure_numbers((lhs, rhs), "Seuls des nombres peuvent être comparés", node)
                return lhs >= rhs
            case TokenType.LESS:
                self._ensure_numbers((lhs, rhs), "Seuls des nombres peuvent être comparés", node)
                return lhs < rhs
            case TokenType.LESS_EQUAL:
                self._ensure_numbers((lhs, rhs), "Seuls des nombres peuvent être comparés", node)
                return lhs <= rhs
            # Equality
            case TokenType.EQUAL_EQUAL:
                return strict_equals(lhs, rhs)
            case TokenType.BANG_EQUAL:
                return not strict_equals(lhs, rhs)
        raise TypeError(f"Unknown binary operator: {node.operator.type.name}")

    def _eval_logical(self, node: LogicalExpression) -> bool:
        keyword = node.operator.value
        lhs = self.eval_expr(node.left)
        self._ensure_boolean(
            lhs, f"L'expression à gauche d'un {keyword} doit être un booléen", node.left
        )
        # false et ... / true ou ... are decided by the left side alone
        if node.operator.type == TokenType.AND and not lhs:
            return lhs
        if node.operator.type == TokenType.OR and lhs:
            return lhs
        rhs = self.eval_expr(node.right)
        self._ensure_boolean(
            rhs, f"L'expression à droite d'un {keyword} doit être un booléen", node.right
        )
        return rhs

    def _eval_call(self, node: CallExpression) -> Any:
        callee = self.eval_expr(node.callee)
        if not isinstance(callee, Callable):
            raise ExecutionError(
                f"La valeur n'est pas une fonction ({type_name(callee)})", node.callee.position
            )
        if callee.arity != len(node.args):
            raise ExecutionError(
                f"La fonction {callee.name} attend {callee.arity} paramètre(s) "
                f"({len(node.args)} obtenu(s))",
                node.args_position,
            )
        args = [self.eval_expr(arg) for arg in node.args]
        try:
            return callee.call(self, args, node.position)
        except NativeError as e:
            raise ExecutionError(str(e), node.position) from e

    def _eval_array_access(self, node: ArrayAccessExpression) -> Any:
        source = self.eval_expr(node.source)
        if not isinstance(source, list):
            raise ExecutionError(
                f"Impossible d'utiliser cet élément comme un tableau ({type_name(source)})",
                node.source.position,
            )
        index = self.eval_expr(node.index)
        self._ensure_number(index, "L'index d'un tableau doit être un nombre", node.index)
        if index < 0:
            raise ExecutionError(
                f"L'index d'un tableau ne peut pas être négatif (valeur obtenue: {display(index)})",
                node.index.position,
            )
        if index >= len(source):
            raise ExecutionError(
                f"L'index est supérieur à la taille du tableau "
                f"(index: {display(index)}, taille: {len(source)})",
                node.index.position,
            )
        if not float(index).is_integer():
            raise ExecutionError(
                f"L'index d'un tableau doit être un nombre entier (valeur obtenue: {display(index)})",
                node.index.position,
            )
        return source[int(index)]

    # ------------------------------------------------------------------
    # Type checks
    # ------------------------------------------------------------------

    @staticmethod
    def _ensure_number(value, message: str, node) -> None:
        if not is_number(value):
            raise ExecutionError(f"{message} ({type_name(value)})", node.position)

    @staticmethod
    def _ensure_numbers(values, message: str, node) -> None:
        for value in values:
            Interpreter._ensure_number(value, message, node)

    @staticmethod
    def _ensure_strings(values, message: str, node) -> None:
        for value in values:
            if not isinstance(value, str):
                raise ExecutionError(f"{message} ({type_name(value)})", node.position)

    @staticmethod
    def _ensure_boolean(value, message: str, node) -> None:
        if not isinstance(value, bool):
            raise ExecutionError(f"{message} ({type_name(value)})", node.position)


def interpret(source: str, out: OutputSink) -> None:
    """
    Run ``source`` in a fresh session, pushing printed lines to ``out``.

    Sessions only share the library scope, so independent calls with the same
    source produce the same output and the same errors.
    """
    Interpreter(out).run(source)
