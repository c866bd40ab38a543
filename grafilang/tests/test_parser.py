"""
Tests for the Grafilang parser
"""
import pytest

from grafilang.diagnostics import Position
from grafilang.exceptions import UnexpectedTokenError
from grafilang.nodes import (
    ArrayAccessExpression,
    ArrayExpression,
    AssignmentExpression,
    BinaryExpression,
    BlockStatement,
    CallExpression,
    ExpressionStatement,
    ForStatement,
    FunctionStatement,
    IfStatement,
    LiteralExpression,
    LogicalExpression,
    PrintStatement,
    UnaryExpression,
    WhileStatement,
)
from grafilang.token_types import TokenType
from grafilang.tests.utils import first_statement, parse_source


def test_multiplication_binds_tighter_than_addition():
    """
    Test that ``1 + 2 * 3`` groups the multiplication first.
    """
    stmt = first_statement("1 + 2 * 3")
    assert isinstance(stmt, ExpressionStatement)
    expr = stmt.expression
    assert isinstance(expr, BinaryExpression)
    assert expr.operator.type == TokenType.PLUS
    assert isinstance(expr.left, LiteralExpression)
    assert isinstance(expr.right, BinaryExpression)
    assert expr.right.operator.type == TokenType.STAR


def test_binary_operators_are_left_associative():
    """
    Test that ``10 - 4 - 3`` parses as ``(10 - 4) - 3``.
    """
    expr = first_statement("10 - 4 - 3").expression
    assert isinstance(expr.left, BinaryExpression)
    assert expr.right.value == 3


def test_and_binds_tighter_than_or():
    """
    Test that ``a ou b et c`` parses as ``a ou (b et c)``.
    """
    expr = first_statement("a ou b et c").expression
    assert isinstance(expr, LogicalExpression)
    assert expr.operator.type == TokenType.OR
    assert isinstance(expr.right, LogicalExpression)
    assert expr.right.operator.type == TokenType.AND


def test_assignment_is_right_associative():
    """
    Test that ``a = b = 3`` assigns ``b = 3`` first.
    """
    expr = first_statement("a = b = 3").expression
    assert isinstance(expr, AssignmentExpression)
    assert expr.variable.name.value == "a"
    assert isinstance(expr.value, AssignmentExpression)


def test_assignment_target_must_be_variable():
    """
    Test that assigning to anything but a variable is rejected at the ``=``.
    """
    with pytest.raises(UnexpectedTokenError) as exc:
        parse_source("t[0] = 1")
    assert exc.value.token.value == "="
    assert exc.value.position == Position(5, 6, 1)


def test_unary_chain():
    """
    Test that prefix operators nest.
    """
    expr = first_statement("!!vrai").expression
    assert isinstance(expr, UnaryExpression)
    assert isinstance(expr.operand, UnaryExpression)
    assert expr.position == Position(0, 6, 1)


def test_positions_span_first_to_last_token():
    """
    Test that node positions cover their whole source range.
    """
    stmt = first_statement("afficher 1 + 22")
    assert isinstance(stmt, PrintStatement)
    assert stmt.position == Position(0, 15, 1)
    assert stmt.expression.position == Position(9, 15, 1)


def test_parentheses_widen_position():
    """
    Test that a parenthesized expression covers its parentheses.
    """
    expr = first_statement("(1 + 2) * 3").expression
    assert expr.left.position == Position(0, 7, 1)
    assert expr.position == Position(0, 11, 1)


def test_call_positions():
    """
    Test that calls record both the whole call and the argument list.
    """
    expr = first_statement("f(1, 2)").expression
    assert isinstance(expr, CallExpression)
    assert len(expr.args) == 2
    assert expr.position == Position(0, 7, 1)
    assert expr.args_position == Position(1, 7, 1)


def test_postfix_operators_chain():
    """
    Test that calls and array accesses can follow one another.
    """
    expr = first_statement("f(1)[0]").expression
    assert isinstance(expr, ArrayAccessExpression)
    assert isinstance(expr.source, CallExpression)
    expr = first_statement("t[0](1)").expression
    assert isinstance(expr, CallExpression)
    assert isinstance(expr.callee, ArrayAccessExpression)


def test_array_literal_trailing_comma():
    """
    Test that array literals accept a trailing comma.
    """
    expr = first_statement("[1, 2,]").expression
    assert isinstance(expr, ArrayExpression)
    assert len(expr.elements) == 2
    assert first_statement("[]").expression.elements == ()


def test_if_else():
    """
    Test that both branches of a conditional are parsed into blocks.
    """
    stmt = first_statement("si a alors\n afficher 1\nsinon\n afficher 2\n afficher 3\nfin")
    assert isinstance(stmt, IfStatement)
    assert isinstance(stmt.then_branch, BlockStatement)
    assert len(stmt.then_branch.body) == 1
    assert len(stmt.else_branch.body) == 2
    assert first_statement("si a alors fin").else_branch is None


def test_if_requires_then():
    """
    Test that a condition not followed by ALORS is rejected.
    """
    with pytest.raises(UnexpectedTokenError) as exc:
        parse_source("si vrai afficher 1 fin")
    assert exc.value.token.type == TokenType.PRINT
    assert "ALORS" in exc.value.message


def test_while_requires_do():
    """
    Test that a while loop needs FAIRE after its condition.
    """
    assert isinstance(first_statement("tantque a faire fin"), WhileStatement)
    with pytest.raises(UnexpectedTokenError):
        parse_source("tantque a afficher 1 fin")


def test_for_loop_with_and_without_do():
    """
    Test that FAIRE is optional in a for loop and bounds stop before ``et``.
    """
    for source in ("pour i entre 1 et 3 afficher i fin",
                   "pour i entre 1 et 3 faire afficher i fin"):
        stmt = first_statement(source)
        assert isinstance(stmt, ForStatement)
        assert stmt.variable.value == "i"
        assert stmt.start.value == 1
        assert stmt.end.value == 3
        assert len(stmt.body) == 1


def test_function_definition():
    """
    Test that parameters may be separated by commas or spaces.
    """
    stmt = first_statement("fonction f(a, b c)\n retourner a\nfin")
    assert isinstance(stmt, FunctionStatement)
    assert [param.value for param in stmt.parameters] == ["a", "b", "c"]
    assert len(stmt.body) == 1


def test_brace_block():
    """
    Test that braces group statements into a block.
    """
    stmt = first_statement("{\n var x = 1\n afficher x\n}")
    assert isinstance(stmt, BlockStatement)
    assert len(stmt.body) == 2


def test_incomplete_input_fails_on_eof():
    """
    Test that input ending too early is reported on the EOF token.
    """
    with pytest.raises(UnexpectedTokenError) as exc:
        parse_source("si vrai alors")
    assert exc.value.token.type == TokenType.EOF
    assert exc.value.message.startswith("fin du fichier inattendu")


def test_missing_expression():
    """
    Test that a missing operand is reported on the offending token.
    """
    with pytest.raises(UnexpectedTokenError) as exc:
        parse_source("var x = )")
    assert exc.value.token.value == ")"
    assert exc.value.message == ") inattendu, expression attendue (nombre, chaîne, variable...)"
