"""
Tests for conditionals and logical operators
"""
import pytest

from grafilang.diagnostics import Position
from grafilang.exceptions import ExecutionError, UndefinedVariableError
from grafilang.tests.utils import run_source


def test_if_else_french():
    """
    Test a French conditional with both branches.
    """
    source = (
        "var age = 20\n"
        "si age >= 18 alors\n"
        '    afficher "majeur"\n'
        "sinon\n"
        '    afficher "mineur"\n'
        "fin\n"
    )
    assert run_source(source) == ["majeur"]


def test_if_else_english():
    """
    Test that English keywords behave like the French ones.
    """
    assert run_source("IF false THEN print 1 ELSE print 2 END") == ["2"]


def test_if_without_else():
    """
    Test that a false condition without SINON does nothing.
    """
    assert run_source("si faux alors afficher 1 fin\nafficher 2") == ["2"]


def test_condition_must_be_boolean():
    """
    Test that a non-boolean condition is an error at the condition.
    """
    with pytest.raises(ExecutionError) as exc:
        run_source("si 1 alors afficher 1 fin")
    assert exc.value.message == "Un booléen doit être utilisé pour une condition (nombre)"
    assert exc.value.position == Position(3, 4, 1)


def test_branch_scope():
    """
    Test that declarations inside a branch stay inside it.
    """
    with pytest.raises(UndefinedVariableError):
        run_source("si vrai alors var x = 1 fin\nafficher x")


def test_logical_short_circuit():
    """
    Test that the right operand is skipped when the left decides.
    """
    assert run_source("afficher faux et inconnu\nafficher vrai ou inconnu") == ["false", "true"]


def test_logical_results():
    """
    Test the truth tables and the precedence of et over ou.
    """
    source = (
        "afficher vrai et faux\n"
        "afficher vrai et vrai\n"
        "afficher faux ou faux\n"
        "afficher faux ou vrai\n"
        "afficher vrai ou faux et faux\n"
        "afficher true and false or true\n"
    )
    assert run_source(source) == ["false", "true", "false", "true", "true", "true"]


def test_logical_left_operand_must_be_boolean():
    """
    Test that a non-boolean left operand is an error at that operand.
    """
    with pytest.raises(ExecutionError) as exc:
        run_source("afficher 1 ou vrai")
    assert exc.value.message == "L'expression à gauche d'un ou doit être un booléen (nombre)"
    assert exc.value.position == Position(9, 10, 1)


def test_logical_right_operand_must_be_boolean():
    """
    Test that a non-boolean right operand is an error at that operand.
    """
    with pytest.raises(ExecutionError) as exc:
        run_source("afficher vrai et 1")
    assert exc.value.message == "L'expression à droite d'un et doit être un booléen (nombre)"
    assert exc.value.position == Position(17, 18, 1)
