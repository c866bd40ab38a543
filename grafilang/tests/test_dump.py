"""
Tests for the JSON AST dump
"""
import json

import pytest

from grafilang.dump import dump_ast
from grafilang.exceptions import UnexpectedTokenError


def test_dump_declaration():
    """
    Test the serialized form of a declaration.
    """
    data = json.loads(dump_ast("var x = 1"))
    assert data == {
        "type": "Program",
        "body": [
            {
                "type": "DeclarationStatement",
                "name": {"type": "IDENTIFIER", "value": "x", "position": [4, 5, 1]},
                "expression": {"type": "LiteralExpression", "value": 1.0, "position": [8, 9, 1]},
                "position": [0, 9, 1],
            }
        ],
    }


def test_dump_nested_nodes():
    """
    Test that operators, optional branches and tuples are serialized.
    """
    data = json.loads(dump_ast("si !a alors afficher [1] fin"))
    stmt = data["body"][0]
    assert stmt["type"] == "IfStatement"
    assert stmt["else_branch"] is None
    assert stmt["condition"]["operator"]["type"] == "BANG"
    printed = stmt["then_branch"]["body"][0]["expression"]
    assert printed["type"] == "ArrayExpression"
    assert printed["elements"][0]["value"] == 1.0


def test_dump_keeps_accents_and_indent():
    """
    Test that non-ASCII text is written as is and indentation is configurable.
    """
    text = dump_ast('afficher "éà"', indent=None)
    assert '"éà"' in text
    assert "\n" not in text


def test_dump_rejects_invalid_source():
    """
    Test that syntax errors propagate.
    """
    with pytest.raises(UnexpectedTokenError):
        dump_ast("var = 1")
