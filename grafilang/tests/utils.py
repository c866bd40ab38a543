"""
Utility functions shared across Grafilang tests.
"""
from grafilang.interpreter import Interpreter
from grafilang.lexer import tokenize
from grafilang.nodes import Program
from grafilang.output import ListOutput
from grafilang.parser import Parser


def parse_source(source: str) -> Program:
    """
    Parse source code and return the AST.
    """
    return Parser(tokenize(source)).parse()


def run_source(source: str, **kwargs) -> list[str]:
    """
    Run source code in a fresh interpreter and return the printed lines.
    """
    out = ListOutput()
    Interpreter(out, **kwargs).run(source)
    return out.lines


def first_statement(source: str):
    """
    Parse source code and return its first statement.
    """
    return parse_source(source).body[0]
