"""
Statement parsing utilities for Grafilang.

These functions operate on a `grafilang.parser.parser.Parser` instance and
handle the various statement forms in the language such as blocks,
conditionals, loops, and function definitions. Keyword-delimited bodies
(``alors ... fin``, ``faire ... fin``) are parsed with :func:`parse_block`
and a list of accepted closing keywords.


File: statements.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from typing import TYPE_CHECKING

from grafilang.nodes import (
    BlockStatement,
    DeclarationStatement,
    ExpressionStatement,
    ForStatement,
    FunctionStatement,
    IfStatement,
    PrintStatement,
    ReturnStatement,
    Statement,
    WhileStatement,
)
from grafilang.token_types import TokenType

from .expressions import span

if TYPE_CHECKING:
    from grafilang.parser import Parser


def parse_block(parser: 'Parser', delimiters: list[TokenType], message: str) -> BlockStatement:
    """
    Parse statements until one of ``delimiters`` and consume the delimiter.

    Args:
        parser: The parser instance.
        delimiters: Token kinds closing the block.
        message: Error message used when the input ends before a delimiter.

    Returns:
        BlockStatement: spanning the first statement token to the delimiter.
    """
    first = parser.curr_token
    statements = []
    while not parser.check(*delimiters) and not parser.is_end():
        statements.append(parser.statement())
    close_tok = parser.eat(delimiters, message)
    return BlockStatement(tuple(statements), span(first.position, close_tok.position))


def parse_statement(parser: 'Parser') -> Statement:
    """
    Parse a single statement.

    Args:
        parser: The parser instance.

    Returns:
        Statement: the AST node.
    """
    if parser.match(TokenType.FUNCTION):
        return parse_function(parser)
    if parser.match(TokenType.RETURN):
        return parse_return(parser)
    if parser.match(TokenType.VAR):
        return parse_declaration(parser)
    if parser.match(TokenType.IF):
        return parse_if(parser)
    if parser.match(TokenType.WHILE):
        return parse_while(parser)
    if parser.match(TokenType.FOR):
        return parse_for(parser)
    if parser.match(TokenType.PRINT):
        return parse_print(parser)
    if parser.match(TokenType.LEFT_BRACE):
        open_tok = parser.previous()
        block = parser.block([TokenType.RIGHT_BRACE], "'}' attendu à la fin d'un bloc")
        return BlockStatement(block.body, span(open_tok.position, block.position))
    expr_node = parser.expr()
    return ExpressionStatement(expr_node, expr_node.position)


def parse_print(parser: 'Parser') -> PrintStatement:
    """
    Parse an 'afficher' statement.

    Syntax:
        afficher <expression>
    """
    tok = parser.previous()
    expr_node = parser.expr()
    return PrintStatement(expr_node, span(tok.position, expr_node.position))


def parse_return(parser: 'Parser') -> ReturnStatement:
    """
    Parse a 'retourner' statement.

    Syntax:
        retourner <expression>
    """
    tok = parser.previous()
    expr_node = parser.expr()
    return ReturnStatement(expr_node, span(tok.position, expr_node.position))


def parse_function(parser: 'Parser') -> FunctionStatement:
    """
    Parse a function definition.

    Syntax:
        fonction <name>(<param>, ...) <statements> fin
    """
    start_tok = parser.previous()
    name = parser.eat([TokenType.IDENTIFIER], "nom de la fonction attendu")
    parser.eat([TokenType.LEFT_PAREN], "'(' attendu pour définir les paramètres de la fonction")
    params = []
    while not parser.check(TokenType.RIGHT_PAREN):
        params.append(parser.eat([TokenType.IDENTIFIER], "nom de paramètre attendu"))
        parser.match(TokenType.COMMA)
    parser.eat([TokenType.RIGHT_PAREN], "')' attendu à la fin de la liste des paramètres")
    body = parser.block([TokenType.END], "'FIN' attendu à la fin de la fonction")
    return FunctionStatement(name, tuple(params), body.body, span(start_tok.position, body.position))


def parse_if(parser: 'Parser') -> IfStatement:
    """
    Parse a conditional 'si' statement with an optional 'sinon' branch.

    Syntax:
        si <condition> alors <statements> [sinon <statements>] fin
    """
    tok = parser.previous()
    condition = parser.expr()
    parser.eat([TokenType.THEN], "ALORS est attendu à la fin d'une condition")
    then_branch = parser.block(
        [TokenType.END, TokenType.ELSE], "'FIN' attendu à la fin d'une condition"
    )
    else_branch = None
    if parser.previous().type == TokenType.ELSE:
        else_branch = parser.block([TokenType.END], "'FIN' attendu à la fin d'une condition")
    return IfStatement(condition, then_branch, else_branch, span(tok.position, parser.previous().position))


def parse_while(parser: 'Parser') -> WhileStatement:
    """
    Parse a 'tantque' loop.

    Syntax:
        tantque <condition> faire <statements> fin
    """
    tok = parser.previous()
    condition = parser.expr()
    parser.eat([TokenType.THEN], "'FAIRE' est attendu après la condition d'une boucle")
    body = parser.block([TokenType.END], "'FIN' attendu à la fin d'une boucle")
    return WhileStatement(condition, body, span(tok.position, body.position))


def parse_for(parser: 'Parser') -> ForStatement:
    """
    Parse a 'pour' loop. Bounds are parsed as terms so the 'et' separating
    them is not taken for a logical operator.

    Syntax:
        pour <name> entre <start> et <end> [faire] <statements> fin
    """
    tok = parser.previous()
    variable = parser.eat([TokenType.IDENTIFIER], "nom de variable attendu")
    parser.eat([TokenType.FROM], "'ENTRE' attendu ici")
    start = parser.term()
    parser.eat([TokenType.AND], "mot clef 'ET' attendu")
    end = parser.term()
    parser.match(TokenType.THEN)
    body = parser.block([TokenType.END], "'FIN' attendu à la fin d'une boucle")
    return ForStatement(variable, start, end, body.body, span(tok.position, body.position))


def parse_declaration(parser: 'Parser') -> DeclarationStatement:
    """
    Parse a 'var' variable declaration.

    Syntax:
        var <name> = <expression>
    """
    tok = parser.previous()
    name = parser.eat([TokenType.IDENTIFIER], "un nom de variable est attendu à gauche d'un '='")
    parser.eat([TokenType.EQUAL], "'=' attendu pour déclarer une variable")
    expr_node = parser.expr()
    return DeclarationStatement(name, expr_node, span(tok.position, expr_node.position))
