"""
Grafilang Language Server.

This server provides basic language features for Grafilang source files using
`pygls`. It reuses the Grafilang lexer and parser to publish the first syntax
error of a document as a diagnostic and to build a simple symbol index
supporting hover information and document symbols.

Only lexing and parsing happen here; programs are never executed by the
server.


File: server.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional

from lsprotocol import types
from pygls.lsp.server import LanguageServer

from grafilang import diagnostics
from grafilang.exceptions import CodeError
from grafilang.lexer import tokenize
from grafilang.nodes import DeclarationStatement, FunctionStatement
from grafilang.parser import Parser

logger = logging.getLogger(__name__)


@dataclass
class GrafiSymbol:
    """Represents a top-level symbol in a Grafilang file."""

    name: str
    kind: types.SymbolKind
    range: types.Range
    detail: str


def _to_range(source: str, position: diagnostics.Position) -> types.Range:
    """Convert a source position into a 0-based LSP range."""
    mark = diagnostics.marker("", position, source)
    return types.Range(
        start=types.Position(line=mark.start_line - 1, character=mark.start_column - 1),
        end=types.Position(line=mark.end_line - 1, character=mark.end_column - 1),
    )


def collect_diagnostics(source: str) -> List[types.Diagnostic]:
    """
    Lex and parse ``source`` and return its diagnostics.

    Parsing stops at the first error, so the list holds at most one entry.
    """
    try:
        Parser(tokenize(source)).parse()
    except CodeError as e:
        return [
            types.Diagnostic(
                range=_to_range(source, e.position),
                message=e.message,
                severity=types.DiagnosticSeverity.Error,
                source="grafilang",
            )
        ]
    return []


def collect_symbols(source: str) -> List[GrafiSymbol]:
    """Parse ``source`` and extract its top-level functions and variables."""
    try:
        program = Parser(tokenize(source)).parse()
    except CodeError:
        return []
    symbols: List[GrafiSymbol] = []
    for stmt in program.body:
        if isinstance(stmt, FunctionStatement):
            params = ", ".join(param.value for param in stmt.parameters)
            symbols.append(
                GrafiSymbol(
                    stmt.name.value,
                    types.SymbolKind.Function,
                    _to_range(source, stmt.name.position),
                    f"fonction {stmt.name.value}({params})",
                )
            )
        elif isinstance(stmt, DeclarationStatement):
            symbols.append(
                GrafiSymbol(
                    stmt.name.value,
                    types.SymbolKind.Variable,
                    _to_range(source, stmt.name.position),
                    f"var {stmt.name.value}",
                )
            )
    return symbols


class GrafiLanguageServer(LanguageServer):
    """Language server for Grafilang source files."""

    def __init__(self) -> None:
        super().__init__("grafi-ls", "v0.1.0")
        self.symbols_by_uri: Dict[str, List[GrafiSymbol]] = {}

    def update(self, uri: str, text: str) -> None:
        """Re-index ``uri`` and publish its diagnostics."""
        self.symbols_by_uri[uri] = collect_symbols(text)
        found = collect_diagnostics(text)
        logger.debug("%s: %d diagnostic(s)", uri, len(found))
        self.text_document_publish_diagnostics(
            types.PublishDiagnosticsParams(uri=uri, diagnostics=found)
        )

    def find_symbol(self, uri: str, name: str) -> Optional[GrafiSymbol]:
        """Return the first top-level symbol of ``uri`` called ``name``."""
        for sym in self.symbols_by_uri.get(uri, []):
            if sym.name == name:
                return sym
        return None


lang_server = GrafiLanguageServer()


@lang_server.feature(types.TEXT_DOCUMENT_DID_OPEN)
def did_open(ls: GrafiLanguageServer, params: types.DidOpenTextDocumentParams) -> None:
    """Check a document when it is opened."""
    ls.update(params.text_document.uri, params.text_document.text)


@lang_server.feature(types.TEXT_DOCUMENT_DID_CHANGE)
def did_change(ls: GrafiLanguageServer, params: types.DidChangeTextDocumentParams) -> None:
    """Check a document again when it changes."""
    doc = ls.workspace.get_text_document(params.text_document.uri)
    ls.update(doc.uri, doc.source)


@lang_server.feature(types.TEXT_DOCUMENT_HOVER)
def hover(ls: GrafiLanguageServer, params: types.HoverParams) -> Optional[types.Hover]:
    """Return hover information for the symbol under the cursor."""
    doc = ls.workspace.get_text_document(params.text_document.uri)
    word = doc.word_at_position(params.position)
    if not word:
        return None
    sym = ls.find_symbol(doc.uri, word)
    if sym is None:
        return None
    contents = types.MarkupContent(kind=types.MarkupKind.PlainText, value=sym.detail)
    return types.Hover(contents=contents)


@lang_server.feature(types.TEXT_DOCUMENT_DOCUMENT_SYMBOL)
def document_symbols(ls: GrafiLanguageServer, params: types.DocumentSymbolParams):
    """Return top-level symbols for the given document."""
    result: List[types.DocumentSymbol] = []
    for sym in ls.symbols_by_uri.get(params.text_document.uri, []):
        result.append(
            types.DocumentSymbol(
                name=sym.name,
                kind=sym.kind,
                range=sym.range,
                selection_range=sym.range,
                detail=sym.detail,
            )
        )
    return result


def main() -> None:
    """Start the language server."""
    logging.basicConfig(level=logging.INFO)
    lang_server.start_io()


if __name__ == "__main__":
    main()
