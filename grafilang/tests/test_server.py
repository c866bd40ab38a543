"""
Tests for the language server helpers
"""
from lsprotocol import types

from grafilang.server import collect_diagnostics, collect_symbols


def test_valid_source_has_no_diagnostics():
    """
    Test that correct code produces no diagnostic.
    """
    assert collect_diagnostics("var x = 1\nafficher x") == []


def test_runtime_errors_are_not_reported():
    """
    Test that the server only lexes and parses.
    """
    assert collect_diagnostics("afficher inconnu / 0") == []


def test_lexical_error_diagnostic():
    """
    Test that an unknown character becomes a 0-based error range.
    """
    found = collect_diagnostics("var x = 1\nafficher @")
    assert len(found) == 1
    diagnostic = found[0]
    assert diagnostic.message == "@ inattendu"
    assert diagnostic.severity == types.DiagnosticSeverity.Error
    assert diagnostic.range.start == types.Position(line=1, character=9)
    assert diagnostic.range.end == types.Position(line=1, character=10)


def test_syntax_error_diagnostic():
    """
    Test that a grammar error is reported on the offending token.
    """
    found = collect_diagnostics("si vrai afficher 1 fin")
    assert len(found) == 1
    assert "ALORS" in found[0].message
    assert found[0].range.start.character == 8


def test_symbols():
    """
    Test that top-level functions and variables are indexed.
    """
    symbols = collect_symbols("fonction aire(l, h)\n retourner l * h\nfin\nvar cote = 2")
    assert [(sym.name, sym.kind) for sym in symbols] == [
        ("aire", types.SymbolKind.Function),
        ("cote", types.SymbolKind.Variable),
    ]
    assert symbols[0].detail == "fonction aire(l, h)"
    assert symbols[1].range.start == types.Position(line=3, character=4)


def test_symbols_of_invalid_source():
    """
    Test that a document that does not parse has no symbols.
    """
    assert collect_symbols("fonction (") == []
