"""
Tests for the grafi command line
"""
import json

import grafi


def write_script(tmp_path, source: str) -> str:
    """
    Write ``source`` to a script file and return its path.
    """
    path = tmp_path / "script.grafi"
    path.write_text(source, encoding="utf-8")
    return str(path)


def test_run_script(tmp_path, capsys):
    """
    Test that a script runs and prints its output.
    """
    script = write_script(tmp_path, "var x = 1\nafficher x + 2\nafficher \"é\"")
    assert grafi.main(["grafi", script]) == 0
    assert capsys.readouterr().out.splitlines() == ["3", "é"]


def test_run_script_error(tmp_path, capsys):
    """
    Test that an error is rendered and the exit status is 1.
    """
    script = write_script(tmp_path, "afficher 1\nafficher y")
    assert grafi.main(["grafi", script]) == 1
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "1"
    assert lines[1] == "Erreur à l'exécution: ligne 2, colonne 9"
    assert lines[-1].strip() == "La variable y n'existe pas"


def test_missing_script(tmp_path, capsys):
    """
    Test that an unreadable file is reported.
    """
    assert grafi.main(["grafi", str(tmp_path / "absent.grafi")]) == 1
    assert "Impossible de lire" in capsys.readouterr().out


def test_ast_option(tmp_path, capsys):
    """
    Test that --ast prints the syntax tree instead of running the script.
    """
    script = write_script(tmp_path, "afficher 1")
    assert grafi.main(["grafi", "--ast", script]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data["body"][0]["type"] == "PrintStatement"


def test_help_and_bad_arguments(capsys):
    """
    Test usage output for -h and for unknown argument patterns.
    """
    assert grafi.main(["grafi", "--help"]) == 0
    assert "Usage:" in capsys.readouterr().out
    assert grafi.main(["grafi", "a", "b"]) == 1
    assert "Usage:" in capsys.readouterr().out


def test_debug_environment(tmp_path, capsys, monkeypatch):
    """
    Test that GRAFIDEBUG dumps tokens and the AST before running.
    """
    monkeypatch.setenv("GRAFIDEBUG", "1")
    script = write_script(tmp_path, "afficher 1")
    assert grafi.main(["grafi", script]) == 0
    out = capsys.readouterr().out
    assert "Tokens:" in out
    assert "AST:" in out
    assert out.rstrip().endswith("1")


def test_call_depth_environment(tmp_path, capsys, monkeypatch):
    """
    Test that GRAFI_MAX_CALL_DEPTH lowers the call depth limit.
    """
    monkeypatch.setenv("GRAFI_MAX_CALL_DEPTH", "5")
    script = write_script(tmp_path, "fonction f() retourner f() fin\nf()")
    assert grafi.main(["grafi", script]) == 1
    assert "limite: 5" in capsys.readouterr().out


def test_repl(capsys, monkeypatch):
    """
    Test that the REPL keeps bindings and waits for incomplete input.
    """
    lines = iter([
        "var x = 1",
        "si x == 1 alors",
        "afficher x + 1",
        "fin",
        "afficher z",
        "exit",
    ])
    monkeypatch.setattr("builtins.input", lambda _prompt: next(lines))
    assert grafi.main(["grafi"]) == 0
    out = capsys.readouterr().out
    assert "2" in out.splitlines()
    assert "La variable z n'existe pas" in out


def test_repl_end_of_input(capsys, monkeypatch):
    """
    Test that the REPL stops at the end of its input.
    """
    def no_input(_prompt):
        raise EOFError

    monkeypatch.setattr("builtins.input", no_input)
    assert grafi.main(["grafi"]) == 0
    assert "REPL" in capsys.readouterr().out
