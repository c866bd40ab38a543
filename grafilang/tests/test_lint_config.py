"""
Tests for the lint script configuration
"""
import configparser

from scripts import lint


def test_lint_targets_exist():
    """
    Test that every path the lint script checks is part of the project.
    """
    for target in lint.TARGETS:
        assert (lint.PROJECT_ROOT / target).exists()


def test_flake8_config_matches_pylint():
    """
    Test that flake8 reads the same line length pylint is configured with.
    """
    config = configparser.ConfigParser()
    config.read(lint.PROJECT_ROOT / ".flake8", encoding="utf-8")
    assert config["flake8"]["max-line-length"] == "100"
    pyproject = (lint.PROJECT_ROOT / "pyproject.toml").read_text(encoding="utf-8")
    assert "max-line-length = 100" in pyproject
