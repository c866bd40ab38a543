"""
Lint script runner.

flake8 reads its settings from ``.flake8`` and pylint from the
``[tool.pylint]`` tables of ``pyproject.toml``, both at the project root.
"""
import subprocess
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
TARGETS = ["grafilang", "grafi.py"]


def main():
    """
    Lint the Grafilang project using flake8 and pylint.
    """
    print("Running flake8...")
    subprocess.run(["flake8", *TARGETS], cwd=PROJECT_ROOT, check=True)

    print("Running pylint...")
    subprocess.run(
        ["pylint", "--rcfile", "pyproject.toml", *TARGETS], cwd=PROJECT_ROOT, check=True
    )


if __name__ == "__main__":
    main()
