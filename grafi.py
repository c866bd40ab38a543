"""
Grafilang Interpreter

This is the main entry point for the Grafilang interpreter.

Workflow:
1. The source script is read from the file specified on the command line.
2. The lexer tokenizes the source code into meaningful tokens.
3. The parser processes tokens into an AST following the language grammar.
4. The interpreter walks the AST, evaluating expressions and executing statements.
5. Errors are printed as a caret diagnostic under the offending source line.


File: grafi.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""
import os
import sys

from grafilang.dump import dump_ast
from grafilang.exceptions import CodeError, UnexpectedTokenError
from grafilang.interpreter import DEFAULT_MAX_CALL_DEPTH, Interpreter
from grafilang.lexer import tokenize
from grafilang.output import ConsoleOutput
from grafilang.parser import Parser
from grafilang.token_types import TokenType


def print_usage():
    """
    Print usage.
    """
    print()
    print("Grafilang Interpreter")
    print()
    print("Usage:")
    print("    grafi <script.grafi>")
    print("    grafi --ast <script.grafi>")
    print()
    print("Arguments:")
    print("    <script.grafi>")
    print("        Path to a Grafilang source file to execute.")
    print()
    print("Example:")
    print("    grafi bonjour.grafi")
    print()
    print("Or run with no arguments to enter interactive mode (REPL).")
    print()
    print("Options:")
    print("    --ast")
    print("        Print the syntax tree of the script as JSON instead of running it.")
    print("    -h, --help")
    print("        Show this help message and exit.")
    print()
    print("Environment:")
    print("    GRAFIDEBUG=1")
    print("        Print the tokens and the syntax tree before running a script.")
    print("    GRAFI_MAX_CALL_DEPTH=<n>")
    print(f"        Maximum number of nested function calls (default {DEFAULT_MAX_CALL_DEPTH}).")


def debug_print_tokens_ast(tokens, ast):
    """
    Print tokenized source and AST
    """
    print("\nTokens:\n")
    print(tokens)
    print("\nAST:\n")
    print(ast)
    print(" ")


def make_interpreter() -> Interpreter:
    """
    Create a console interpreter honouring ``GRAFI_MAX_CALL_DEPTH``.
    """
    depth = os.environ.get("GRAFI_MAX_CALL_DEPTH")
    if depth and depth.isdigit():
        return Interpreter(ConsoleOutput(), max_call_depth=int(depth))
    return Interpreter(ConsoleOutput())


def read_source(script_name: str) -> str:
    """
    Read a script file as UTF-8 text.
    """
    with open(script_name, "r", encoding="utf-8") as f:
        return f.read()


def run_script(script_name: str) -> int:
    """
    Run a Grafilang script
    """
    try:
        code = read_source(script_name)
    except OSError as e:
        print(f"Impossible de lire {script_name}: {e.strerror}")
        return 1

    try:
        if os.environ.get("GRAFIDEBUG"):
            tokens = tokenize(code)
            debug_print_tokens_ast(tokens, Parser(tokens).parse())

        make_interpreter().run(code)
    except CodeError as e:
        print(e.render(code))
        return 1
    return 0


def print_ast(script_name: str) -> int:
    """
    Print the AST of a Grafilang script as JSON
    """
    try:
        code = read_source(script_name)
    except OSError as e:
        print(f"Impossible de lire {script_name}: {e.strerror}")
        return 1

    try:
        print(dump_ast(code))
    except CodeError as e:
        print(e.render(code))
        return 1
    return 0


def run_repl():
    """
    Run the interactive REPL
    """
    print("Grafilang Interpreter - REPL")
    print("Type `exit` or `quit` to leave.")
    interpreter = make_interpreter()
    buffer: list[str] = []
    while True:
        try:
            prompt = ">>> " if not buffer else "... "
            line = input(prompt)
            if not buffer and line.strip() in {"exit", "quit"}:
                break
            buffer.append(line)
            source = "\n".join(buffer)
            try:
                interpreter.run(source, reset=False)
                buffer.clear()
            except UnexpectedTokenError as e:
                # An error on the EOF token means the input is incomplete
                if e.token.type == TokenType.EOF:
                    continue
                print(e.render(source))
                buffer.clear()
            except CodeError as e:
                print(e.render(source))
                buffer.clear()
        except KeyboardInterrupt:
            print("\nInterrupted.")
            break
        except EOFError:
            print()
            break


def main(argv: list[str]) -> int:
    """
    Entry point for the CLI.

    Behaviour:
    - No arguments: enter the REPL.
    - One argument equal to ``-h`` or ``--help``: print usage and exit.
    - ``--ast`` followed by a path: print the script's syntax tree as JSON.
    - One argument that is not an option: treat it as the path to a script and run it.
    - Any other pattern: print usage and return a non-zero exit code.
    """
    args = argv[1:]
    if not args:
        run_repl()
        return 0
    if len(args) == 1 and args[0] in ('-h', '--help'):
        print_usage()
        return 0
    if len(args) == 2 and args[0] == '--ast':
        return print_ast(args[1])
    if len(args) == 1 and not args[0].startswith('-'):
        return run_script(args[0])
    print_usage()
    return 1


def console_main():
    """
    Console script entry point.
    """
    sys.exit(main(sys.argv))


if __name__ == "__main__":
    console_main()
