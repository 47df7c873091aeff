"""
Mainly Language Interpreter

This is the main entry point for the Mainly language interpreter.

Workflow:
1. The source script is read from the file specified on the command line.
2. The Lexer turns the source into tokens on demand.
3. The Interpreter pulls statements from the token stream and executes them,
   evaluating `printcal` chains strictly left to right.
"""
import os
import sys

from mainly.exceptions import MainlyError
from mainly.interpreter import Interpreter, interpret
from mainly.lexer import tokenize


def print_usage():
    """
    Print usage.
    """
    print()
    print("Mainly Language Interpreter")
    print()
    print("Usage:")
    print("    mly <script.mly>")
    print()
    print("Arguments:")
    print("    <script.mly>")
    print("        Path to a Mainly source file to execute.")
    print()
    print("Example:")
    print("    mly hello.mly")
    print()
    print("Or run with no arguments to enter interactive mode (REPL).")
    print()
    print("Options:")
    print("    -h, --help")
    print("        Show this help message and exit.")
    print()
    print("Environment:")
    print("    MLYDEBUG")
    print("        When set, print the token stream before running the script.")


def debug_print_tokens(tokens):
    """
    Print tokenized source
    """
    print("\nTokens:\n")
    print(tokens)
    print(" ")


def run_script(script_name: str) -> int:
    """
    Run a Mainly script
    """
    with open(script_name, "r", encoding="utf-8") as f:
        code = f.read()

    if os.environ.get('MLYDEBUG'):
        try:
            debug_print_tokens(tokenize(code, script_name))
        except MainlyError as e:
            print(f"Tokens unavailable: {e}")

    return interpret(code, script_name)


def run_repl():
    """
    Run the interactive REPL
    """
    print("Mainly Language Interpreter - REPL")
    print("Type `exit` or `quit` to leave.")
    while True:
        try:
            line = input(">>> ")
            if line.strip() in {"exit", "quit"}:
                break
            try:
                Interpreter("<stdin>").execute(line)
            except MainlyError as e:
                print(e.diagnostic())
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
    if len(args) == 1:
        return run_script(args[0])
    print_usage()
    return 1


def cli():
    """
    Console script entry point.
    """
    sys.exit(main(sys.argv))


if __name__ == "__main__":
    cli()
