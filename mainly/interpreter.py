"""Interpreter.

This is a statement dispatcher that drives the lexer directly; Mainly has no
parse tree. Each iteration pulls the keyword that starts a statement and then
pulls whatever that statement needs.

1. Statements
- `print "<text>"`: outputs the text, without quotes.
- `printcal <number> <op> <number> ...`: outputs the value of a left-to-right
  arithmetic chain. The leading number is read here and handed to the
  evaluator as its seed so the whole statement comes from one token stream.

2. Statement counter
The interpreter counts handled statements starting at 1. Diagnostics cite
this count as their "line", whatever source line the statement is on.

3. Error Handling
A statement with the wrong shape raises a `DiagnosticError` subclass with a
stable `ERROR[000N]` code. Faults inside the lexer or evaluator raise a
`FatalError` subclass. Both propagate out of `Interpreter.execute`;
`run()` and `interpret()` turn them into a single reported line.


File: interpreter.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import sys

from mainly.evaluator import format_number, parse_expression
from mainly.exceptions import (
    DiagnosticError,
    MainlyError,
    PrintCalOperandError,
    PrintOperandError,
    UnexpectedStatementError,
)
from mainly.lexer import Lexer


class Interpreter:
    """Statement interpreter for Mainly."""

    def __init__(self, file: str = '<string>', echo: bool = True):
        """
        Initialize the interpreter.

        Parameters:
            file (str): Name used in error messages.
            echo (bool): Print each output line to stdout as it is produced.
        """
        self.file = file
        self.echo = echo
        self.output: list[str] = []
        self.statement = 1

    def emit(self, text: str):
        """
        Record an output line, echoing it when enabled.
        """
        self.output.append(text)
        if self.echo:
            print(text)

    def execute(self, code: str) -> list[str]:
        """
        Run every statement in a program.

        Parameters:
            code (str): The program text.

        Returns:
            list[str]: The output lines produced by this call.

        Raises:
            DiagnosticError: If a statement has the wrong shape.
            FatalError: If the lexer or evaluator rejects the program.
        """
        lexer = Lexer(code, self.file)
        start = len(self.output)

        while True:
            tok = lexer.next_token()
            match tok.type:
                case 'PRINT':
                    self.exec_print(lexer)
                case 'PRINTCAL':
                    self.exec_printcal(lexer)
                case 'EOF':
                    break
                case _:
                    raise UnexpectedStatementError(self.statement, self.file)
            self.statement += 1

        return self.output[start:]

    def exec_print(self, lexer: Lexer):
        """
        Handle the remainder of a ``print`` statement.
        """
        tok = lexer.next_token()
        if tok.type != 'TEXT':
            raise PrintOperandError(self.statement, self.file)
        self.emit(tok.value)

    def exec_printcal(self, lexer: Lexer):
        """
        Handle the remainder of a ``printcal`` statement.
        """
        tok = lexer.next_token()
        if tok.type != 'NUMBER':
            raise PrintCalOperandError(self.statement, self.file)
        value = parse_expression(lexer, seed=tok.value)
        self.emit(format_number(value))


def run(code: str, file: str = '<string>') -> tuple[list[str], str | None]:
    """
    Run a program without touching stdout or stderr.

    Returns:
        tuple[list[str], str | None]: The output lines produced before any
        failure, and the diagnostic line if the program failed.
    """
    interpreter = Interpreter(file, echo=False)
    try:
        interpreter.execute(code)
    except MainlyError as e:
        return interpreter.output, e.diagnostic()
    return interpreter.output, None


def interpret(code: str, file: str = '<string>') -> int:
    """
    Run a program against the real stdout and stderr.

    Returns:
        int: ``0`` on success, ``1`` after a diagnostic, ``2`` after a fatal error.
    """
    interpreter = Interpreter(file)
    try:
        interpreter.execute(code)
    except DiagnosticError as e:
        print(e.diagnostic(), file=sys.stderr)
        return 1
    except MainlyError as e:
        print(e.diagnostic(), file=sys.stderr)
        return 2
    return 0
