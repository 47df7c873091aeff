"""Errors.

Mainly reports two tiers of error. A ``DiagnosticError`` means a statement
has the wrong shape: it carries a stable ``ERROR[000N]`` code and the index
of the statement that failed. A ``FatalError`` is raised by the lexer or the
expression evaluator for malformed tokens and arithmetic faults, and carries
the source line of the offending text.

Both tiers propagate out of the interpreter as exceptions; only the
top-level ``run``/``interpret`` helpers catch them.


File: exceptions.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""


class MainlyError(Exception):
    """
    Base class for every error raised while lexing or interpreting a program.
    """
    def __init__(self, message, line=None, file=None):
        self.line = line
        self.file = file
        self.reason = message
        if line is not None:
            message += f" on line {line}"
        if file is not None:
            message += f" in {file}"
        super().__init__(message)

    def diagnostic(self) -> str:
        """
        Return the single line written to stderr for this error.
        """
        return f"{type(self).__name__}: {self}"


class DiagnosticError(MainlyError):
    """
    Recoverable statement-shape error with a stable diagnostic code.
    """
    code = "0000"
    reason = "Unexpected token"

    def __init__(self, line, file=None):
        self.line = line
        self.file = file
        message = f"ERROR[{self.code}] {self.reason} in line {line}"
        Exception.__init__(self, message)

    def diagnostic(self) -> str:
        return str(self)


class PrintCalOperandError(DiagnosticError):
    """
    ``printcal`` was not followed by a number.
    """
    code = "0001"
    reason = "Use print instead of printcal"


class PrintOperandError(DiagnosticError):
    """
    ``print`` was not followed by quoted text.
    """
    code = "0002"


class UnexpectedStatementError(DiagnosticError):
    """
    A statement started with something other than a keyword.
    """
    code = "0003"


class FatalError(MainlyError):
    """
    Unrecoverable lexer or evaluator fault.
    """


class UnexpectedCharacterError(FatalError):
    """
    Error for characters that cannot start any token.
    """
    def __init__(self, char, line=None, file=None):
        self.char = char
        super().__init__(f"Unexpected character '{char}'", line, file)


class UnknownKeywordError(FatalError):
    """
    Error for words that are not in the keyword table.
    """
    def __init__(self, word, line=None, file=None):
        self.word = word
        super().__init__(f"Unexpected keyword '{word}'", line, file)


class ExpectedNumberError(FatalError):
    """
    Error for an operand position that does not hold a number.
    """
    def __init__(self, token, line=None, file=None):
        self.token = token
        super().__init__(f"Expected a number but found {token.type}", line, file)


class UnexpectedTokenError(FatalError):
    """
    Error for a token that cannot continue an expression.
    """
    def __init__(self, token, line=None, file=None):
        self.token = token
        super().__init__(f"Unexpected token {token.type}", line, file)


class DivisionByZeroError(FatalError):
    """
    Error for a divisor that is exactly zero.
    """
    def __init__(self, line=None, file=None):
        super().__init__("Division by zero", line, file)


class UnknownOperationError(FatalError):
    """
    Error for operations the evaluator cannot apply.
    """
    def __init__(self, op, line=None, file=None):
        self.op = op
        super().__init__(f"Unknown operation '{op}'", line, file)
