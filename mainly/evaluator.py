"""Expression evaluator.

Arithmetic in Mainly has no precedence: a chain such as ``2 + 3 * 4`` is
reduced strictly left to right, so each operator is applied to the running
value and the next number as soon as it is read (``(2 + 3) * 4 == 20``).

The evaluator pulls tokens from the same :class:`~mainly.lexer.Lexer` the
interpreter uses. An expression ends at end of input or at the keyword that
starts the next statement; that keyword is left in the stream.


File: evaluator.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import math
from decimal import Decimal

from mainly.exceptions import (
    DivisionByZeroError,
    ExpectedNumberError,
    UnexpectedTokenError,
)
from mainly.lexer import Lexer
from mainly.operations import Op, TOKEN_OPS, apply


STATEMENT_KEYWORDS = ('PRINT', 'PRINTCAL')


def _expect_number(lexer: Lexer) -> float:
    tok = lexer.next_token()
    if tok.type != 'NUMBER':
        raise ExpectedNumberError(tok, tok.line, lexer.file)
    return tok.value


def parse_expression(lexer: Lexer, seed: float | None = None) -> float:
    """
    Evaluate a left-to-right arithmetic chain.

    Parameters:
        lexer (Lexer): The token stream, positioned at the first operand,
            or at the first operator when ``seed`` is given.
        seed (float | None): An operand already read by the caller.

    Returns:
        float: The value of the chain.

    Raises:
        ExpectedNumberError: If an operand position does not hold a number.
        DivisionByZeroError: If a divisor is exactly zero.
        UnexpectedTokenError: If a token cannot continue the chain.
    """
    value = _expect_number(lexer) if seed is None else seed

    while True:
        tok = lexer.peek_token()
        if tok.type == 'EOF' or tok.type in STATEMENT_KEYWORDS:
            return value

        lexer.next_token()
        op = TOKEN_OPS.get(tok.type)
        if op is None:
            raise UnexpectedTokenError(tok, tok.line, lexer.file)

        operand = _expect_number(lexer)
        if op == Op.DIV and operand == 0.0:
            raise DivisionByZeroError(tok.line, lexer.file)
        value = apply(op, value, operand)


def format_number(value: float) -> str:
    """
    Render a result the way it is printed by ``printcal``.

    Integral values drop their fractional part and no value is written in
    exponent notation: ``20.0 -> '20'``, ``0.1 + 0.2 -> '0.30000000000000004'``,
    ``1e21 -> '1000000000000000000000'``.
    """
    if math.isnan(value):
        return 'NaN'
    if math.isinf(value):
        return 'inf' if value > 0 else '-inf'

    text = format(Decimal(repr(value)), 'f')
    if '.' in text:
        text = text.rstrip('0').rstrip('.')
    return text
