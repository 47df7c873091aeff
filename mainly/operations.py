"""Shared definitions for arithmetic operators.

This module maps operator token types produced by the lexer onto the
operations the evaluator applies. Keeping the table in one place prevents
the two components from drifting apart when an operator is added.


File: operations.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from enum import Enum

from mainly.exceptions import UnknownOperationError


class Op(str, Enum):
    """
    Enumeration of supported arithmetic operations.
    """

    ADD = "add"
    SUB = "sub"
    MUL = "mul"
    DIV = "div"


# Operator token type -> operation
TOKEN_OPS: dict[str, Op] = {
    'PLUS': Op.ADD,
    'MINUS': Op.SUB,
    'MUL': Op.MUL,
    'DIV': Op.DIV,
}


def apply(op: Op, lhs: float, rhs: float) -> float:
    """
    Apply a binary operation to two operands.

    The caller is responsible for rejecting a zero divisor before calling
    this with ``Op.DIV``.
    """
    match op:
        case Op.ADD:
            return lhs + rhs
        case Op.SUB:
            return lhs - rhs
        case Op.MUL:
            return lhs * rhs
        case Op.DIV:
            return lhs / rhs
    raise UnknownOperationError(op)


__all__ = ["Op", "TOKEN_OPS", "apply"]
