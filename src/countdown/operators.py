"""
Arithmetic operators for the Countdown Numbers Game and the rules that
decide which operand pairs are worth combining.
"""

from enum import Enum

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1


class Op(Enum):
    """Binary operators, in the order the solver tries them."""
    ADD = ('+', 1)
    SUB = ('-', 2)
    MUL = ('*', 3)
    DIV = ('/', 3)

    def __init__(self, symbol: str, priority: int):
        self.symbol = symbol
        self.priority = priority


OPERATIONS = (Op.ADD, Op.SUB, Op.MUL, Op.DIV)


def is_valid(op: Op, x: int, y: int) -> bool:
    """
    Check whether combining x and y with op can yield a new, non-redundant value.

    x is the first operand in encounter order, y the second. Each operator
    only accepts one operand order so commutative duplicates are never built.

    Raises:
        ValueError: If op is not one of the four supported operators
    """
    if op is Op.ADD:
        return x <= y
    if op is Op.SUB:
        # Only positive differences
        return x > y
    if op is Op.MUL:
        # x * 1 = x, useless step
        return x != 1 and y != 1 and x <= y
    if op is Op.DIV:
        # Exact division only, and never by 1
        return y > 1 and x % y == 0
    raise ValueError("Operator not supported")


def apply(op: Op, a: int, b: int) -> int:
    """
    Apply op to a and b using signed 64-bit integer semantics.

    Division truncates toward zero.

    Raises:
        ValueError: If op is not one of the four supported operators
        OverflowError: If the result does not fit in a signed 64-bit integer
    """
    if op is Op.ADD:
        total = a + b
    elif op is Op.SUB:
        total = a - b
    elif op is Op.MUL:
        total = a * b
    elif op is Op.DIV:
        total = abs(a) // abs(b)
        if (a < 0) != (b < 0):
            total = -total
    else:
        raise ValueError("Operator not supported")

    if total < INT64_MIN or total > INT64_MAX:
        raise OverflowError(f"{a} {op.symbol} {b} overflows a 64-bit integer")
    return total
