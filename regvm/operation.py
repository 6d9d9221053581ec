"""The operations each instruction performs on the machine."""

import sys

from regvm.errors import ErrorKind, InterpreterError
from regvm.simulator import REGISTER_COUNT


def _check_registers(*regs):
    if any(not 0 <= reg < REGISTER_COUNT for reg in regs):
        raise InterpreterError(ErrorKind.OUT_OF_RANGE)


def _truncated_quotient(a, b):
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def _divisor(sim, rhs):
    value = 0 if rhs == 0 else sim[rhs]
    if value == 0:
        raise InterpreterError(ErrorKind.DIVISION_BY_ZERO)
    return value


def add(sim, dest, lhs, rhs):
    """dest = lhs + rhs, wrapping on overflow."""
    _check_registers(dest, lhs, rhs)
    sim[dest] = sim[lhs] + sim[rhs]


def subtract(sim, dest, lhs, rhs):
    """dest = lhs - rhs, wrapping on overflow."""
    _check_registers(dest, lhs, rhs)
    sim[dest] = sim[lhs] - sim[rhs]


def multiply(sim, dest, lhs, rhs):
    """dest = lhs * rhs, wrapping on overflow."""
    _check_registers(dest, lhs, rhs)
    sim[dest] = sim[lhs] * sim[rhs]


def divide(sim, dest, lhs, rhs):
    """dest = lhs / rhs, rounding towards zero."""
    _check_registers(dest, lhs, rhs)
    divisor = _divisor(sim, rhs)
    sim[dest] = _truncated_quotient(sim[lhs], divisor)


def remainder(sim, dest, lhs, rhs):
    """dest = lhs % rhs, with the sign of lhs."""
    _check_registers(dest, lhs, rhs)
    divisor = _divisor(sim, rhs)
    dividend = sim[lhs]
    sim[dest] = dividend - divisor * _truncated_quotient(dividend, divisor)


def load_integer(sim, dest, value):
    """dest = value."""
    _check_registers(dest)
    sim[dest] = value


def move(sim, dest, src):
    """dest = src."""
    _check_registers(dest, src)
    sim[dest] = sim[src]


def print_register(sim, reg, out=None):
    """Write the value of a register."""
    _check_registers(reg)
    print(f"PRINT => ${reg}: {sim[reg]}", file=sys.stdout if out is None else out)


def exit_program(out=None):
    """Announce the exit and stop the program successfully."""
    print("EXIT", file=sys.stdout if out is None else out)
    raise SystemExit(0)