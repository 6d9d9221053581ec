"""Errors raised while parsing and executing register-machine programs."""

from enum import Enum


class ErrorKind(Enum):
    """Every way parsing or executing a line can fail, with its message."""

    INVALID_PARAMETER = "the parameters are not valid and can't be parsed"
    INVALID_INSTRUCTION = "the instruction is not implemented yet"
    OUT_OF_RANGE = "the reg is out of the ranges"
    DIVISION_BY_ZERO = "division by zero"


class InterpreterError(Exception):
    """Raised when a program line cannot be parsed or executed."""

    def __init__(self, kind):
        super().__init__(kind.value)
        self.kind = kind

    def __str__(self):
        return self.kind.value