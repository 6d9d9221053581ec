"""Recognising instructions and extracting their operands from source lines."""

import re
from enum import Enum

from regvm.errors import ErrorKind, InterpreterError

_INSTRUCTION_RE = re.compile(r"\s*([A-Z]+)(\s+\S+)*\s*")
_LI_RE = re.compile(r"\s*(LI)\s+\$(\d+)\s+(-?\d+)\s*")
_MOVE_RE = re.compile(r"\s*(MOVE)\s+\$(\d+)\s+\$(\d+)\s*")
_ARITHMETIC_RE = re.compile(r"\s*(ADD|SUB|MUL|DIV|REM)\s+\$(\d+)\s+\$(\d+)\s+\$(\d+)\s*")
_PRINT_RE = re.compile(r"\s*(PRINT)\s+\$(\d+)\s*")
_SKIP_RE = re.compile(r"\s*|//.*|SKIP.*")

_I32_MIN = -(1 << 31)
_I32_MAX = (1 << 31) - 1


class Instruction(Enum):
    """The kinds of line a program may contain."""

    LI = "LI"
    MOVE = "MOVE"
    ADD = "ADD"
    SUB = "SUB"
    MUL = "MUL"
    DIV = "DIV"
    REM = "REM"
    PRINT = "PRINT"
    EXIT = "EXIT"
    SKIP = "SKIP"


_OPCODES = {ins.value: ins for ins in Instruction if ins is not Instruction.SKIP}


def parse_instruction(line):
    """Return the instruction a line holds; blank lines and comments are SKIP."""
    if _SKIP_RE.fullmatch(line):
        return Instruction.SKIP
    match = _INSTRUCTION_RE.fullmatch(line)
    if match is None or match.group(1) not in _OPCODES:
        raise InterpreterError(ErrorKind.INVALID_INSTRUCTION)
    return _OPCODES[match.group(1)]


def parse_arithmetic(line):
    """Return the (dest, lhs, rhs) registers of an arithmetic instruction."""
    match = _ARITHMETIC_RE.fullmatch(line)
    if match is None:
        raise InterpreterError(ErrorKind.INVALID_PARAMETER)
    return int(match.group(2)), int(match.group(3)), int(match.group(4))


def parse_li(line):
    """Return the (dest, immediate) operands of an LI instruction."""
    match = _LI_RE.fullmatch(line)
    if match is None:
        raise InterpreterError(ErrorKind.INVALID_INSTRUCTION)
    value = int(match.group(3))
    if not _I32_MIN <= value <= _I32_MAX:
        raise InterpreterError(ErrorKind.INVALID_PARAMETER)
    return int(match.group(2)), value


def parse_move(line):
    """Return the (dest, src) registers of a MOVE instruction."""
    match = _MOVE_RE.fullmatch(line)
    if match is None:
        raise InterpreterError(ErrorKind.INVALID_INSTRUCTION)
    return int(match.group(2)), int(match.group(3))


def parse_print(line):
    """Return the register of a PRINT instruction."""
    match = _PRINT_RE.fullmatch(line)
    if match is None:
        raise InterpreterError(ErrorKind.INVALID_INSTRUCTION)
    return int(match.group(2))