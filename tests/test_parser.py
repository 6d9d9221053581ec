import pytest

from regvm.errors import ErrorKind, InterpreterError
from regvm.parser import (
    Instruction,
    parse_arithmetic,
    parse_instruction,
    parse_li,
    parse_move,
    parse_print,
)


@pytest.mark.parametrize(
    "line, expected",
    [
        ("MUL $5 $10 $25", Instruction.MUL),
        ("LI $5 -10", Instruction.LI),
        ("EXIT", Instruction.EXIT),
        ("SUB $39 $102 $9", Instruction.SUB),
        ("  ADD $1 $2 $3  ", Instruction.ADD),
        ("MOVE $1 $2", Instruction.MOVE),
        ("DIV $1 $2 $3", Instruction.DIV),
        ("REM $1 $2 $3", Instruction.REM),
        ("PRINT $4", Instruction.PRINT),
    ],
)
def test_parse_instruction(line, expected):
    assert parse_instruction(line) is expected


@pytest.mark.parametrize("line", ["", "   ", "// a comment", "SKIP", "SKIP whatever follows"])
def test_skip_lines(line):
    assert parse_instruction(line) is Instruction.SKIP


@pytest.mark.parametrize("line", ["FOO $1", "li $1 2", "  // indented comment", "123"])
def test_invalid_instruction(line):
    with pytest.raises(InterpreterError) as info:
        parse_instruction(line)
    assert info.value.kind is ErrorKind.INVALID_INSTRUCTION


def test_parse_arithmetic():
    assert parse_arithmetic("MUL $5 $10 $25") == (5, 10, 25)
    assert parse_arithmetic("SUB $39 $102 $9") == (39, 102, 9)


def test_parse_arithmetic_rejects_li():
    with pytest.raises(InterpreterError) as info:
        parse_arithmetic("LI $5 -10")
    assert info.value.kind is ErrorKind.INVALID_PARAMETER


def test_parse_arithmetic_rejects_missing_operand():
    with pytest.raises(InterpreterError) as info:
        parse_arithmetic("ADD $1 $2")
    assert info.value.kind is ErrorKind.INVALID_PARAMETER


def test_parse_li():
    assert parse_li("LI $5 -10") == (5, -10)
    assert parse_li("  LI   $31 2147483647 ") == (31, 2147483647)


def test_parse_li_rejects_bad_operands():
    with pytest.raises(InterpreterError) as info:
        parse_li("LI $5 $6")
    assert info.value.kind is ErrorKind.INVALID_INSTRUCTION


def test_parse_li_rejects_value_beyond_32_bits():
    with pytest.raises(InterpreterError) as info:
        parse_li("LI $1 2147483648")
    assert info.value.kind is ErrorKind.INVALID_PARAMETER


def test_parse_move():
    assert parse_move("MOVE $3 $7") == (3, 7)


def test_parse_move_rejects_immediate():
    with pytest.raises(InterpreterError) as info:
        parse_move("MOVE $3 7")
    assert info.value.kind is ErrorKind.INVALID_INSTRUCTION


def test_parse_print():
    assert parse_print("PRINT $12") == 12


def test_parse_print_rejects_extra_operand():
    with pytest.raises(InterpreterError) as info:
        parse_print("PRINT $1 $2")
    assert info.value.kind is ErrorKind.INVALID_INSTRUCTION