"""Loading programs from files and running them line by line."""

import sys

from regvm import operation
from regvm.errors import InterpreterError
from regvm.parser import (
    Instruction,
    parse_arithmetic,
    parse_instruction,
    parse_li,
    parse_move,
    parse_print,
)
from regvm.simulator import Simulator

_ARITHMETIC = {
    Instruction.ADD: operation.add,
    Instruction.SUB: operation.subtract,
    Instruction.MUL: operation.multiply,
    Instruction.DIV: operation.divide,
    Instruction.REM: operation.remainder,
}


def read_program(path):
    """Return the lines of the program file at path."""
    with open(path, encoding="utf-8", newline="") as handle:
        text = handle.read()
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def execute(line, instruction, sim, out=None):
    """Carry out one already recognised instruction."""
    out = sys.stdout if out is None else out
    if instruction in _ARITHMETIC:
        _ARITHMETIC[instruction](sim, *parse_arithmetic(line))
    elif instruction is Instruction.LI:
        operation.load_integer(sim, *parse_li(line))
    elif instruction is Instruction.MOVE:
        operation.move(sim, *parse_move(line))
    elif instruction is Instruction.PRINT:
        operation.print_register(sim, parse_print(line), out)
    elif instruction is Instruction.EXIT:
        operation.exit_program(out)


def run(lines, sim=None, debug=False, out=None):
    """Run a program until its last line; return the final machine state."""
    sim = Simulator() if sim is None else sim
    out = sys.stdout if out is None else out
    while sim.pc < len(lines):
        line = lines[sim.pc]
        if debug:
            print(f"STATUS => PC: {sim.pc}, TO PARSE: {line}", file=out)
        execute(line, parse_instruction(line), sim, out)
        sim.pc += 1
    print("END OF PROGRAM", file=out)
    return sim


def main(argv=None):
    """Run the program file named on the command line."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        print("the number of parameters is not correct!")
        if not args:
            return 1
    try:
        run(read_program(args[0]))
    except InterpreterError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())