# regvm

`regvm` runs programs written in a tiny register-machine assembly language.
The machine has 32 signed 32-bit integer registers, `$0` to `$31`, all
starting at zero. Register `$0` always reads as zero, and anything written to
it is discarded. Arithmetic wraps around on overflow, as 32-bit machine
integers do.

## Installation

```
pip install .
```

## Running a program

```
regvm program.asm
```

The interpreter runs the lines of the file from top to bottom. When the last
line has run, it prints `END OF PROGRAM` and exits with status 0. An `EXIT`
line prints `EXIT` and stops the program at once, also with status 0.

If a line cannot be parsed or executed, the interpreter prints
`Error: <message>` to standard error and exits with status 1. Called without a
file name, it prints a usage complaint and exits with status 1; given more than
one argument, it prints the same complaint and runs the first file.

## Instructions

| Instruction            | Effect                                          |
|------------------------|-------------------------------------------------|
| `LI $d imm`            | load the integer `imm` into `$d`                |
| `MOVE $d $s`           | copy `$s` into `$d`                             |
| `ADD $d $a $b`         | `$d = $a + $b`                                  |
| `SUB $d $a $b`         | `$d = $a - $b`                                  |
| `MUL $d $a $b`         | `$d = $a * $b`                                  |
| `DIV $d $a $b`         | `$d = $a / $b`, truncated toward zero           |
| `REM $d $a $b`         | `$d = $a % $b`, with the sign of `$a`           |
| `PRINT $r`             | print `PRINT => $r: <value>`                    |
| `EXIT`                 | print `EXIT` and stop                           |

Opcodes are upper case. Operands are separated by whitespace, and leading and
trailing whitespace on a line is allowed. `imm` is a decimal integer with an
optional leading `-` and must fit in 32 signed bits.

The interpreter skips lines that are empty or hold only whitespace, lines
starting with `//`, and lines starting with `SKIP`.

## Example

```
// compute (7 * 6) - 2
LI $1 7
LI $2 6
MUL $3 $1 $2
LI $4 2
SUB $5 $3 $4
PRINT $5
```

Output:

```
PRINT => $5: 40
END OF PROGRAM
```

## Errors

Every failure raises `regvm.errors.InterpreterError`. Its `kind` attribute is
a member of `regvm.errors.ErrorKind`:

- `INVALID_INSTRUCTION`: the line holds an unknown opcode, or a malformed
  `LI`, `MOVE` or `PRINT`;
- `INVALID_PARAMETER`: a malformed arithmetic instruction, or an `LI`
  immediate outside the 32-bit signed range;
- `OUT_OF_RANGE`: a register number is 32 or higher;
- `DIVISION_BY_ZERO`: `DIV` or `REM` with a divisor register holding zero
  (which includes `$0`).

## Using it as a library

```python
import io
from regvm.interpreter import run
from regvm.simulator import Simulator

out = io.StringIO()
sim = Simulator()
run(["LI $1 5", "ADD $2 $1 $1", "PRINT $2"], sim, False, out)
print(out.getvalue())
print(sim[2])  # 10
```

- `regvm.interpreter.run(lines, sim=None, debug=False, out=None)` runs a list
  of lines and returns the final `Simulator`. With `debug=True` it writes a
  `STATUS => PC: <pc>, TO PARSE: <line>` line before each step. Output goes to
  `out`, or standard output when it is `None`.
- `regvm.interpreter.read_program(path)` returns the lines of a program file.
- `regvm.interpreter.execute(line, instruction, sim, out=None)` carries out a
  single line whose `regvm.parser.Instruction` is already known.
- `regvm.simulator.Simulator` holds the registers, read and written by index
  (`sim[3]`, `sim[3] = 7`; values are wrapped to 32 bits), the program
  counter `pc`, and a `registers` tuple snapshot. Indexing outside `0..31`
  raises `IndexError`.
- `regvm.parser` offers `parse_instruction`, `parse_arithmetic`, `parse_li`,
  `parse_move` and `parse_print` for working with single lines.
- `regvm.operation` holds the operations themselves: `add`, `subtract`,
  `multiply`, `divide`, `remainder`, `load_integer`, `move`,
  `print_register` and `exit_program`.

An `EXIT` line raises `SystemExit(0)` after printing `EXIT`, also when the
program is run through `run`.