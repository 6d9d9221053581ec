"""Machine state: integer registers and the program counter."""

REGISTER_COUNT = 32

_MODULUS = 1 << 32
_HALF = 1 << 31


def _to_i32(value):
    return (value + _HALF) % _MODULUS - _HALF


class Simulator:
    """A machine with 32 signed 32-bit registers; register 0 always reads zero."""

    def __init__(self):
        self._registers = [0] * REGISTER_COUNT
        self.pc = 0

    @staticmethod
    def _check(reg):
        if not 0 <= reg < REGISTER_COUNT:
            raise IndexError(f"register {reg} is out of range")

    def __getitem__(self, reg):
        self._check(reg)
        return self._registers[reg]

    def __setitem__(self, reg, value):
        self._check(reg)
        if reg != 0:
            self._registers[reg] = _to_i32(value)

    @property
    def registers(self):
        """A snapshot of all register values."""
        return tuple(self._registers)

    def __repr__(self):
        return f"Simulator(pc={self.pc}, registers={self._registers!r})"