"""A minimal Intcode machine supporting add, multiply and halt."""

import operator

_OPERATIONS = {1: operator.add, 2: operator.mul}
_HALT = 99


class IntcodeError(Exception):
    """Raised when a program reads out of bounds or uses an unknown opcode."""


class Intcode:
    """An Intcode machine holding its memory and program counter."""

    def __init__(self, program):
        self.memory = [int(value) for value in program.strip().split(",")]
        if any(value < 0 for value in self.memory):
            raise ValueError("memory values must be non-negative")
        self.pc = 0

    def interpret(self):
        """Run from address 0 until the program halts; return the machine."""
        self.pc = 0
        while self.step():
            pass
        return self

    def step(self):
        """Execute one instruction; return whether execution continues."""
        opcode = self._read(self.pc)
        if opcode == _HALT:
            return False
        operation = _OPERATIONS.get(opcode)
        if operation is None:
            raise IntcodeError(f"unknown opcode {opcode} at address {self.pc}")
        a = self._read(self._read(self.pc + 1))
        b = self._read(self._read(self.pc + 2))
        target = self._read(self.pc + 3)
        self._check(target)
        self.memory[target] = operation(a, b)
        self.pc += 4
        return self.pc < len(self.memory)

    def _check(self, address):
        if not 0 <= address < len(self.memory):
            raise IntcodeError(f"address {address} out of bounds")

    def _read(self, address):
        self._check(address)
        return self.memory[address]