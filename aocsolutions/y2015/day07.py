"""Day 7: a circuit of 16-bit wires and logic gates."""

from dataclasses import dataclass
from enum import Enum

_MASK = 0xFFFF


class _Op(Enum):
    VALUE = "value"
    AND = "AND"
    OR = "OR"
    LSHIFT = "LSHIFT"
    RSHIFT = "RSHIFT"
    NOT = "NOT"


@dataclass(frozen=True)
class _Gate:
    op: _Op
    inputs: tuple
    amount: int = 0

    def compute(self, signals):
        values = [signals[i] if isinstance(i, str) else i for i in self.inputs]
        match self.op:
            case _Op.VALUE:
                return values[0]
            case _Op.AND:
                return values[0] & values[1]
            case _Op.OR:
                return values[0] | values[1]
            case _Op.LSHIFT:
                return (values[0] << self.amount) & _MASK
            case _Op.RSHIFT:
                return values[0] >> self.amount
            case _Op.NOT:
                return ~values[0] & _MASK


def _operand(token):
    if token.isdecimal() and int(token) <= _MASK:
        return int(token)
    return token


def _parse_gate(left):
    for op in (_Op.AND, _Op.OR):
        a, sep, b = left.partition(f" {op.value} ")
        if sep:
            return _Gate(op, (_operand(a), _operand(b)))
    for op in (_Op.LSHIFT, _Op.RSHIFT):
        a, sep, b = left.partition(f" {op.value} ")
        if sep:
            return _Gate(op, (a,), int(b))
    if left.startswith("NOT "):
        return _Gate(_Op.NOT, (left[len("NOT ") :],))
    return _Gate(_Op.VALUE, (_operand(left),))


def _parse(text):
    gates = {}
    for line in text.splitlines():
        left, sep, wire = line.partition(" -> ")
        if not sep:
            raise ValueError(f"invalid connection: {line!r}")
        gates[wire] = _parse_gate(left)
    return gates


def _resolve(gates, wire):
    signals = {}
    expanding = set()
    stack = [wire]
    while stack:
        current = stack[-1]
        if current in signals:
            stack.pop()
            continue
        if current not in gates:
            raise KeyError(f"unknown wire: {current!r}")
        gate = gates[current]
        pending = [i for i in gate.inputs if isinstance(i, str) and i not in signals]
        if pending:
            if any(dep in expanding for dep in pending):
                raise ValueError(f"circuit loop through wire {current!r}")
            expanding.add(current)
            stack.extend(pending)
            continue
        signals[current] = gate.compute(signals)
        expanding.discard(current)
        stack.pop()
    return signals[wire]


def evaluate(text, wire):
    """Return the signal on ``wire`` for the circuit described by ``text``."""
    return _resolve(_parse(text), wire)


def part1(text):
    """Return the signal on wire ``a``."""
    return evaluate(text, "a")


def part2(text):
    """Feed the signal of ``a`` into ``b`` and return the new signal on ``a``."""
    gates = _parse(text)
    first = _resolve(gates, "a")
    gates["b"] = _Gate(_Op.VALUE, (first,))
    return _resolve(gates, "a")