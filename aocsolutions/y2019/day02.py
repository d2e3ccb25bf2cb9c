"""Day 2 (2019): restore the gravity assist program."""

from .intcode import Intcode, IntcodeError

_TARGET = 19690720


def run_with(program, noun, verb):
    """Run ``program`` with addresses 1 and 2 set; return address 0 afterwards."""
    machine = Intcode(program)
    if len(machine.memory) < 3:
        raise IntcodeError("program too short for noun and verb")
    machine.memory[1] = noun
    machine.memory[2] = verb
    return machine.interpret().memory[0]


def part1(text):
    """Return the output for noun 12 and verb 2."""
    return run_with(text, 12, 2)


def part2(text):
    """Return 100 * noun + verb for the inputs that produce 19690720."""
    for noun in range(100):
        for verb in range(100):
            try:
                result = run_with(text, noun, verb)
            except IntcodeError:
                continue
            if result == _TARGET:
                return 100 * noun + verb
    raise ValueError("no noun and verb produce the target output")