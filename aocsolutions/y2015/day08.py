"""Day 8: compare string literals with their in-memory and escaped sizes."""

import re

_ESCAPE = re.compile(r'\\"|\\\\|\\x[0-9a-fA-F]{2}')


def _unquote(line):
    if len(line) < 2 or not (line.startswith('"') and line.endswith('"')):
        raise ValueError(f"not a quoted string: {line!r}")
    return line[1:-1]


def part1(text):
    """Return code characters minus in-memory characters over all lines."""
    code_size = mem_size = 0
    for line in text.splitlines():
        code_size += len(line)
        mem_size += len(_ESCAPE.sub("a", _unquote(line)))
    return code_size - mem_size


def part2(text):
    """Return encoded characters minus code characters over all lines."""
    return sum(line.count('"') + line.count("\\") + 2 for line in text.splitlines())