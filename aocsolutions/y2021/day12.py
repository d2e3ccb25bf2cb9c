"""Day 12 (2021): count paths through a cave system."""

from collections import defaultdict

_START = "start"
_END = "end"


def _is_small(name):
    return name not in (_START, _END) and not all(char.isupper() for char in name)


def _graph(text):
    graph = defaultdict(list)
    for line in text.splitlines():
        a, sep, b = line.partition("-")
        if not sep:
            raise ValueError(f"invalid edge: {line!r}")
        graph[a].append(b)
        graph[b].append(a)
    return graph


def _count(graph, cave, visited, can_double):
    if _is_small(cave):
        if cave in visited:
            can_double = False
        visited = visited | {cave}
    total = 0
    for nxt in graph.get(cave, ()):
        if nxt == _START:
            continue
        if nxt == _END:
            total += 1
        elif _is_small(nxt) and nxt in visited and not can_double:
            continue
        else:
            total += _count(graph, nxt, visited, can_double)
    return total


def count_paths(text, allow_double_visit):
    """Return how many start-to-end paths exist.

    Small caves are visited at most once, except that with
    ``allow_double_visit`` a single small cave may be visited twice.
    """
    return _count(_graph(text), _START, frozenset(), allow_double_visit)


def part1(text):
    """Return the paths visiting each small cave at most once."""
    return count_paths(text, False)


def part2(text):
    """Return the paths allowing one small cave to be visited twice."""
    return count_paths(text, True)