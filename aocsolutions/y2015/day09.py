"""Day 9: shortest and longest routes visiting every location once."""

from collections import defaultdict


def _graph(text):
    graph = defaultdict(list)
    for line in text.splitlines():
        left, _, distance = line.partition(" = ")
        start, sep, end = left.partition(" to ")
        if not sep:
            raise ValueError(f"invalid route: {line!r}")
        graph[start].append((end, int(distance)))
        graph[end].append((start, int(distance)))
    return graph


def _tour_lengths(graph):
    total = len(graph)

    def walk(location, visited, distance):
        if len(visited) == total:
            yield distance
            return
        for dest, step in graph[location]:
            if dest not in visited:
                yield from walk(dest, visited | {dest}, distance + step)

    for start in graph:
        yield from walk(start, frozenset({start}), 0)


def _solve(text):
    lengths = list(_tour_lengths(_graph(text)))
    if not lengths:
        raise ValueError("no route visits every location")
    return min(lengths), max(lengths)


def part1(text):
    """Return the length of the shortest route through every location."""
    return _solve(text)[0]


def part2(text):
    """Return the length of the longest route through every location."""
    return _solve(text)[1]