"""Day 3 (2021): decode the submarine's binary diagnostic report."""


def _counts(lines, index):
    zeros = sum(1 for line in lines if line[index] == "0")
    return zeros, len(lines) - zeros


def part1(text):
    """Return the gamma rate times the epsilon rate."""
    lines = text.splitlines()
    width = len(lines[0])
    gamma = epsilon = 0
    for column in zip(*lines):
        ones = sum(int(char) != 0 for char in column)
        zeros = len(column) - ones
        gamma <<= 1
        epsilon <<= 1
        if ones > zeros:
            gamma |= 1
        else:
            epsilon |= 1
    if any(len(line) != width for line in lines):
        raise ValueError("report lines differ in length")
    return gamma * epsilon


def _rating(lines, keep):
    candidates = list(lines)
    for index in range(len(candidates[0])):
        if len(candidates) == 1:
            break
        wanted = keep(*_counts(candidates, index))
        candidates = [line for line in candidates if line[index] == wanted]
    return int(candidates[0], 2)


def part2(text):
    """Return the oxygen generator rating times the CO2 scrubber rating."""
    lines = text.splitlines()
    oxygen = _rating(lines, lambda zeros, ones: "0" if zeros > ones else "1")
    co2 = _rating(lines, lambda zeros, ones: "1" if zeros > ones else "0")
    return oxygen * co2