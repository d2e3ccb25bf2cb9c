"""Day 10 (2021): score corrupted and incomplete bracket lines."""

_PAIRS = {"(": ")", "[": "]", "{": "}", "<": ">"}
_ERROR_SCORES = {")": 3, "]": 57, "}": 1197, ">": 25137}
_COMPLETION_SCORES = {"(": 1, "[": 2, "{": 3, "<": 4}


def _pop(stack):
    if not stack:
        raise ValueError("closing bracket without an opening one")
    return stack.pop()


def _error_score(line):
    stack = []
    score = 0
    for char in line:
        if char in _PAIRS:
            stack.append(char)
        elif char in _ERROR_SCORES:
            if _PAIRS[_pop(stack)] != char:
                score += _ERROR_SCORES[char]
        else:
            raise ValueError(f"Unexpected character: {char!r}")
    return score


def _open_brackets(line):
    """Return the unclosed brackets of a line, or None if it is corrupted."""
    stack = []
    for char in line:
        if char in _PAIRS:
            stack.append(char)
        elif char in _ERROR_SCORES:
            if _PAIRS[_pop(stack)] != char:
                return None
        else:
            raise ValueError(f"Unexpected character: {char!r}")
    return stack


def part1(text):
    """Return the total syntax error score of all lines."""
    return sum(_error_score(line) for line in text.splitlines())


def part2(text):
    """Return the middle completion score of the incomplete lines."""
    scores = []
    for line in text.splitlines():
        stack = _open_brackets(line)
        if stack is None:
            continue
        score = 0
        for char in reversed(stack):
            score = score * 5 + _COMPLETION_SCORES[char]
        scores.append(score)
    if not scores:
        raise ValueError("no incomplete lines")
    scores.sort()
    return scores[len(scores) // 2]