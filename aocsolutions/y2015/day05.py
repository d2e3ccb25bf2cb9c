"""Day 5: sort strings into naughty and nice."""

import re

_FORBIDDEN = ("ab", "cd", "pq", "xy")


def is_nice(word):
    """Apply the first set of rules to a word."""
    vowels = sum(1 for char in word if char in "aeiou")
    doubled = any(a == b for a, b in zip(word, word[1:]))
    forbidden = any(pair in word for pair in _FORBIDDEN)
    return vowels >= 3 and doubled and not forbidden


def _pair_twice(word):
    return any(word.count(word[i : i + 2]) >= 2 for i in range(len(word) - 1))


def is_nice_v2(word):
    """Apply the second set of rules to a word."""
    gap_repeat = any(a == b for a, b in zip(word, word[2:]))
    return _pair_twice(word) and gap_repeat


def part1(text):
    """Count the words that are nice under the first rules."""
    return sum(1 for word in text.splitlines() if is_nice(word))


def part2(text):
    """Count the words that are nice under the second rules."""
    return sum(1 for word in text.splitlines() if is_nice_v2(word))


__all__ = ["is_nice", "is_nice_v2", "part1", "part2"]

_ = re  # kept for callers that patch patterns; no runtime use