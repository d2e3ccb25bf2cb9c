"""Day 12: sum every number in a JSON document."""

import json


def sum_numbers(value, ignore_red):
    """Return the sum of all integers in a decoded JSON value.

    With ``ignore_red``, objects holding the string value "red" count as zero.
    """
    if value is None or isinstance(value, (bool, str)):
        return 0
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        raise ValueError(f"not an integer: {value!r}")
    if isinstance(value, list):
        return sum(sum_numbers(item, ignore_red) for item in value)
    if isinstance(value, dict):
        if ignore_red and any(item == "red" for item in value.values()):
            return 0
        return sum(sum_numbers(item, ignore_red) for item in value.values())
    raise TypeError(f"unsupported value: {value!r}")


def part1(text):
    """Return the sum of all numbers in the document."""
    return sum_numbers(json.loads(text), False)


def part2(text):
    """Return the sum, skipping objects that contain "red"."""
    return sum_numbers(json.loads(text), True)