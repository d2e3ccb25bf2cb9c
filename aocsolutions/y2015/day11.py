"""Day 11: find the next password that meets the security rules."""

_CONFUSING = frozenset("iol")


def _has_straight(chars):
    return any(
        ord(b) - ord(a) == 1 and ord(c) - ord(b) == 1
        for a, b, c in zip(chars, chars[1:], chars[2:])
    )


def _has_two_pairs(chars):
    return len({a for a, b in zip(chars, chars[1:]) if a == b}) >= 2


def _is_valid(chars):
    return (
        _has_straight(chars)
        and _CONFUSING.isdisjoint(chars)
        and _has_two_pairs(chars)
    )


def _increment(chars):
    """Increment every position but the first; return True on a full wrap."""
    for index in range(len(chars) - 1, 0, -1):
        if chars[index] == "z":
            chars[index] = "a"
        else:
            chars[index] = chr(ord(chars[index]) + 1)
            return False
    return True


def _skip_confusing(chars):
    """Jump past candidates that hold a confusing letter after the first."""
    for index, char in enumerate(chars[1:], start=1):
        if char in _CONFUSING:
            chars[index] = chr(ord(char) + 1)
            chars[index + 1 :] = ["a"] * (len(chars) - index - 1)
            return


def next_password(password):
    """Return the next valid password after ``password``.

    The first letter never changes. Raises ValueError when no valid
    password can be reached.
    """
    if len(password) < 2:
        raise ValueError(f"password too short: {password!r}")
    chars = list(password)
    wraps = 0
    while True:
        if _increment(chars):
            wraps += 1
            if wraps > 1:
                raise ValueError(f"no valid password follows {password!r}")
        _skip_confusing(chars)
        if _is_valid(chars):
            return "".join(chars)


def part1(text):
    """Return the next password."""
    return next_password(text.strip())


def part2(text):
    """Return the password after the next one."""
    return next_password(next_password(text.strip()))