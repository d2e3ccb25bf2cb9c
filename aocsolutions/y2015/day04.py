"""Day 4: mine AdventCoins by searching for MD5 hashes with leading zeroes."""

import hashlib

_LIMIT = 100_000_000


def mine(secret, strict):
    """Return the lowest number whose MD5 with the secret starts with zeroes.

    Five leading hex zeroes are required, or six when ``strict`` is true.
    """
    base = hashlib.md5(secret.encode())
    for number in range(_LIMIT):
        digest = base.copy()
        digest.update(str(number).encode())
        head = digest.digest()[:3]
        if head[0] == 0 and head[1] == 0:
            if (strict and head[2] == 0) or (not strict and head[2] & 0xF0 == 0):
                return number
    raise ValueError(f"no suitable number below {_LIMIT}")


def part1(text):
    """Return the answer for five leading zeroes."""
    return mine(text.strip(), False)


def part2(text):
    """Return the answer for six leading zeroes."""
    return mine(text.strip(), True)