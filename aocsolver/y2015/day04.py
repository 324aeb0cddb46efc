"""Searching for MD5 hashes that start with zeroes."""

from __future__ import annotations

import hashlib
from itertools import count


def find_md5_iteration_with_prefix(start: int, secret: str, prefix: str) -> int:
    """Smallest number from ``start`` whose hash of secret+number starts with prefix."""
    base = hashlib.md5(secret.encode())
    for number in count(start):
        digest = base.copy()
        digest.update(str(number).encode())
        if digest.hexdigest().startswith(prefix):
            return number
    raise AssertionError("unreachable")


def part1(text: str) -> str:
    return str(find_md5_iteration_with_prefix(1, text, "00000"))


def part2(text: str) -> str:
    return str(find_md5_iteration_with_prefix(254575, text, "000000"))