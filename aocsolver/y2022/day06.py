"""Finding start markers in a datastream."""

from __future__ import annotations


def find_marker(text: str, count: int) -> int:
    """Characters read once the last ``count`` characters are all different."""
    for index in range(count, len(text) + 1):
        if len(set(text[index - count : index])) == count:
            return index
    raise ValueError(f"no marker of {count} distinct characters")


def part1(text: str) -> str:
    return str(find_marker(text, 4))


def part2(text: str) -> str:
    return str(find_marker(text, 14))