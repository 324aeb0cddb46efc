"""Floors reached by following parentheses."""

from __future__ import annotations

_STEPS = {"(": 1, ")": -1}


def part1(text: str) -> str:
    """Final floor."""
    return str(sum(_STEPS.get(char, 0) for char in text))


def part2(text: str) -> str:
    """Position of the first step into the basement, or the final floor."""
    floor = 0
    for position, char in enumerate(text, 1):
        floor += _STEPS.get(char, 0)
        if floor == -1:
            return str(position)
    return str(floor)