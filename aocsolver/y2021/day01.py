"""Counting depth increases in sonar sweeps."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import pairwise


def parse_depths(text: str) -> list[int]:
    """One depth per non-blank line."""
    return [int(line) for line in text.splitlines() if line.strip()]


def sliding_windows(depths: Sequence[int]) -> list[int]:
    """Sums of every three consecutive depths."""
    return [sum(depths[i : i + 3]) for i in range(len(depths) - 2)]


def _increases(values: Sequence[int]) -> int:
    return sum(later > earlier for earlier, later in pairwise(values))


def part1(text: str) -> str:
    return str(_increases(parse_depths(text)))


def part2(text: str) -> str:
    return str(_increases(sliding_windows(parse_depths(text))))