"""Counting paths through a cave system."""

from __future__ import annotations

from aocsolver.y2021.caves import parse_caves


def part1(text: str) -> str:
    """Paths that visit each small cave at most once."""
    return str(parse_caves(text).navigate())


def part2(text: str) -> str:
    """Paths that may visit a single small cave twice."""
    return str(parse_caves(text).navigate(revisit_small=True))