"""Aligning crab submarines with the least fuel."""

from __future__ import annotations

from collections.abc import Callable


def _crabs(text: str) -> list[int]:
    lines = text.splitlines()
    if not lines or not lines[0].strip():
        raise ValueError("no crab positions")
    return [int(value) for value in lines[0].split(",")]


def _cheapest(text: str, cost: Callable[[int], int]) -> str:
    crabs = _crabs(text)
    return str(
        min(
            sum(cost(abs(crab - target)) for crab in crabs)
            for target in range(min(crabs), max(crabs) + 1)
        )
    )


def part1(text: str) -> str:
    """Each step costs one unit of fuel."""
    return _cheapest(text, lambda distance: distance)


def part2(text: str) -> str:
    """Each further step costs one more unit than the last."""
    return _cheapest(text, lambda distance: distance * (distance + 1) // 2)