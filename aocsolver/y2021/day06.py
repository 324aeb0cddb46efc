"""Growth of a lanternfish population."""

from __future__ import annotations

from functools import lru_cache

_RESET = 6
_NEWBORN = 8


@lru_cache(maxsize=None)
def descendants(cycle: int, days: int) -> int:
    """Fish alive after ``days`` starting from one fish with the given timer."""
    return 1 + sum(
        descendants(_NEWBORN, days - birth)
        for birth in range(cycle + 1, days + 1, _RESET + 1)
    )


def simulate(text: str, days: int) -> int:
    """Population after ``days`` from the comma-separated timers on the first line."""
    lines = text.splitlines()
    if not lines or not lines[0].strip():
        raise ValueError("no lanternfish timers")
    timers = [int(value) for value in lines[0].split(",")]
    return sum(descendants(timer, days) for timer in timers)


def part1(text: str) -> str:
    return str(simulate(text, 80))


def part2(text: str) -> str:
    return str(simulate(text, 256))