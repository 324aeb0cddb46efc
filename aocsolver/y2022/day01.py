"""Calories carried by elves."""

from __future__ import annotations


def _totals(text: str) -> list[int]:
    totals: list[int] = []
    current = 0
    in_group = False
    for line in text.split("\n"):
        line = line.strip()
        if not line:
            if in_group:
                totals.append(current)
            current, in_group = 0, False
            continue
        current += int(line)
        in_group = True
    if in_group:
        totals.append(current)
    return totals


def part1(text: str) -> str:
    """Most calories carried by one elf."""
    totals = _totals(text)
    return str(max(totals)) if totals else ""


def part2(text: str) -> str:
    """Calories carried by the top three elves."""
    totals = sorted(_totals(text))
    if len(totals) < 3:
        raise ValueError("fewer than three elves")
    return str(sum(totals[-3:]))