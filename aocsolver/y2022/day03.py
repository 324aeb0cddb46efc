"""Rucksack reorganisation by item priority."""

from __future__ import annotations


def priority(letter: str) -> int:
    """Priority of an item: a-z are 1-26, A-Z are 27-52."""
    value = ord(letter[0])
    if value >= ord("a"):
        return value - 96
    return value - 38


def _rucksacks(text: str) -> list[str]:
    return [line.strip() for line in text.split("\n")]


def part1(text: str) -> str:
    """Sum of priorities of the item found in both compartments of each rucksack."""
    total = 0
    for rucksack in _rucksacks(text):
        half = len(rucksack) // 2
        first = set(rucksack[:half])
        shared = next((item for item in rucksack[half:] if item in first), None)
        if shared is not None:
            total += priority(shared)
    return str(total)


def part2(text: str) -> str:
    """Sum of priorities of the badge shared by each group of three elves."""
    rucksacks = [line for line in _rucksacks(text) if line]
    if len(rucksacks) % 3:
        raise ValueError("rucksacks do not form complete groups of three")
    total = 0
    for start in range(0, len(rucksacks), 3):
        first, second, third = rucksacks[start : start + 3]
        common = set(first) & set(second)
        badge = next((item for item in third if item in common), None)
        if badge is not None:
            total += priority(badge)
    return str(total)