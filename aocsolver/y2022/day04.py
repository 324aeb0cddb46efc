"""Overlapping section assignments of elf pairs."""

from __future__ import annotations

Range = tuple[int, int]


def _parse_range(text: str) -> Range:
    start, sep, end = text.partition("-")
    if not sep:
        raise ValueError(f"not a section range: {text!r}")
    return int(start.strip()), int(end.strip())


def _pairs(text: str) -> list[tuple[Range, Range]]:
    pairs = []
    for line in text.strip().split("\n"):
        first, sep, second = line.partition(",")
        if not sep:
            raise ValueError(f"not an assignment pair: {line!r}")
        pairs.append((_parse_range(first), _parse_range(second)))
    return pairs


def _contains(a: Range, b: Range) -> bool:
    return a[0] <= b[0] and b[1] <= a[1]


def part1(text: str) -> str:
    """Pairs where one range fully contains the other."""
    return str(sum(_contains(a, b) or _contains(b, a) for a, b in _pairs(text)))


def part2(text: str) -> str:
    """Pairs whose ranges overlap at all."""
    return str(sum(a[0] <= b[1] and b[0] <= a[1] for a, b in _pairs(text)))