"""Wrapping paper and ribbon for presents."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Dimension:
    length: int = 0
    width: int = 0
    height: int = 0


def parse_dimensions(text: str) -> Dimension:
    """Parse ``LxWxH``; a blank line gives a zero-sized box."""
    text = text.strip()
    if not text:
        return Dimension()
    length, width, height = (int(part) for part in text.split("x"))
    return Dimension(length, width, height)


def part1(text: str) -> str:
    """Total paper: surface area plus the smallest side."""
    total = 0
    for line in text.split("\n"):
        box = parse_dimensions(line)
        sides = (
            box.length * box.width,
            box.width * box.height,
            box.height * box.length,
        )
        total += 2 * sum(sides) + min(sides)
    return str(total)


def part2(text: str) -> str:
    """Total ribbon: smallest perimeter plus volume for the bow."""
    total = 0
    for line in text.split("\n"):
        box = parse_dimensions(line)
        smallest, middle, _ = sorted((box.length, box.width, box.height))
        total += box.length * box.width * box.height
        total += 2 * smallest + 2 * middle
    return str(total)