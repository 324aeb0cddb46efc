"""Piloting the submarine."""

from __future__ import annotations

from aocsolver.y2021.submarine import Command, Submarine, parse_command


def parse_commands(text: str) -> list[Command]:
    """One command per non-blank line."""
    return [parse_command(line) for line in text.split("\n") if line.strip()]


def _run(text: str) -> Submarine:
    sub = Submarine()
    sub.execute(parse_commands(text))
    return sub


def part1(text: str) -> str:
    """Horizontal position times aim."""
    sub = _run(text)
    return str(sub.position.x * sub.aim)


def part2(text: str) -> str:
    """Horizontal position times depth."""
    sub = _run(text)
    return str(sub.position.x * sub.position.y)