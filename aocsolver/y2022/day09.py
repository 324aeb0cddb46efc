"""Tracking the tail of a moving rope."""

from __future__ import annotations

from collections.abc import Iterable

Point = tuple[int, int]

_DIRECTIONS = {"R": (1, 0), "L": (-1, 0), "U": (0, 1), "D": (0, -1)}


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def simulate_rope(length: int, steps: Iterable[str]) -> set[Point]:
    """Move a rope of ``length`` knots and return the places its tail visited."""
    if length < 1:
        raise ValueError("a rope needs at least one knot")
    rope: list[Point] = [(0, 0)] * length
    visited = {rope[-1]}

    for step in steps:
        direction, _, amount = step.partition(" ")
        try:
            dx, dy = _DIRECTIONS[direction]
        except KeyError:
            raise ValueError(f"unknown direction: {direction!r}") from None

        for _ in range(int(amount)):
            previous_head = rope[0]
            rope[0] = (rope[0][0] + dx, rope[0][1] + dy)

            for index in range(length - 1):
                head, tail = rope[index], rope[index + 1]
                if abs(tail[0] - head[0]) <= 1 and abs(tail[1] - head[1]) <= 1:
                    break
                previous_tail = tail
                head_dx, head_dy = head[0] - previous_head[0], head[1] - previous_head[1]
                if head[0] == tail[0] or head[1] == tail[1]:
                    rope[index + 1] = (
                        tail[0] + _sign(head[0] - tail[0]),
                        tail[1] + _sign(head[1] - tail[1]),
                    )
                elif head_dx != 0 and head_dy != 0:
                    rope[index + 1] = (tail[0] + head_dx, tail[1] + head_dy)
                else:
                    rope[index + 1] = previous_head
                previous_head = previous_tail

            visited.add(rope[-1])

    return visited


def _steps(text: str) -> list[str]:
    return text.strip().replace("\r", "").split("\n")


def part1(text: str) -> str:
    """Positions visited by the tail of a two-knot rope."""
    return str(len(simulate_rope(2, _steps(text))))


def part2(text: str) -> str:
    """Positions visited by the tail of a ten-knot rope."""
    return str(len(simulate_rope(10, _steps(text))))