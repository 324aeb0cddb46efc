"""Overlapping hydrothermal vent lines."""

from __future__ import annotations

from collections.abc import Sequence

from aocsolver.y2021.submarine import Position, parse_position

Segment = tuple[Position, Position]
Diagram = list[list[int]]


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def parse_vent(line: str) -> Segment:
    """Parse ``x1,y1 -> x2,y2``."""
    start, sep, end = line.partition(" -> ")
    if not sep:
        raise ValueError(f"not a vent line: {line!r}")
    return parse_position(start.strip()), parse_position(end.strip())


def positions_and_diagram(text: str) -> tuple[list[Segment], Diagram]:
    """Parse every vent line and make an empty diagram large enough for all."""
    segments = [parse_vent(line) for line in text.splitlines() if line.strip()]
    points = [point for segment in segments for point in segment]
    high_x = max((point.x for point in points), default=0)
    high_y = max((point.y for point in points), default=0)
    diagram = [[0] * (high_x + 1) for _ in range(high_y + 1)]
    return segments, diagram


def _span(a: int, b: int) -> range:
    step = 1 if b >= a else -1
    return range(a, b + step, step)


def calculate_straights(text: str) -> tuple[list[Segment], Diagram]:
    """Draw horizontal and vertical lines; diagonals are left out."""
    segments, diagram = positions_and_diagram(text)
    for start, end in segments:
        if start.x != end.x and start.y != end.y:
            continue
        if start.x != end.x:
            for x in _span(start.x, end.x):
                diagram[start.y][x] += 1
        if start.y != end.y:
            for y in _span(start.y, end.y):
                diagram[y][start.x] += 1
    return segments, diagram


def calculate_diagonals(positions: Sequence[Segment], diagram: Diagram) -> Diagram:
    """Add the diagonal lines to a diagram, in place, and return it."""
    for start, end in positions:
        if start.x == end.x or start.y == end.y:
            continue
        dx, dy = _sign(end.x - start.x), _sign(end.y - start.y)
        for diff in range(abs(end.x - start.x) + 1):
            diagram[start.y + dy * diff][start.x + dx * diff] += 1
    return diagram


def count_overlaps(diagram: Diagram) -> int:
    """Number of points where at least two lines cross."""
    return sum(value >= 2 for row in diagram for value in row)


def part1(text: str) -> str:
    _, diagram = calculate_straights(text)
    return str(count_overlaps(diagram))


def part2(text: str) -> str:
    segments, diagram = calculate_straights(text)
    return str(count_overlaps(calculate_diagonals(segments, diagram)))