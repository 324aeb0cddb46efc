"""Folding transparent paper to reveal a code."""

from __future__ import annotations

from aocsolver.y2021.submarine import Position, parse_position

Paper = list[list[bool]]

_FOLD_PREFIX = "fold along "


def parse_manual(text: str) -> tuple[Paper, list[Position]]:
    """Parse dot coordinates and fold instructions.

    A fold along x is ``Position(x=n)``, a fold along y is ``Position(y=n)``.
    """
    points: list[Position] = []
    folds: list[Position] = []
    reading_points = True
    for raw in text.splitlines():
        line = raw.strip()
        if reading_points:
            if not line:
                reading_points = False
                continue
            points.append(parse_position(line))
            continue
        if not line:
            continue
        axis, sep, value = line.replace(_FOLD_PREFIX, "").partition("=")
        if not sep:
            raise ValueError(f"not a fold: {line!r}")
        if axis == "x":
            folds.append(Position(x=int(value)))
        elif axis == "y":
            folds.append(Position(y=int(value)))
        else:
            raise ValueError(f"unknown fold axis: {axis!r}")
    if not points:
        raise ValueError("no dots on the paper")
    width = max(point.x for point in points) + 1
    height = max(point.y for point in points) + 1
    paper = [[False] * width for _ in range(height)]
    for point in points:
        paper[point.y][point.x] = True
    return paper, folds


def fold(paper: Paper, fold_at: Position) -> Paper:
    """Fold the paper up along a row, or left along a column, and return it."""
    if fold_at.x == 0:
        line = fold_at.y
        if not 0 < line < len(paper):
            raise ValueError(f"cannot fold along y={line}")
        last = len(paper) - 1
        return [
            [a or b for a, b in zip(row, paper[last - i])]
            for i, row in enumerate(paper[:line])
        ]
    line = fold_at.x
    if any(not 0 < line < len(row) for row in paper):
        raise ValueError(f"cannot fold along x={line}")
    return [[value or row[-1 - i] for i, value in enumerate(row[:line])] for row in paper]


def render(paper: Paper) -> str:
    """Draw dots as ``#`` and empty places as spaces, one line per row."""
    return "\n".join("".join("#" if dot else " " for dot in row) for row in paper)


def part1(text: str) -> str:
    """Dots visible after the first fold."""
    paper, folds = parse_manual(text)
    if not folds:
        raise ValueError("no folds")
    paper = fold(paper, folds[0])
    return str(sum(dot for row in paper for dot in row))


def part2(text: str) -> str:
    """The paper drawn after every fold."""
    paper, folds = parse_manual(text)
    for instruction in folds:
        paper = fold(paper, instruction)
    return render(paper)