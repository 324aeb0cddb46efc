"""Flashing dumbo octopuses."""

from __future__ import annotations

from itertools import count

Grid = list[list[int]]


def parse_grid(text: str) -> Grid:
    """One row of single-digit energy levels per non-blank line."""
    rows = [[int(char) for char in line.strip()] for line in text.splitlines() if line.strip()]
    if not rows:
        raise ValueError("empty octopus grid")
    return rows


def _around(grid: Grid, row: int, col: int):
    for dr in (-1, 0, 1):
        for dc in (-1, 0, 1):
            if dr == dc == 0:
                continue
            r, c = row + dr, col + dc
            if 0 <= r < len(grid) and 0 <= c < len(grid[r]):
                yield r, c


def step(grid: Grid) -> int:
    """Advance the grid by one step in place; return how many octopuses flashed."""
    for row in grid:
        row[:] = [value + 1 for value in row]
    pending = [(r, c) for r, row in enumerate(grid) for c, value in enumerate(row) if value > 9]
    flashed: set[tuple[int, int]] = set()
    while pending:
        cell = pending.pop()
        if cell in flashed:
            continue
        flashed.add(cell)
        for r, c in _around(grid, *cell):
            if (r, c) in flashed:
                continue
            grid[r][c] += 1
            if grid[r][c] > 9:
                pending.append((r, c))
    for r, c in flashed:
        grid[r][c] = 0
    return len(flashed)


def part1(text: str) -> str:
    """Total flashes over 100 steps."""
    grid = parse_grid(text)
    return str(sum(step(grid) for _ in range(100)))


def part2(text: str) -> str:
    """First step on which every octopus flashes at once."""
    grid = parse_grid(text)
    size = sum(len(row) for row in grid)
    for number in count(1):
        if step(grid) == size:
            return str(number)
    raise AssertionError("unreachable")