"""Low points and basins on a cave height map."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from math import prod

Grid = list[list[int]]


def parse_heightmap(text: str) -> Grid:
    """One row of single-digit heights per non-blank line."""
    rows = [[int(char) for char in line.strip()] for line in text.splitlines() if line.strip()]
    if not rows:
        raise ValueError("empty height map")
    return rows


def _neighbours(grid: Sequence[Sequence[int]], row: int, col: int) -> Iterator[tuple[int, int]]:
    for dr, dc in ((-1, 0), (0, -1), (1, 0), (0, 1)):
        r, c = row + dr, col + dc
        if 0 <= r < len(grid) and 0 <= c < len(grid[r]):
            yield r, c


def _low_points(grid: Grid) -> list[tuple[int, int]]:
    return [
        (r, c)
        for r, row in enumerate(grid)
        for c, value in enumerate(row)
        if all(value < grid[nr][nc] for nr, nc in _neighbours(grid, r, c))
    ]


def _basin_size(grid: Grid, start: tuple[int, int]) -> int:
    basin = {start}
    pending = [start]
    while pending:
        r, c = pending.pop()
        current = grid[r][c]
        for nr, nc in _neighbours(grid, r, c):
            value = grid[nr][nc]
            if (nr, nc) not in basin and value != 9 and value > current:
                basin.add((nr, nc))
                pending.append((nr, nc))
    return len(basin)


def part1(text: str) -> str:
    """Sum of the risk levels of all low points."""
    grid = parse_heightmap(text)
    return str(sum(grid[r][c] + 1 for r, c in _low_points(grid)))


def part2(text: str) -> str:
    """Product of the sizes of the three largest basins."""
    grid = parse_heightmap(text)
    sizes = sorted(_basin_size(grid, point) for point in _low_points(grid))
    if len(sizes) < 3:
        raise ValueError("fewer than three basins")
    return str(prod(sizes[-3:]))