"""Tree visibility and scenic scores in a grid."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from math import prod


@dataclass
class Trees:
    """A grid of tree heights indexed ``trees[y][x]``."""

    trees: list[list[int]]
    up_x: int
    up_y: int

    def _lines_of_sight(self, x: int, y: int) -> list[Sequence[int]]:
        column = [row[x] for row in self.trees]
        row = self.trees[y]
        return [
            column[y - 1 :: -1],
            column[y + 1 :],
            row[x - 1 :: -1],
            row[x + 1 :],
        ]

    def visible(self, tree: int, x: int, y: int) -> bool:
        """Whether a tree of this height at (x, y) can be seen from outside."""
        if x in (0, self.up_x) or y in (0, self.up_y):
            return True
        return any(
            all(other < tree for other in line) for line in self._lines_of_sight(x, y)
        )

    def scenic(self, tree: int, x: int, y: int) -> int:
        """Product of viewing distances in the four directions; edges score zero."""
        if x in (0, self.up_x) or y in (0, self.up_y):
            return 0

        def distance(line: Sequence[int]) -> int:
            seen = 0
            for other in line:
                seen += 1
                if other >= tree:
                    break
            return seen

        return prod(distance(line) for line in self._lines_of_sight(x, y))


def parse_trees(lines: Iterable[str]) -> Trees:
    """Parse rows of single-digit heights."""
    grid = [[int(char) for char in line] for line in lines]
    if not grid or not grid[0]:
        raise ValueError("empty tree grid")
    return Trees(grid, len(grid[0]) - 1, len(grid) - 1)


def _parse(text: str) -> Trees:
    return parse_trees(text.strip().replace("\r", "").split("\n"))


def _cells(trees: Trees):
    for y, row in enumerate(trees.trees):
        for x, tree in enumerate(row):
            yield tree, x, y


def part1(text: str) -> str:
    """Number of trees visible from outside the grid."""
    trees = _parse(text)
    return str(sum(trees.visible(*cell) for cell in _cells(trees)))


def part2(text: str) -> str:
    """Highest scenic score of any tree."""
    trees = _parse(text)
    return str(max(trees.scenic(*cell) for cell in _cells(trees)))