"""Houses visited while delivering presents on a grid."""

from __future__ import annotations

_MOVES = {">": (1, 0), "<": (-1, 0), "^": (0, 1), "v": (0, -1)}


def _step(position: tuple[int, int], move: str) -> tuple[int, int]:
    dx, dy = _MOVES.get(move, (0, 0))
    return position[0] + dx, position[1] + dy


def part1(text: str) -> str:
    """Houses visited by one deliverer."""
    position = (0, 0)
    houses = {position}
    for move in text:
        position = _step(position, move)
        houses.add(position)
    return str(len(houses))


def part2(text: str) -> str:
    """Houses visited by two deliverers taking turns."""
    positions = [(0, 0), (0, 0)]
    houses = {(0, 0)}
    for turn, move in enumerate(text):
        who = turn % 2
        positions[who] = _step(positions[who], move)
        houses.add(positions[who])
    return str(len(houses))