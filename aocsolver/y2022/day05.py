"""Rearranging stacks of supply crates."""

from __future__ import annotations

import re
from collections.abc import Callable, Sequence

Stacks = dict[str, list[str]]
Mover = Callable[[Stacks, str, str, int], None]

_STACK_NUMBER = re.compile(r"\d+")
_INSTRUCTION = re.compile(r"move (\d+) from (\d+) to (\d+)")


def _check_available(stacks: Stacks, start: str, count: int) -> None:
    if count > len(stacks[start]):
        raise ValueError(f"stack {start} holds fewer than {count} crates")


def move(stacks: Stacks, start: str, end: str, count: int) -> None:
    """Move crates one at a time from ``start`` to ``end``."""
    _check_available(stacks, start, count)
    for _ in range(count):
        stacks[end].append(stacks[start].pop())


def move_advanced(stacks: Stacks, start: str, end: str, count: int) -> None:
    """Move ``count`` crates at once, keeping their order."""
    _check_available(stacks, start, count)
    if count == 0:
        return
    moving = stacks[start][-count:]
    del stacks[start][-count:]
    stacks[end].extend(moving)


def parse_map(lines: Sequence[str]) -> Stacks:
    """Parse the crate drawing; each stack lists crates from bottom to top."""
    if not lines:
        raise ValueError("empty crate map")
    numbers = lines[-1]
    columns = {m.group(): m.start() for m in _STACK_NUMBER.finditer(numbers)}
    stacks: Stacks = {name: [] for name in columns}
    for row in reversed(lines[:-1]):
        for name, column in columns.items():
            if column < len(row) and row[column] != " ":
                stacks[name].append(row[column])
    return stacks


def parse_input(text: str) -> tuple[list[str], list[str]]:
    """Split the input into crate drawing lines and instruction lines."""
    crate_map: list[str] = []
    instructions: list[str] = []
    reading_instructions = False
    for line in text.replace("\r", "").split("\n"):
        if not line:
            reading_instructions = True
            continue
        (instructions if reading_instructions else crate_map).append(line)
    return crate_map, instructions


def execute(text: str, mover: Mover) -> str:
    """Run every instruction with ``mover`` and read the top crate of each stack."""
    crate_map, instructions = parse_input(text)
    stacks = parse_map(crate_map)
    for instruction in instructions:
        match = _INSTRUCTION.search(instruction)
        if match is None:
            raise ValueError(f"not a move instruction: {instruction!r}")
        count, start, end = match.groups()
        mover(stacks, start, end, int(count))
    return "".join(stacks[str(number)][-1] for number in range(1, len(stacks) + 1))


def part1(text: str) -> str:
    return execute(text, move)


def part2(text: str) -> str:
    return execute(text, move_advanced)