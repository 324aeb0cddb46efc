"""A cathode-ray tube driven by a simple CPU."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

_SAMPLED = {20, 60, 100, 140, 180, 220}
_WIDTH = 40
_HEIGHT = 6
_LAST_CYCLE = 241


def run_cycles(instructions: Iterable[str]) -> Iterator[tuple[int, int]]:
    """Yield ``(cycle, x)`` for every cycle, with X as it is during that cycle."""
    x = 1
    cycle = 1
    for instruction in instructions:
        yield cycle, x
        cycle += 1
        if instruction.startswith("noop"):
            continue
        if not instruction.startswith("addx "):
            raise ValueError(f"unknown instruction: {instruction!r}")
        amount = int(instruction[5:])
        yield cycle, x
        cycle += 1
        x += amount
        if cycle > _LAST_CYCLE:
            break


def _instructions(text: str) -> list[str]:
    return text.strip().replace("\r", "").split("\n")


def part1(text: str) -> str:
    """Sum of signal strengths at the sampled cycles."""
    return str(
        sum(cycle * x for cycle, x in run_cycles(_instructions(text)) if cycle in _SAMPLED)
    )


def part2(text: str) -> str:
    """The picture drawn on the screen, one line per row."""
    screen = [[""] * _WIDTH for _ in range(_HEIGHT)]
    for cycle, x in run_cycles(_instructions(text)):
        row, column = divmod(cycle - 1, _WIDTH)
        if row >= _HEIGHT:
            continue
        screen[row][column] = "#" if abs(column - x) <= 1 else "."
    return "\n".join("".join(row) for row in screen).strip()