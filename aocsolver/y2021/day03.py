"""Power consumption and life support ratings from binary diagnostics."""

from __future__ import annotations

from collections.abc import Sequence


def _lines(text: str) -> list[str]:
    lines = [line.strip() for line in text.splitlines() if line.strip()]
    if not lines:
        raise ValueError("no diagnostic lines")
    return lines


def _bit_counts(lines: Sequence[str], index: int) -> tuple[int, int]:
    """Return (ones, zeroes) at a bit position; anything but '0' counts as one."""
    zeroes = sum(line[index] == "0" for line in lines)
    return len(lines) - zeroes, zeroes


def _rating(lines: Sequence[str], width: int, most_common: bool) -> str:
    prefix = ""
    remaining = list(lines)
    for index in range(width):
        if len(remaining) == 1:
            return remaining[0]
        ones, zeroes = _bit_counts(remaining, index)
        ones_win = ones >= zeroes
        if most_common:
            prefix += "1" if ones_win else "0"
        else:
            prefix += "0" if ones_win else "1"
        remaining = [line for line in remaining if line.startswith(prefix)]
    return prefix


def part1(text: str) -> str:
    """Gamma rate times epsilon rate."""
    lines = _lines(text)
    gamma = ""
    for index in range(len(lines[0])):
        ones, zeroes = _bit_counts(lines, index)
        gamma += "1" if ones > zeroes else "0"
    epsilon = "".join("1" if bit == "0" else "0" for bit in gamma)
    return str(int(gamma, 2) * int(epsilon, 2))


def part2(text: str) -> str:
    """Oxygen generator rating times CO2 scrubber rating."""
    lines = _lines(text)
    width = len(lines[0])
    oxygen = _rating(lines, width, most_common=True)
    scrubber = _rating(lines, width, most_common=False)
    return str(int(oxygen, 2) * int(scrubber, 2))