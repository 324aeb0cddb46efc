"""Decoding scrambled seven-segment displays."""

from __future__ import annotations

_UNIQUE_LENGTHS = {2, 3, 4, 7}


def _parse_entry(line: str) -> tuple[list[str], list[str]]:
    patterns, sep, outputs = line.partition(" | ")
    if not sep:
        raise ValueError(f"missing output values: {line!r}")
    return patterns.split(), outputs.split()


def _entries(text: str) -> list[tuple[list[str], list[str]]]:
    return [_parse_entry(line.strip()) for line in text.splitlines() if line.strip()]


def _decode(patterns: list[str], outputs: list[str]) -> int:
    by_length: dict[int, list[frozenset[str]]] = {}
    for pattern in patterns:
        by_length.setdefault(len(pattern), []).append(frozenset(pattern))
    try:
        one = by_length[2][0]
        four = by_length[4][0]
    except (KeyError, IndexError):
        raise ValueError("patterns lack the digits one and four") from None

    def digit(wires: frozenset[str]) -> int:
        size = len(wires)
        if size == 2:
            return 1
        if size == 3:
            return 7
        if size == 4:
            return 4
        if size == 7:
            return 8
        if size == 6:
            if not one <= wires:
                return 6
            return 9 if four <= wires else 0
        if size == 5:
            if one <= wires:
                return 3
            return 5 if len(wires & four) == 3 else 2
        raise ValueError(f"no digit uses {size} segments")

    value = 0
    for output in outputs:
        value = value * 10 + digit(frozenset(output))
    return value


def part1(text: str) -> str:
    """Count output values that are 1, 4, 7 or 8."""
    return str(
        sum(
            len(output) in _UNIQUE_LENGTHS
            for _, outputs in _entries(text)
            for output in outputs
        )
    )


def part2(text: str) -> str:
    """Sum of all decoded output values."""
    return str(sum(_decode(patterns, outputs) for patterns, outputs in _entries(text)))