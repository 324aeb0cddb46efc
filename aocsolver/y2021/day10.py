"""Syntax scoring for chunks of brackets."""

from __future__ import annotations

_CLOSERS = {"(": ")", "[": "]", "{": "}", "<": ">"}
_ERROR_POINTS = {")": 3, "]": 57, "}": 1197, ">": 25137}
_COMPLETION_POINTS = {")": 1, "]": 2, "}": 3, ">": 4}


def _check(line: str) -> tuple[str | None, list[str]]:
    """Return the first illegal character (or None) and the pending closers."""
    expected: list[str] = []
    for char in line:
        if char in _CLOSERS:
            expected.append(_CLOSERS[char])
        elif expected and char == expected[-1]:
            expected.pop()
        else:
            return char, expected
    return None, expected


def part1(text: str) -> str:
    """Total syntax error score of corrupted lines."""
    total = 0
    for line in text.splitlines():
        illegal, _ = _check(line)
        if illegal is not None:
            total += _ERROR_POINTS.get(illegal, 0)
    return str(total)


def part2(text: str) -> str:
    """Middle completion score of incomplete lines."""
    scores = []
    for line in text.splitlines():
        illegal, expected = _check(line)
        if illegal is not None or not expected:
            continue
        score = 0
        for char in reversed(expected):
            score = score * 5 + _COMPLETION_POINTS[char]
        scores.append(score)
    if not scores:
        raise ValueError("no incomplete lines")
    scores.sort()
    return str(scores[(len(scores) - 1) // 2])