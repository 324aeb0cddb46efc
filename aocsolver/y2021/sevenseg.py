"""Candidate wirings for a seven-segment display."""

from __future__ import annotations

from collections.abc import Sequence
from enum import IntEnum


class Segment(IntEnum):
    TOP = 0
    TOP_LEFT = 1
    TOP_RIGHT = 2
    MIDDLE = 3
    BOTTOM_LEFT = 4
    BOTTOM_RIGHT = 5
    BOTTOM = 6


def _blank() -> list[str]:
    return [""] * len(Segment)


def generate_possible_displays(
    pattern: str, displays: Sequence[Sequence[str]]
) -> list[list[str]]:
    """Return the displays a signal pattern can produce from known candidates.

    A display is a list of seven wire letters indexed by ``Segment``.
    """
    if len(pattern) == 2:
        first, second = _blank(), _blank()
        first[Segment.TOP_LEFT], first[Segment.BOTTOM_LEFT] = pattern[0], pattern[1]
        second[Segment.TOP_LEFT], second[Segment.BOTTOM_LEFT] = pattern[1], pattern[0]
        return [first, second]

    if len(pattern) == 3:
        if not displays:
            raise ValueError("a three-wire pattern needs candidate displays")
        top = pattern
        for wires in displays[0]:
            if wires:
                top = top.replace(wires, "")
        result = []
        for display in displays:
            updated = list(display)
            updated[Segment.TOP] = top
            result.append(updated)
        return result

    return []