import pytest

from aocsolver.y2021.day05 import (
    calculate_diagonals,
    calculate_straights,
    count_overlaps,
    parse_vent,
    part1,
    part2,
    positions_and_diagram,
)
from aocsolver.y2021.submarine import Position

SAMPLE = "\r\n".join(
    [
        "0,9 -> 5,9",
        "8,0 -> 0,8",
        "9,4 -> 3,4",
        "2,2 -> 2,1",
        "7,0 -> 7,4",
        "6,4 -> 2,0",
        "0,9 -> 2,9",
        "3,4 -> 1,4",
        "0,0 -> 8,8",
        "5,5 -> 8,2",
    ]
) + "\r\n"


def test_part1_sample():
    assert part1(SAMPLE) == "5"


def test_part2_sample():
    assert part2(SAMPLE) == "12"


def test_parse_vent():
    assert parse_vent("8,0 -> 0,8") == (Position(8, 0), Position(0, 8))


def test_parse_vent_rejects_garbage():
    with pytest.raises(ValueError):
        parse_vent("8,0 0,8")


def test_diagram_covers_every_point():
    segments, diagram = positions_and_diagram(SAMPLE)
    assert len(segments) == 10
    assert len(diagram) == 10
    assert all(len(row) == 10 for row in diagram)
    assert count_overlaps(diagram) == 0


def test_straight_line_drawn_backwards():
    _, diagram = calculate_straights("3,0 -> 1,0\n")
    assert diagram == [[0, 1, 1, 1]]


def test_diagonal_drawn():
    segments, diagram = calculate_straights("0,0 -> 2,2\n2,0 -> 0,2\n")
    assert diagram == [[0, 0, 0], [0, 0, 0], [0, 0, 0]]
    result = calculate_diagonals(segments, diagram)
    assert result == [[1, 0, 1], [0, 2, 0], [1, 0, 1]]
    assert count_overlaps(result) == 1