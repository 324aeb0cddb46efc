import pytest

from aocsolver.y2022.day09 import part1, part2, simulate_rope

SAMPLE = """R 4
U 4
L 3
D 1
R 4
D 1
L 5
R 2
"""

SAMPLE2 = """R 5
U 8
L 8
D 3
R 17
D 10
L 25
U 20
"""


def test_part1_sample():
    assert part1(SAMPLE) == "13"


def test_part2_sample():
    assert part2(SAMPLE2) == "36"


def test_part1_crlf():
    assert part1(SAMPLE.replace("\n", "\r\n")) == "13"


def test_straight_line_tail():
    assert simulate_rope(2, ["R 4"]) == {(0, 0), (1, 0), (2, 0), (3, 0)}


def test_tail_stays_when_head_close():
    assert simulate_rope(2, ["U 1", "R 1"]) == {(0, 0)}


def test_single_knot_follows_head():
    assert simulate_rope(1, ["L 2"]) == {(0, 0), (-1, 0), (-2, 0)}


def test_unknown_direction():
    with pytest.raises(ValueError):
        simulate_rope(2, ["X 3"])


def test_no_knots():
    with pytest.raises(ValueError):
        simulate_rope(0, ["R 1"])