import pytest

from aocsolver.y2015.day02 import Dimension, parse_dimensions, part1, part2


@pytest.mark.parametrize("text, expected", [("2x3x4", "58"), ("1x1x10", "43")])
def test_part1(text, expected):
    assert part1(text) == expected


@pytest.mark.parametrize("text, expected", [("2x3x4", "34"), ("1x1x10", "14")])
def test_part2(text, expected):
    assert part2(text) == expected


def test_parse_dimensions():
    assert parse_dimensions("2x3x4") == Dimension(2, 3, 4)


def test_parse_blank_is_zero():
    assert parse_dimensions("") == Dimension(0, 0, 0)


def test_lines_add_up():
    assert part1("2x3x4\n1x1x10\n") == "101"
    assert part2("2x3x4\n1x1x10\n") == "48"