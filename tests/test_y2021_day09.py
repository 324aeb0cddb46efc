import pytest

from aocsolver.y2021.day09 import parse_heightmap, part1, part2

SAMPLE = "\n".join(
    [
        "2199943210",
        "3987894921",
        "9856789892",
        "8767896789",
        "9899965678",
    ]
)


def test_part1_sample():
    assert part1(SAMPLE) == "15"


def test_part2_sample():
    assert part2(SAMPLE) == "1134"


def test_windows_line_endings():
    assert part1(SAMPLE.replace("\n", "\r\n")) == "15"


def test_parse_heightmap():
    assert parse_heightmap("12\n34\n") == [[1, 2], [3, 4]]


def test_parse_empty_raises():
    with pytest.raises(ValueError):
        parse_heightmap("\n")


def test_part2_needs_three_basins():
    with pytest.raises(ValueError):
        part2("19\n99")