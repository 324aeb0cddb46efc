import pytest

from aocsolver.y2022.day01 import part1, part2

SAMPLE = (
    "1000\n2000\n3000\n\n4000\n\n5000\n6000\n\n7000\n8000\n9000\n\n10000\n"
)


def test_part1_sample():
    assert part1(SAMPLE) == "24000"


def test_part2_sample():
    assert part2(SAMPLE) == "45000"


def test_windows_line_endings():
    assert part2(SAMPLE.replace("\n", "\r\n")) == "45000"


def test_last_group_without_newline():
    assert part1("1\n\n5\n6") == "11"


def test_part2_needs_three_elves():
    with pytest.raises(ValueError):
        part2("1\n\n2\n")