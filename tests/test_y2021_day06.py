import pytest

from aocsolver.y2021.day06 import descendants, part1, part2, simulate

SAMPLE = "3,4,3,1,2\r\n"


def test_part1_sample():
    assert part1(SAMPLE) == "5934"


def test_part2_sample():
    assert part2(SAMPLE) == "26984457539"


def test_eighteen_days():
    assert simulate(SAMPLE, 18) == 26


def test_no_days_keeps_population():
    assert simulate(SAMPLE, 0) == 5


def test_fish_at_zero_spawns_next_day():
    assert descendants(0, 1) == 2
    assert descendants(0, 0) == 1


def test_empty_input_rejected():
    with pytest.raises(ValueError):
        simulate("", 80)