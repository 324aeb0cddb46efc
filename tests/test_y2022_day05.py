import pytest

from aocsolver.y2022.day05 import (
    execute,
    move,
    move_advanced,
    parse_input,
    parse_map,
    part1,
    part2,
)

SAMPLE = (
    "    [D]    \n"
    "[N] [C]    \n"
    "[Z] [M] [P]\n"
    " 1   2   3 \n"
    "\n"
    "move 1 from 2 to 1\n"
    "move 3 from 1 to 3\n"
    "move 2 from 2 to 1\n"
    "move 1 from 1 to 2\n"
)


def test_part1_sample():
    assert part1(SAMPLE) == "CMZ"


def test_part2_sample():
    assert part2(SAMPLE) == "MCD"


def test_part1_crlf():
    assert part1(SAMPLE.replace("\n", "\r\n")) == "CMZ"


def test_parse_map():
    lines = ["    [D]    ", "[N] [C]    ", "[Z] [M] [P]", " 1   2   3 "]
    assert parse_map(lines) == {"1": ["Z", "N"], "2": ["M", "C", "D"], "3": ["P"]}


def test_parse_input():
    crate_map, instructions = parse_input(SAMPLE)
    assert crate_map == ["    [D]    ", "[N] [C]    ", "[Z] [M] [P]", " 1   2   3 "]
    assert instructions == [
        "move 1 from 2 to 1",
        "move 3 from 1 to 3",
        "move 2 from 2 to 1",
        "move 1 from 1 to 2",
    ]


def test_move_reverses_order():
    stacks = {"1": ["A", "B", "C"], "2": []}
    move(stacks, "1", "2", 2)
    assert stacks == {"1": ["A"], "2": ["C", "B"]}


def test_move_advanced_keeps_order():
    stacks = {"1": ["A", "B", "C"], "2": ["X"]}
    move_advanced(stacks, "1", "2", 2)
    assert stacks == {"1": ["A"], "2": ["X", "B", "C"]}


@pytest.mark.parametrize("mover", [move, move_advanced])
def test_moving_too_many(mover):
    with pytest.raises(ValueError):
        mover({"1": ["A"], "2": []}, "1", "2", 2)


def test_bad_instruction():
    text = "[A]\n 1 \n\njump 1 from 1 to 1\n"
    with pytest.raises(ValueError):
        execute(text, move)