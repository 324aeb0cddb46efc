import pytest

from aocsolver.y2021.day13 import fold, parse_manual, part1, part2, render
from aocsolver.y2021.submarine import Position

SAMPLE = "\n".join(
    [
        "6,10",
        "0,14",
        "9,10",
        "0,3",
        "10,4",
        "4,11",
        "6,0",
        "6,12",
        "4,1",
        "0,13",
        "10,12",
        "3,4",
        "3,0",
        "8,4",
        "1,10",
        "2,14",
        "8,10",
        "9,0",
        "",
        "fold along y=7",
        "fold along x=5",
    ]
)


def test_part1_sample():
    assert part1(SAMPLE) == "17"


def test_part2_sample_draws_square():
    assert part2(SAMPLE).split("\n") == [
        "#####",
        "#   #",
        "#   #",
        "#   #",
        "#####",
        "     ",
        "     ",
    ]


def test_parse_manual():
    paper, folds = parse_manual(SAMPLE)
    assert len(paper) == 15
    assert len(paper[0]) == 11
    assert sum(dot for row in paper for dot in row) == 18
    assert folds == [Position(y=7), Position(x=5)]


def test_full_fold_count():
    paper, folds = parse_manual(SAMPLE)
    for instruction in folds:
        paper = fold(paper, instruction)
    assert sum(dot for row in paper for dot in row) == 16


def test_fold_left():
    paper = [[True, False, False, False, False]]
    assert fold(paper, Position(x=2)) == [[True, False]]
    paper = [[False, False, False, False, True]]
    assert fold(paper, Position(x=2)) == [[True, False]]


def test_render():
    assert render([[True, False], [False, True]]) == "# \n #"


def test_fold_out_of_range():
    with pytest.raises(ValueError):
        fold([[True], [False]], Position(y=5))