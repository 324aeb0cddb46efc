import pytest

from aocsolver.y2021.bingo import (
    Card,
    generate_card,
    generate_cards,
    mark_cards,
    ordered_winning_cards,
    winning_cards,
)

ROWS = [
    [1, 2, 3, 4, 5],
    [6, 7, 8, 9, 10],
    [11, 12, 13, 14, 15],
    [16, 17, 18, 19, 20],
    [21, 22, 23, 24, 25],
]

COLUMNS = [
    [1, 6, 11, 16, 21],
    [2, 7, 12, 17, 22],
    [3, 8, 13, 18, 23],
    [4, 9, 14, 19, 24],
    [5, 10, 15, 20, 25],
]


def make_marks(*cells):
    grid = [[False] * 5 for _ in range(5)]
    for r, c in cells:
        grid[r][c] = True
    return grid


def first_row_marked():
    return make_marks(*[(0, c) for c in range(5)])


def first_column_marked():
    return make_marks(*[(r, 0) for r in range(5)])


def test_generate_cards():
    inputs = [
        " 1 2 3 4 5",
        "6 7 8 9 10",
        "11 12 13 14 15",
        "16 17 18 19 20",
        "21 22 23 24 25",
        "",
        "1 2 3 4 5",
        "6 7 8 9 10",
        "11 12 13 14 15",
        "16 17 18 19 20",
        "21 22 23 24 25",
    ]
    assert generate_cards(inputs) == [Card(rows=ROWS), Card(rows=ROWS)]


def test_generate_card_rejects_short_input():
    with pytest.raises(ValueError):
        generate_card(["1 2 3 4 5"])


def test_mark_cards():
    card = Card(rows=[list(r) for r in ROWS])
    marked_1 = mark_cards([card], 1)
    marked_26 = mark_cards([card], 26)
    assert marked_1 == [card]
    assert marked_26 == []
    assert card == Card(rows=ROWS, marks=make_marks((0, 0)))


def test_winning_cards():
    by_row = Card(rows=ROWS, marks=first_row_marked())
    by_column = Card(rows=COLUMNS, marks=first_column_marked())
    actual = winning_cards([by_row, by_column, Card()])
    assert actual == [
        Card(rows=ROWS, marks=first_row_marked()),
        Card(rows=COLUMNS, marks=first_column_marked()),
    ]


def test_sum_of_unmarked():
    card = Card(rows=ROWS, marks=first_row_marked())
    assert card.sum_of_unmarked() == 310


def test_ordered_winning_cards():
    winner = Card(rows=ROWS, marks=first_row_marked())
    actual = ordered_winning_cards([winner, Card()])
    assert actual == [Card(rows=ROWS, marks=first_row_marked()), None]


def test_row_and_column_checks():
    card = Card(rows=COLUMNS, marks=first_column_marked())
    assert card.has_won_column(0) is True
    assert card.has_won_row(0) is False
    assert card.has_won() is True