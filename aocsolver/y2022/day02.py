"""Rock, paper, scissors strategy guide."""

from __future__ import annotations

from enum import IntEnum


class Shape(IntEnum):
    ROCK = 1
    PAPER = 2
    SCISSORS = 3


class Outcome(IntEnum):
    LOSS = 0
    DRAW = 3
    WIN = 6


_SHAPES = {
    "A": Shape.ROCK,
    "X": Shape.ROCK,
    "B": Shape.PAPER,
    "Y": Shape.PAPER,
    "C": Shape.SCISSORS,
    "Z": Shape.SCISSORS,
}

_OUTCOMES = {"X": Outcome.LOSS, "Y": Outcome.DRAW, "Z": Outcome.WIN}

# Each shape beats the shape it maps to.
_BEATS = {Shape.ROCK: Shape.SCISSORS, Shape.PAPER: Shape.ROCK, Shape.SCISSORS: Shape.PAPER}
_BEATEN_BY = {loser: winner for winner, loser in _BEATS.items()}


def letter_to_shape(letter: str) -> Shape:
    try:
        return _SHAPES[letter]
    except KeyError:
        raise ValueError(f"unknown shape letter: {letter!r}") from None


def letter_to_outcome(letter: str) -> Outcome:
    try:
        return _OUTCOMES[letter]
    except KeyError:
        raise ValueError(f"unknown outcome letter: {letter!r}") from None


def game_result(opponent: Shape, me: Shape) -> Outcome:
    """Outcome of a round from my side."""
    if opponent == me:
        return Outcome.DRAW
    return Outcome.WIN if _BEATS[me] == opponent else Outcome.LOSS


def predict(opponent: Shape, outcome: Outcome) -> Shape:
    """The shape to play against ``opponent`` to get ``outcome``."""
    if outcome == Outcome.DRAW:
        return opponent
    if outcome == Outcome.WIN:
        return _BEATEN_BY[opponent]
    return _BEATS[opponent]


def _rounds(text: str):
    for line in text.split("\n"):
        if not line.strip():
            break
        first, second = line.split()
        yield first, second


def part1(text: str) -> str:
    """Score when the second column is my shape."""
    score = 0
    for first, second in _rounds(text):
        opponent, me = letter_to_shape(first), letter_to_shape(second)
        score += me + game_result(opponent, me)
    return str(score)


def part2(text: str) -> str:
    """Score when the second column is the wanted outcome."""
    score = 0
    for first, second in _rounds(text):
        opponent, outcome = letter_to_shape(first), letter_to_outcome(second)
        score += outcome + predict(opponent, outcome)
    return str(score)