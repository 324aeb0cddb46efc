"""Bingo cards: parsing, marking and scoring."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

SIZE = 5


def _grid(value):
    return [[value] * SIZE for _ in range(SIZE)]


@dataclass
class Card:
    """A 5x5 bingo card and its marked cells."""

    rows: list[list[int]] = field(default_factory=lambda: _grid(0))
    marks: list[list[bool]] = field(default_factory=lambda: _grid(False))

    def mark(self, number: int) -> bool:
        """Mark the first cell holding ``number``; report whether one was found."""
        for r, row in enumerate(self.rows):
            for c, value in enumerate(row):
                if value == number:
                    self.marks[r][c] = True
                    return True
        return False

    def has_won_row(self, row: int) -> bool:
        return all(self.marks[row])

    def has_won_column(self, column: int) -> bool:
        return all(marks[column] for marks in self.marks)

    def has_won(self) -> bool:
        return any(self.has_won_row(i) or self.has_won_column(i) for i in range(SIZE))

    def sum_of_unmarked(self) -> int:
        return sum(
            value
            for row, marks in zip(self.rows, self.marks)
            for value, marked in zip(row, marks)
            if not marked
        )


def generate_card(lines: Sequence[str]) -> Card:
    """Build a card from five lines of whitespace-separated numbers."""
    if len(lines) != SIZE:
        raise ValueError(f"a card needs {SIZE} lines, got {len(lines)}")
    rows = []
    for line in lines:
        values = [int(v) for v in line.split()]
        if len(values) != SIZE:
            raise ValueError(f"a card row needs {SIZE} numbers: {line!r}")
        rows.append(values)
    return Card(rows=rows)


def generate_cards(lines: Iterable[str]) -> list[Card]:
    """Build cards from lines, skipping blank ones; a trailing partial card is ignored."""
    cards = []
    pending: list[str] = []
    for line in lines:
        if not line.strip():
            continue
        pending.append(line)
        if len(pending) == SIZE:
            cards.append(generate_card(pending))
            pending = []
    return cards


def mark_cards(cards: Iterable[Card], number: int) -> list[Card]:
    """Mark ``number`` on every card; return the cards that held it."""
    return [card for card in cards if card.mark(number)]


def winning_cards(cards: Iterable[Card]) -> list[Card]:
    return [card for card in cards if card.has_won()]


def ordered_winning_cards(cards: Iterable[Card]) -> list[Card | None]:
    """Return each card if it has won, otherwise None, keeping positions."""
    return [card if card.has_won() else None for card in cards]