"""Playing bingo against a giant squid."""

from __future__ import annotations

from aocsolver.y2021.bingo import (
    Card,
    generate_cards,
    mark_cards,
    ordered_winning_cards,
    winning_cards,
)


def _parse(text: str) -> tuple[list[int], list[Card]]:
    lines = text.splitlines()
    if not lines or not lines[0].strip():
        raise ValueError("missing drawn numbers")
    numbers = [int(value) for value in lines[0].split(",")]
    return numbers, generate_cards(lines[1:])


def part1(text: str) -> str:
    """Score of the first card to win; empty if no card wins."""
    numbers, cards = _parse(text)
    for number in numbers:
        mark_cards(cards, number)
        winners = winning_cards(cards)
        if winners:
            return str(number * winners[0].sum_of_unmarked())
    return ""


def part2(text: str) -> str:
    """Score of the last card to win."""
    numbers, cards = _parse(text)
    won: set[int] = set()
    last_number = 0
    last_card = Card()
    for number in numbers:
        mark_cards(cards, number)
        for index, card in enumerate(ordered_winning_cards(cards)):
            if card is None or index in won:
                continue
            won.add(index)
            last_number = number
            last_card = card
        if len(won) == len(cards):
            break
    return str(last_number * last_card.sum_of_unmarked())