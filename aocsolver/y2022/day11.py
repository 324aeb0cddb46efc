"""Monkeys throwing items around by worry level."""

from __future__ import annotations

import operator
from collections import deque
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from math import prod

_MASK = (1 << 64) - 1

_OPERATORS: dict[str, Callable[[int, int], int]] = {
    "*": operator.mul,
    "+": operator.add,
    "/": operator.floordiv,
    "-": operator.sub,
}


def _field(line: str, prefix: str) -> str:
    line = line.strip()
    if not line.startswith(prefix):
        raise ValueError(f"expected {prefix!r}: {line!r}")
    return line[len(prefix) :]


def _make_operation(expression: str) -> Callable[[int], int]:
    try:
        left, symbol, right = expression.split()
        combine = _OPERATORS[symbol]
    except (ValueError, KeyError):
        raise ValueError(f"unsupported operation: {expression!r}") from None

    def operand(token: str, old: int) -> int:
        return old if token == "old" else int(token)

    int(left) if left != "old" else None
    int(right) if right != "old" else None

    def apply(old: int) -> int:
        return combine(operand(left, old), operand(right, old)) & _MASK

    return apply


@dataclass
class Monkey:
    """One monkey: its items, how it changes worry and where it throws."""

    id: int
    items: deque[int]
    operation: Callable[[int], int] = field(repr=False)
    test_div: int
    if_true: int
    if_false: int
    inspected: int = 0

    def inspect(self, monkeys: Sequence[Monkey], worry_managed: bool, modulus: int) -> None:
        """Inspect and throw every held item to another monkey."""
        while self.items:
            self.inspected += 1
            item = self.operation(self.items.popleft())
            if worry_managed:
                item //= 3
            else:
                item %= modulus
            target = self.if_true if item % self.test_div == 0 else self.if_false
            monkeys[target].items.append(item)


def parse_monkey(lines: Sequence[str]) -> Monkey:
    """Parse the six lines describing one monkey."""
    if len(lines) < 6:
        raise ValueError("a monkey is described by six lines")
    ident = _field(lines[0], "Monkey ").removesuffix(":")
    items = _field(lines[1], "Starting items: ")
    return Monkey(
        id=int(ident),
        items=deque(int(item) for item in items.split(", ") if item.strip()),
        operation=_make_operation(_field(lines[2], "Operation: new = ")),
        test_div=int(_field(lines[3], "Test: divisible by ")),
        if_true=int(_field(lines[4], "If true: throw to monkey ")),
        if_false=int(_field(lines[5], "If false: throw to monkey ")),
    )


def chase(text: str, rounds: int, worry_managed: bool) -> list[Monkey]:
    """Play ``rounds`` rounds and return the monkeys in input order."""
    lines = [line for line in text.strip().replace("\r", "").split("\n")]
    blocks: list[list[str]] = [[]]
    for line in lines:
        if line.strip():
            blocks[-1].append(line)
        elif blocks[-1]:
            blocks.append([])
    monkeys = [parse_monkey(block) for block in blocks if block]
    modulus = prod({monkey.test_div for monkey in monkeys})
    for _ in range(rounds):
        for monkey in monkeys:
            monkey.inspect(monkeys, worry_managed, modulus)
    return monkeys


def _business(monkeys: Sequence[Monkey]) -> str:
    counts = sorted((monkey.inspected for monkey in monkeys), reverse=True)
    if len(counts) < 2:
        raise ValueError("fewer than two monkeys")
    return str(counts[0] * counts[1])


def part1(text: str) -> str:
    """Monkey business after 20 rounds with worry relief."""
    return _business(chase(text, 20, worry_managed=True))


def part2(text: str) -> str:
    """Monkey business after 10000 rounds without worry relief."""
    return _business(chase(text, 10000, worry_managed=False))