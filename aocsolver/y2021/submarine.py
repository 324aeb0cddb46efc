"""Submarine commands, positions and movement."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum


class Direction(Enum):
    """Direction a submarine command moves in."""

    FORWARD = "forward"
    UP = "up"
    DOWN = "down"


@dataclass(frozen=True)
class Command:
    """A single steering command."""

    direction: Direction
    units: int


@dataclass(frozen=True)
class Position:
    """A point on a two-dimensional grid."""

    x: int = 0
    y: int = 0


def parse_command(text: str) -> Command:
    """Parse a command such as ``forward 5``."""
    word, _, units = text.strip().partition(" ")
    try:
        direction = Direction(word)
    except ValueError:
        raise ValueError(f"unknown direction: {word!r}") from None
    return Command(direction, int(units.strip()))


def parse_position(text: str) -> Position:
    """Parse a coordinate pair such as ``12,99``."""
    x, y = text.split(",")
    return Position(int(x), int(y))


@dataclass
class Submarine:
    """A submarine with a position and an aim."""

    position: Position = field(default_factory=Position)
    aim: int = 0

    def move(self, command: Command) -> None:
        """Apply one command."""
        if command.direction is Direction.FORWARD:
            self.position = Position(
                self.position.x + command.units,
                self.position.y + command.units * self.aim,
            )
        elif command.direction is Direction.UP:
            self.aim -= command.units
        elif command.direction is Direction.DOWN:
            self.aim += command.units

    def execute(self, commands: Iterable[Command]) -> None:
        """Apply every command in order."""
        for command in commands:
            self.move(command)