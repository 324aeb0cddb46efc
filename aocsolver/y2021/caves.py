"""Cave systems and path counting between start and end."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum, auto


class CaveKind(Enum):
    SMALL = auto()
    BIG = auto()
    START = auto()
    END = auto()


def _kind_of(name: str) -> CaveKind:
    lowered = name.lower()
    if lowered == "start":
        return CaveKind.START
    if lowered == "end":
        return CaveKind.END
    if lowered == name:
        return CaveKind.SMALL
    return CaveKind.BIG


@dataclass(eq=False)
class Cave:
    """A cave and the caves it connects to."""

    name: str
    kind: CaveKind = field(init=False)
    connections: list[Cave] = field(default_factory=list, repr=False)

    def __post_init__(self) -> None:
        self.kind = _kind_of(self.name)

    def connect(self, other: Cave) -> None:
        """Join two caves in both directions, once."""
        if any(cave.name == other.name for cave in self.connections):
            return
        self.connections.append(other)
        other.connections.append(self)

    def can_visit(self, history: Sequence[str], revisit_small: bool = False) -> bool:
        """Whether this cave may be entered after the given path."""
        if self.kind is CaveKind.START:
            return False
        if self.kind in (CaveKind.BIG, CaveKind.END):
            return True
        if not revisit_small:
            return self.name not in history
        visits = Counter(name for name in history if name.lower() == name)
        return not (2 in visits.values() and visits[self.name] >= 1)

    def navigate(self, history: Sequence[str] = (), revisit_small: bool = False) -> int:
        """Count the paths from here to the end cave."""
        if not history and self.kind is not CaveKind.START:
            raise ValueError("navigation must begin at the start cave")
        if self.kind is CaveKind.END:
            return 1
        path = (*history, self.name)
        return sum(
            cave.navigate(path, revisit_small)
            for cave in self.connections
            if cave.can_visit(path, revisit_small)
        )


@dataclass
class CaveSystem:
    """A collection of caves, each held once."""

    caves: list[Cave] = field(default_factory=list)

    def add(self, name: str) -> Cave:
        """Return the cave with this name, creating it if needed."""
        kind = _kind_of(name)
        for cave in self.caves:
            if cave.name == name and cave.kind is kind:
                return cave
        cave = Cave(name)
        self.caves.append(cave)
        return cave


def parse_caves(text: str) -> Cave:
    """Build a cave system from ``a-b`` lines and return its start cave."""
    system = CaveSystem()
    start = None
    for line in text.splitlines():
        line = line.strip()
        if not line:
            continue
        left, right = line.split("-")
        first, second = system.add(left), system.add(right)
        first.connect(second)
        for cave in (first, second):
            if cave.name == "start":
                start = cave
    if start is None:
        raise ValueError("no start cave")
    return start