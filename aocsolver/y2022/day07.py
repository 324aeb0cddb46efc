"""Directory sizes from a terminal session."""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass, field

_FILE_LINE = re.compile(r"(\d+)\s(.*)")

_DISK = 70_000_000
_NEEDED = 30_000_000
_SMALL = 100_000


@dataclass(frozen=True)
class File:
    name: str
    size: int


@dataclass(eq=False)
class Directory:
    """A directory with its files, subdirectories and parent."""

    name: str
    parent: Directory | None = field(default=None, repr=False)
    subdirectories: list[Directory] = field(default_factory=list)
    files: list[File] = field(default_factory=list)

    def size(self) -> int:
        """Total size of every file below this directory."""
        return sum(f.size for f in self.files) + sum(d.size() for d in self.subdirectories)

    def flatten(self) -> list[Directory]:
        """All directories below this one: direct children first, then their descendants."""
        result = list(self.subdirectories)
        for directory in self.subdirectories:
            result.extend(directory.flatten())
        return result

    def find(self, name: str) -> Directory | None:
        """Resolve a ``cd`` target relative to this directory."""
        if self.name == "/" and name == "/":
            return self
        if name == "..":
            return self.parent
        return next((d for d in self.subdirectories if d.name == name), None)


def walk(commands: Iterable[str]) -> Directory:
    """Rebuild the file tree from terminal lines and return the root."""
    root = Directory("/")
    current = root
    for command in commands:
        if command.strip() == "$ ls" or command == "":
            continue
        if command.startswith("$ cd "):
            target = command[5:]
            found = current.find(target)
            if found is None:
                raise ValueError(f"no directory {target!r} in {current.name!r}")
            current = found
            continue
        if command.startswith("dir "):
            current.subdirectories.append(Directory(command[4:], parent=current))
            continue
        match = _FILE_LINE.search(command)
        if match is None:
            raise ValueError(f"unrecognised line: {command!r}")
        current.files.append(File(match.group(2), int(match.group(1))))
    return root


def _commands(text: str) -> list[str]:
    return text.replace("\r", "").split("\n")


def part1(text: str) -> str:
    """Sum of the sizes of directories no larger than 100000."""
    root = walk(_commands(text))
    return str(sum(size for d in root.flatten() if (size := d.size()) <= _SMALL))


def part2(text: str) -> str:
    """Size of the smallest directory whose removal frees enough space."""
    root = walk(_commands(text))
    needed = _NEEDED - (_DISK - root.size())
    sizes = sorted(d.size() for d in root.flatten())
    return next((str(size) for size in sizes if size >= needed), "")