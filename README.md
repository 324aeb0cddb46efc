# aocsolver

Solutions to a selection of Advent of Code puzzles. Each puzzle is one
module, and each module has two functions, `part1(text)` and `part2(text)`.
Each function takes the puzzle input as a string and returns the answer
as a string.

The puzzles are grouped by year:

- `aocsolver.y2015`: `day01` to `day04`
- `aocsolver.y2021`: `day01` to `day13`, with helper modules `submarine`,
  `bingo`, `caves` and `sevenseg`
- `aocsolver.y2022`: `day01` to `day11`

## Installation

```
pip install .
```

To install the test dependencies as well:

```
pip install ".[test]"
```

## Usage

```python
from aocsolver.y2015 import day01

print(day01.part1("(()(()("))  # "3"
print(day01.part2("()())"))    # "5"
```

To solve your own input, read the file and pass its contents:

```python
from pathlib import Path
from aocsolver.y2022 import day06

text = Path("input.txt").read_text()
print(day06.part1(text))
print(day06.part2(text))
```

Either `\n` or `\r\n` line endings are accepted.

Most answers are numbers written as strings. A few are pictures:
`aocsolver.y2021.day13.part2` returns the folded paper drawn with `#` and
spaces, and `aocsolver.y2022.day10.part2` returns the screen drawn with
`#` and `.`, one line per row.

Malformed input raises `ValueError`.

### Helper modules

Several days use shared building blocks that you can also use directly:

- `aocsolver.y2021.submarine`: `Direction`, `Command`, `Position`,
  `Submarine` (with `move` and `execute`), `parse_command`, `parse_position`
- `aocsolver.y2021.bingo`: `Card`, `generate_card`, `generate_cards`,
  `mark_cards`, `winning_cards`, `ordered_winning_cards`
- `aocsolver.y2021.caves`: `CaveKind`, `Cave`, `CaveSystem`, `parse_caves`
- `aocsolver.y2021.sevenseg`: `Segment`, `generate_possible_displays`

Some day modules also expose their own parsing and simulation functions,
for example `aocsolver.y2021.day06.simulate`,
`aocsolver.y2022.day07.walk` and `aocsolver.y2022.day11.chase`.

## What it does not do

The package is a library only. It has no command-line program, and it
does not fetch puzzle inputs or submit answers; you read the input
yourself and pass it in as a string.

## Running the tests

```
pytest
```