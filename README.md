# aocsolutions

Solutions to Advent of Code puzzles, arranged by year and day.

Each puzzle lives in its own module, for example `aocsolutions.y2015.day01`
or `aocsolutions.y2021.day13`. A module has a `part1(text)` function and,
for most days, a `part2(text)` function. Each one takes the puzzle input as
a string and returns the answer. Most answers are integers. The answer to
`aocsolutions.y2021.day13.part2` is the folded sheet drawn as lines of `#`
and spaces.

## Covered puzzles

- 2015: days 1–20 (day 19 has `part1` only)
- 2016: day 1
- 2019: days 1–4, plus the Intcode machine in `aocsolutions.y2019.intcode`
- 2020: days 1–4
- 2021: days 1–3 and 5–13

Bad input raises `ValueError`. The Intcode machine raises
`aocsolutions.y2019.intcode.IntcodeError` when it meets an unknown opcode or
an address that is out of bounds.

Some puzzles are solved by brute-force search. These are slow, in particular
2015 day 4 (an MD5 search) and 2015 day 20.

## Usage

```python
from pathlib import Path

from aocsolutions.y2015 import day01

text = Path("input.txt").read_text()
print(day01.part1(text))
print(day01.part2(text))
```

Some modules also expose the helpers behind their answers:

```python
from aocsolutions.y2019.intcode import Intcode
from aocsolutions.y2019.day01 import need_fuel_recursive
from aocsolutions.y2021.day06 import fish_count

machine = Intcode("1,9,10,3,2,3,11,0,99,30,40,50")
machine.interpret()
machine.memory[0]              # 3500

need_fuel_recursive(1969)      # 966
fish_count("3,4,3,1,2", 18)    # lanternfish after 18 days
```

Other helpers include `aocsolutions.y2015.day04.mine`,
`aocsolutions.y2015.day07.evaluate`, `aocsolutions.y2015.day11.next_password`,
`aocsolutions.y2015.day14.race`, `aocsolutions.y2019.day04.is_valid`,
`aocsolutions.y2020.day04.Passport` and
`aocsolutions.y2021.day12.count_paths`.

## What it does not do

The package is a library only. It has no command-line program. It does not
download puzzle inputs and does not submit answers. You read the input
yourself and pass its text to `part1` or `part2`.