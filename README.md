# adventsolve

Solvers for the first nine days of a season of daily programming puzzles.
Each day has two parts; every solver takes the puzzle input as text and
returns the answer as a string. No third-party libraries are needed.

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Command line

The package installs an `adventsolve` command. It takes a day (1 to 9) and a
part (1 or 2), reads the puzzle input from `input.txt` in the current
directory, or from the file given with `-i`/`--input`, and prints the answer:

```
adventsolve 7 2
adventsolve 1 1 --input puzzles/day01.txt
adventsolve --help
```

If the input file cannot be read, the command reports the error and exits
with status 2.

## Library

Each day lives in its own module, `adventsolve.day01` to `adventsolve.day09`,
and exposes `process_part1(text)` and `process_part2(text)`:

```python
from adventsolve import day01

with open("input.txt", encoding="utf-8") as handle:
    text = handle.read()

print(day01.process_part1(text))
print(day01.process_part2(text))
```

To pick a solver by number, use `solve(day, part, text)` from
`adventsolve.cli`; it raises `ValueError` for an unknown day or a part other
than 1 or 2:

```python
from adventsolve.cli import solve

answer = solve(7, 2, text)
```

Input that does not have the shape a day expects is rejected with
`ValueError`.

### What each day does

- `day01`: two columns of numbers; total distance between the sorted
  columns, and a similarity score weighting each left value by how often it
  appears on the right.
- `day02`: reports of levels; counts reports that rise or fall by 1 to 3 at
  every step, and those that do so once any single level is removed.
- `day03`: sums the products of exact `mul(x,y)` instructions (operands in
  the 32-bit signed range); part 2 first cuts out every stretch from
  `don't()` up to the next `do()`.
- `day04`: counts `XMAS` in all eight directions of a letter grid, and
  X-shaped `MAS` crosses.
- `day05`: page-ordering rules `a|b` followed by a blank line and
  comma-separated updates; sums the middle pages of ordered updates, and of
  misordered updates after repairing them (repair makes four passes over the
  rules, swapping pages that break one).
- `day06`: counts cells a guard visits before leaving the map, and cells
  where one added obstacle keeps the guard on the map for 10,000 moves,
  which is taken as a loop.
- `day07`: sums the test values of equations that can be made true with
  `*` and `+` (part 1) or `*`, `+` and digit concatenation (part 2),
  evaluated left to right.
- `day08`: counts distinct antinodes of same-frequency antennas inside the
  map, for single antinodes (part 1) and for whole lines (part 2).
- `day09`: compacts a dense disk map block by block and returns its
  checksum.

### The disk model of day 9

`adventsolve.day09` also offers the model it works on. `parse_disk(text)`
builds a `Disk` whose `blocks` list holds a file id or `None` for each free
block. The text must be digits only, so strip a trailing newline first.

```python
from adventsolve.day09 import parse_disk

disk = parse_disk("2333133121414131402")
print(disk.move_blocks().checksum())   # 1928
print(disk.empty_sections(len(disk.blocks)))
print(disk.files())
```

`move_blocks()` returns a new compacted `Disk`, `checksum()` sums position
times file id, `empty_sections(end)` lists the free runs starting before
`end`, and `files()` lists the file runs from the end of the disk towards the
start. Runs are `Section(start, size)` values.

## Limitations

Part 2 of day 9 is unfinished: it prints the disk's free sections and file
runs and returns the fixed string `"works"` rather than a computed answer.