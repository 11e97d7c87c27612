# judgesolve

A collection of solvers for well-known online-judge problems. Each solver is
available as a plain Python function and as a command that reads the
problem's input (from a file named on the command line, or from standard
input) and prints the answer to standard output. The package has no
dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Solvers

| Module | Main API | Command | Problem |
| --- | --- | --- | --- |
| `judgesolve.meeting_rooms` | `min_rooms(lectures)` | `judgesolve-meeting-rooms` | fewest rooms needed to hold every lecture |
| `judgesolve.exam_supervisors` | `count_supervisors(rooms, chief, assistant)` | `judgesolve-exam-supervisors` | fewest supervisors for all exam rooms |
| `judgesolve.shortest_subarray` | `shortest_subarray(values, target)` | `judgesolve-shortest-subarray` | shortest run of values whose sum reaches a target |
| `judgesolve.compression` | `compress(values)` | `judgesolve-compression` | coordinate compression |
| `judgesolve.light_switches` | `min_presses(current, target)` | `judgesolve-light-switches` | fewest switch presses to reach a target pattern |
| `judgesolve.matrix_product` | `multiply(left, right)` | `judgesolve-matrix-product` | matrix multiplication |
| `judgesolve.hide_and_seek` | `min_time(start, target)` | `judgesolve-hide-and-seek` | fastest way to a target when walking costs 1 and doubling is free |
| `judgesolve.cheapest_path` | `min_cost(grid)` | `judgesolve-cheapest-path` | cheapest corner-to-corner path across a square grid |
| `judgesolve.marble_escape` | `min_tilts(rows, limit=10)`, `Board`, `State`, `Outcome` | `judgesolve-marble-escape` | fewest tilts to drop the red marble without the blue one |
| `judgesolve.gears` | `GearBox`, `Gear`, `is_connected(left, right)` | `judgesolve-gears` | rotating chained gears |
| `judgesolve.baby_shark` | `hunt_time(field)`, `Shark` | `judgesolve-baby-shark` | how long a growing shark can keep hunting |

Functions raise `ValueError` on malformed input (for example a non-square
grid, mismatched matrix sizes, or a board without both marbles).

Where a problem may have no answer, the function returns a neutral value and
the command prints the judge's convention:

- `shortest_subarray` returns `0` when no run reaches the target.
- `min_presses` returns `None` when the target cannot be reached; the command prints `-1`.
- `min_tilts` returns `None` when the red marble cannot drop alone within `limit` tilts; the command prints `-1`.

## Using the functions

```python
from judgesolve.meeting_rooms import min_rooms
from judgesolve.compression import compress
from judgesolve.hide_and_seek import min_time
from judgesolve.gears import GearBox

min_rooms([(1, 3), (2, 4), (3, 5)])   # 2
compress([2, 4, -10, 4, -9])          # [2, 3, 0, 3, 1]
min_time(5, 17)                       # 2

box = GearBox(["10101111", "01111101", "11001110", "00000010"], [1, 2, 4, 8])
box.rotate_at(2, 1)                   # a positive amount turns counter-clockwise
box.score()
```

`Board.parse(rows)` builds a marble board from rows of `#`, `.`, `O`, `R` and
`B`; `Board.tilt(state, direction)` tilts it `"left"`, `"right"`, `"up"` or
`"down"` and returns an `Outcome` together with the new `State`.

## Using the commands

Every command takes the problem input, in the judge's format, either from a
file given as its only argument or on standard input:

```
$ printf '3\n1 3\n2 4\n3 5\n' | judgesolve-meeting-rooms
2
```

```
$ printf '5 17\n' | judgesolve-hide-and-seek
2
```

`judgesolve-cheapest-path` reads grids until a size of `0` and prints one
`Problem <n>: <cost>` line per grid. `judgesolve-gears` reads four gears, scored
1, 2, 4 and 8, followed by the rotations; a rotation of `1` is clockwise.