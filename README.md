# adventkit

Solvers for a selection of Advent of Code puzzles from 2023 and 2024. Each
day is its own module of small functions that take the puzzle input (as
text, lines or a grid) and return the answer. Each module also has a `main`
function, installed as a command, that reads an input file and prints the
answers.

The package needs nothing beyond the Python standard library (3.10 or later).

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Command line

There is one command per puzzle day, named `adventkit-<year>-<day>`:

```
adventkit-2023-01
adventkit-2024-06 my-input.txt
adventkit-2024-19
```

Each command reads its input from `input.txt` in the current directory unless
a path is given. If the file cannot be opened, the command reports the error
on standard error and exits with status 1.

A few commands take extra options:

| Command | Options |
|---------|---------|
| `adventkit-2024-11` | starting stones as arguments (default `8793800 1629 65 5 960 0 138983 85629`), `--blinks` (default 75); reads no file |
| `adventkit-2024-14` | `--width` (101), `--height` (103), `--seconds` (100) |
| `adventkit-2024-18` | `--size` (71), `--bytes` (1024), the number of fallen bytes for the shortest path |

## Library use

Every module can be imported and used directly.

```python
from adventkit.y2023_day01 import total_calibration, total_spelled_calibration

lines = ["1abc2", "pqr3stu8vwx", "two1nine"]
print(total_calibration(lines))
print(total_spelled_calibration(lines))
```

```python
from adventkit.y2024_day01 import parse_lists, similarity_score, total_distance

with open("input.txt") as handle:
    left, right = parse_lists(handle.read())

print(total_distance(left, right))
print(similarity_score(left, right))
```

```python
from adventkit.y2024_day02 import count_safe, count_safe_with_dampener, parse_reports

reports = parse_reports("7 6 4 2 1\n1 2 7 8 9\n")
print(count_safe(reports), count_safe_with_dampener(reports))
```

The main entry points of each module:

| Module | Functions and classes |
|--------|-----------------------|
| `y2023_day01` | `digit_calibration`, `spelled_calibration`, `find_digit`, `total_calibration`, `total_spelled_calibration` |
| `y2023_day02` | `parse_game`, `game_is_possible`, `game_power`, `sum_possible_ids`, `sum_powers` |
| `y2023_day03` | `part_number_sum`, `gear_ratio_sum` |
| `y2023_day04` | `Card`, `parse_cards`, `count_matches`, `card_points`, `total_points`, `card_instances` |
| `y2023_day05` | `MapEntry`, `Almanac`, `parse_almanac`, `convert_number`, `convert_range`, `lowest_location`, `lowest_location_from_ranges` |
| `y2024_day01` | `parse_lists`, `total_distance`, `similarity_score` |
| `y2024_day02` | `parse_reports`, `is_safe`, `dampened_report`, `count_safe`, `count_safe_with_dampener` |
| `y2024_day03` | `sum_multiplications`, `sum_enabled_multiplications` |
| `y2024_day04` | `count_word`, `count_x_mas` |
| `y2024_day05` | `parse_manual`, `is_ordered`, `middle_page`, `topological_sort`, `sum_ordered_middles`, `sum_corrected_middles` |
| `y2024_day06` | `find_guard`, `visited_positions`, `creates_loop`, `count_loop_obstructions` |
| `y2024_day07` | `parse_equations`, `concatenate`, `evaluate`, `is_solvable`, `calibration_total` |
| `y2024_day08` | `parse_antennas`, `antinodes`, `resonant_antinodes` |
| `y2024_day09` | `parse_disk_map`, `fragmented_checksum`, `whole_file_checksum` |
| `y2024_day10` | `parse_topography`, `trailhead_score`, `trailhead_rating`, `total_score`, `total_rating` |
| `y2024_day11` | `stone_growth`, `total_stones` |
| `y2024_day12` | `regions`, `total_fence_cost` |
| `y2024_day13` | `ClawMachine`, `parse_machines`, `solve_machine` |
| `y2024_day14` | `Robot`, `parse_robot`, `simulate`, `quadrant_counts`, `safety_factor`, `render_grid` |
| `y2024_day15` | `parse_warehouse`, `run_moves`, `box_gps_sum` |
| `y2024_day16` | `lowest_score` |
| `y2024_day17` | `Computer`, `Opcode`, `parse_program` |
| `y2024_day18` | `parse_bytes`, `shortest_path`, `first_blocking_byte` |
| `y2024_day19` | `parse_towels`, `can_make`, `count_arrangements` |

Functions that may find no answer return `None` (for example
`lowest_score`, `shortest_path`, `solve_machine`); malformed input raises
`ValueError`.

## What the package does not do

Some days answer only part of the puzzle, or answer it in a limited way:

- 2024 day 11: `stone_growth` uses a simple rule (an even-digit stone doubles
  every blink, any other stone stays single); it does not apply the puzzle's
  stone rules blink by blink, so the total is an estimate.
- 2024 day 13: `solve_machine` tries at most 1000 presses of each button and
  returns the first combination it finds.
- 2024 day 15: only the warehouse with single-cell boxes (`O`) is handled.
- 2024 day 16: only the lowest score is found, not the cells on best paths.
- 2024 day 17: the program is run as given; there is no search for a
  register value that makes it output itself.