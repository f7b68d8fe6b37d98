# codedrills

A collection of classic algorithm exercises as plain Python functions:
shortest paths, minimum spanning trees, grid searches, binary searches,
two-pointer scans, greedy strategies, string checks, combinatorics and a
segment tree. It has no dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Library use

```python
from codedrills.graphs import shortest_cost, split_village_cost
from codedrills.search import closest_to_zero_pair
from codedrills.strings import is_ppap, palindrome_kind
from codedrills.segment_tree import SegmentTree

shortest_cost(3, [(1, 2, 4), (2, 3, 1), (1, 3, 9)], 1, 3)   # 5
closest_to_zero_pair([-2, 4, -99, -1, 98])                    # (-99, 98)
is_ppap("PPAPAPP")                                            # False
palindrome_kind("summuus")                                    # PalindromeKind.PSEUDO

tree = SegmentTree([1, 2, 3, 4, 5])
tree.update(2, 6)
tree.sum(1, 4)                                                # 12
```

Graph nodes are numbered from 1. Functions that can find no answer return
`None`, and invalid input (a node or cell out of range, ragged grids,
negative counts) raises `ValueError`; `SegmentTree` raises `IndexError` for
positions outside the sequence.

Modules:

- `codedrills.graphs` – `DisjointSet` (`find`, `union`),
  `split_village_cost`, `shortest_cost`, `shortest_path`,
  `count_components`, `max_transport_weight`, `possible_destinations`
- `codedrills.taxi` – `Passenger`, `bfs_distances`, `run_taxi`
- `codedrills.lab` – `count_safe_after_spread`, `max_safe_area`
- `codedrills.grid_search` – `PrefixSum2D` (`query`, 1-based),
  `min_monkey_moves`, `virus_type_at`, `z_order`
- `codedrills.districts` – `min_population_difference`
- `codedrills.search` – `closest_to_zero_pair`, `min_bluray_size`,
  `min_crane_minutes`, `max_router_distance`
- `codedrills.greedy` – `max_bound_sum`, `max_jewel_value`,
  `min_merge_cost`, `min_slime_energy`
- `codedrills.strings` – `PalindromeKind`, `is_ppap`, `palindrome_kind`
- `codedrills.combinatorics` – `binomial`, `cheapest_diet`,
  `measurable_weights`, `count_divisible_subarrays`
- `codedrills.segment_tree` – `SegmentTree` (`update`, `sum` over a
  half-open range), `process_queries`
- `codedrills.cli` – `problems`, `solve`, `main`

## Command line

The `codedrills` command reads a problem's input in the usual
whitespace-separated judge format and prints the answer. The input comes
from a file, or from standard input when the file is omitted or given as `-`:

```
codedrills 1916 input.txt
codedrills 1916 < input.txt
codedrills --list
```

The problem is named by its number; `--list` prints every number the
command knows: 1074, 1092, 1202, 1600, 1647, 1744, 1916, 1939, 2042, 2110,
2343, 2470, 2629, 9370, 10986, 11050, 11660, 11724, 11779, 13975, 14502,
14698, 16120, 17471, 17609, 18405, 19238 and 19942. Where a problem has no
answer the command prints `-1`. Malformed input, an unknown problem number
or an unreadable file end the command with exit status 1 and a message on
standard error.

From Python, `codedrills.cli.solve(problem, text)` returns the same output as
a string, without the final newline, and `codedrills.cli.problems()` returns
the known problem numbers.

## What it does not do

Each run answers one problem from one complete input; the command has no
interactive mode, does not check answers against expected output and keeps
no record of past runs.