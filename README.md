# algodrills

A small collection of well-known algorithmic puzzles, each solved as an
ordinary Python function: counting problems, sequence manipulations and
"binary search on the answer" problems. A small command-line tool runs three
of them on input read from standard input.

The package has no runtime dependencies and needs Python 3.10 or later.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Library

### `algodrills.counting`

- `coin_combinations(coins, target)`: number of ordered ways to make
  `target` from the given coin values, modulo 1 000 000 007.
- `can_empty_piles(a, b)`: whether two piles can be emptied by repeatedly
  removing one coin from one pile and two from the other.
- `two_knights(n)`: a list holding, for every board size k from 1 to `n`,
  the number of ways to place two knights on a k-by-k board so that they do
  not attack each other.
- `missing_number(n, numbers)`: the one value from 1..`n` absent from
  `numbers`.
- `count_grid_paths(path)`: number of walks on an 8x8 grid that start at
  (0, 0) and end at (7, 0), where each character of `path` is one step:
  `D`, `U`, `L`, `R`, or `?` for any of the four. Walks that leave the grid
  are not counted, and any other character admits no step.

### `algodrills.sequences`

- `min_gondolas(weights, limit)`: fewest gondolas, each carrying at most two
  people with a total weight of at most `limit`.
- `increasing_array_moves(values)`: total increments needed to make the
  sequence non-decreasing.
- `beautiful_permutation(n)`: a permutation of 1..`n` with no adjacent
  values differing by one (even numbers first, then odd ones). Raises
  `ValueError` for `n` of 2 or 3, where none exists.
- `longest_repetition(text)`: length of the longest run of one character.
- `hanoi_moves(n)`: the list of `(from, to)` moves that transfer `n` disks
  from peg 1 to peg 3; raises `ValueError` for a negative `n`.
- `collatz(n)`: a generator of the Collatz sequence from `n` down to and
  including 1; raises `ValueError` if `n` is less than 1.
- `min_doublings(x, s)`: how many times `x` must be concatenated with itself
  before `s` appears in it, or -1 if it does not appear within seven
  doublings.

### `algodrills.search`

- `median_sorted_arrays(first, second)`: median of the union of two sorted
  sequences as a float; raises `ValueError` if both are empty or the input is
  not sorted.
- `can_allocate(pages, students, max_pages)` and
  `min_max_pages(pages, students)`: split books, in order, among students so
  the largest share is smallest; -1 when there are fewer books than students.
- `can_make_bouquets(bloom_days, m, k, day)` and
  `min_bouquet_days(bloom_days, m, k)`: earliest day on which `m` bouquets
  of `k` adjacent bloomed flowers can be made, or -1.
- `smallest_divisor(nums, threshold)`: smallest divisor for which the
  rounded-up quotients sum to at most `threshold`.
- `kth_missing_positive(arr, k)`: the `k`-th positive integer absent from
  an increasing sequence.
- `can_paint(boards, painters, max_time)` and
  `min_paint_time(boards, painters)`: least time for painters each taking a
  contiguous run of boards.
- `days_needed(weights, capacity)` and `ship_within_days(weights, days)`:
  least ship capacity that delivers packages, in order, within `days`.
- `can_split(nums, k, max_sum)` and `split_array(nums, k)`: smallest
  possible largest sum when `nums` is split into `k` contiguous runs.

## Examples

```python
from algodrills.counting import coin_combinations, can_empty_piles
from algodrills.sequences import min_gondolas, beautiful_permutation
from algodrills.search import (
    kth_missing_positive,
    median_sorted_arrays,
    min_bouquet_days,
    smallest_divisor,
)

coin_combinations([2, 3, 5], 9)            # 8
can_empty_piles(2, 1)                      # True
min_gondolas([7, 2, 3, 9], 10)             # 3
beautiful_permutation(5)                   # [2, 4, 1, 3, 5]
median_sorted_arrays([1, 3], [2])          # 2.0
min_bouquet_days([1, 10, 3, 10, 2], 3, 1)  # 3
min_bouquet_days([1, 10, 3, 10, 2], 3, 2)  # -1
smallest_divisor([1, 2, 5, 9], 6)          # 5
kth_missing_positive([2, 3, 4, 7, 11], 5)  # 9
```

## Command line

Installing the package provides the `algodrills` command. It takes a
subcommand, reads whitespace-separated integers from standard input and
prints the answer:

- `algodrills books`: input `n k` followed by `n` page counts; prints the
  result of `min_max_pages`.
- `algodrills ship`: input `n days` followed by `n` package weights (at
  least one); prints the result of `ship_within_days`.
- `algodrills hanoi`: input the number of disks; prints the number of moves,
  then one `from to` line per move.

```
$ echo "4 2 12 34 67 90" | algodrills books
113
$ echo "2" | algodrills hanoi
3
1 2
1 3
2 3
```

Malformed input ends the command with a usage error. See all options with:

```
algodrills --help
```

## What it does not do

Only the three problems above are reachable from the command line; every
other puzzle is available solely as a library function.