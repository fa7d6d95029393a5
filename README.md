# pushswap

Sorts a list of distinct integers using two stacks, `a` and `b`, and
only the following operations:

| Operation | Effect |
|-----------|--------|
| `sa` / `sb` / `ss` | swap the top two elements of `a`, of `b`, or of both |
| `pa` / `pb` | push the top of `b` onto `a`, or the top of `a` onto `b` |
| `ra` / `rb` / `rr` | rotate `a`, `b`, or both upwards (top goes to bottom) |
| `rra` / `rrb` / `rrr` | rotate `a`, `b`, or both downwards (bottom goes to top) |

These are the methods of `pushswap.operations.Stacks`. Each one writes its
name on its own line to the stream the `Stacks` was given (standard output
by default). `pa` and `pb` do nothing and write nothing when the stack they
take from is empty; the swaps and rotations write their name even when the
stack is too short to change.

## Installation

```
pip install .
```

## Command line

```
pushswap 3 -1 42 7 12 0
```

The program parses its arguments, sorts them, and prints, in order:

1. every operation it performs, one per line;
2. the final contents of stack `a`, one value per line, smallest first;
3. the line `il faut N fois d'oeperations`, where `N` is the number of
   operations counted by the sort (see below).

An argument is read like a C `atoi`: leading blanks and tabs, an optional
sign, then digits; reading stops at the first other character, so `12abc`
reads as 12 and `abc` as 0. A value outside the signed 32-bit range prints
`Error: invalid integer`, and a repeated value prints
`Error:duplicated detected`; in both cases the program carries on with an
empty stack and reports 0 operations. Two to four values cannot be sorted by
the chunked method: the program prints `Error: ...` and exits with status 1.

## Library use

```python
import io

from pushswap.operations import Stacks
from pushswap.parse import parse_list
from pushswap.sort import is_sorted_asc, sort

nodes = parse_list(["5", "2", "9", "1", "7", "3"])
log = io.StringIO()
stacks = Stacks(nodes, [], log)
count = sort(stacks)
assert is_sorted_asc(stacks.a)
print(log.getvalue().split())
```

- `pushswap.operations`: `Node(value, index=-1)`; the list helpers `swap`,
  `rotate` and `reverse_rotate`; and `Stacks(a, b, out)`, whose `a` and `b`
  are lists with the top at position 0.
- `pushswap.parse`: `parse_int`, `is_valid_int`, `has_duplicate`,
  `assign_indexes` (each node's index becomes its rank among the values) and
  `parse_list`, which raises `ParseError` (a `ValueError`) on a bad argument
  or a repeated value.
- `pushswap.sort`: `is_sorted_asc`, `is_sorted_desc`, `get_max_index`
  (0 for an empty stack), `count_max_bits`, `bring_max_to_top(stacks,
  max_index)` (rotates `b` the shorter way and returns the number of
  rotations), and `sort(stacks)`.

`sort` moves elements to `b` in chunks of ranks of width `len(a) // 5`, then
repeatedly brings the largest rank in `b` to its top and pushes it back to
`a`. It raises `ValueError` for two to four elements. Two details of its
output and count:

- when a pushed element is rotated to the bottom of `b` during the chunking
  pass, the line written for that rotation is `ra`;
- the returned count covers the pushes and rotations of the chunking pass
  and the pushes back to `a`, but not the `rb`/`rrb` rotations made while
  bringing the largest element of `b` to the top.

Also included:

- `pushswap.binary.decimal_to_binary_str(n)`: the 32-bit two's-complement
  bits of `n` with leading zeros removed (`"0"` for 0); raises `ValueError`
  if `n` does not fit in 32 bits.
- `pushswap.timsort.tim_sort(arr)`: a simple Timsort (insertion sort over
  runs of five, then pairwise bottom-up merges) that sorts a list in place,
  with its `insertion_sort(arr, left, right)` and
  `merge(arr, left, mid, right)` steps working on inclusive ranges.

## What it does not do

The sort does not try to minimise the number of operations, and there is no
checker that reads a list of operations and verifies that it sorts a stack.

## Tests

```
pip install .[test]
pytest
```