# pushswap

A solver for the *push_swap* puzzle. Stack `a` starts with a list of distinct
integers and stack `b` starts empty; the solver prints a sequence of stack
operations, one per line, meant to leave `a` in ascending order with the
smallest value on top.

## Operations

| Name  | Effect                                        |
|-------|-----------------------------------------------|
| `sa`  | swap the top two elements of `a`              |
| `sb`  | swap the top two elements of `b`              |
| `ss`  | `sa` and `sb` together                        |
| `pa`  | move the top of `b` onto `a`                  |
| `pb`  | move the top of `a` onto `b`                  |
| `ra`  | rotate `a` up: the top goes to the bottom     |
| `rb`  | rotate `b` up                                 |
| `rr`  | `ra` and `rb` together                        |
| `rra` | rotate `a` down: the bottom goes to the top   |
| `rrb` | rotate `b` down                               |
| `rrr` | `rra` and `rrb` together                      |

Operations on a stack with too few elements do nothing.

## Installation

```
pip install .
```

## Command line

```
push-swap 3 2 1
push-swap "4 67 3 87 23"
```

The arguments are joined with spaces and split into words, so numbers may be
given separately or together in one quoted string. The input may hold only
digits, `+`, `-` and spaces; each word is read as an optional sign followed
by digits, stopping at the first other character. The command prints `error`
on standard output when there are no arguments, when any other character
appears, when a value lies outside the 32-bit signed range, or when a value
repeats. Input that is already in strictly ascending order produces no
output.

## How operations are chosen

Values are first replaced by their ranks (`pushswap.mapping.index_mapping`).

- Two values: `ra`.
- Three to five values: a fixed sequence picked from a few comparisons of the
  ranks (`sort_three`, `sort_four`, `sort_five` in `pushswap.sorting`). These
  sequences do not put every arrangement of four or five values in order;
  replay the result through `Stacks` to check it.
- Six or more values: a binary radix sort on the ranks (`radix_sort`), one
  pass per bit of the largest rank, pushing values whose bit is 0 to `b` and
  rotating the others, then pushing everything back.

## Library use

```python
from pushswap.parsing import parse_numbers, ParseError
from pushswap.sorting import solve
from pushswap.stacks import Stacks

values = parse_numbers(["5", "1", "4", "2", "3", "0"])
operations = solve(values)

stacks = Stacks(values)
for operation in operations:
    stacks.apply(operation)
print(list(stacks.a))
```

- `pushswap.parsing`: `parse_numbers` (raises `ParseError`, a `ValueError`),
  `atol`, `join_arguments`, `is_sorted`.
- `pushswap.sorting`: `solve`, `sort_small`, `sort_three`, `sort_four`,
  `sort_five`, `find_two_min`, `radix_sort`, `max_bits`.
- `pushswap.stacks`: `Stacks` with the eleven operations as methods and
  `apply(name)`, which raises `ValueError` for an unknown name.
- `pushswap.cli`: `run(args)` returns what the command would print;
  `main(argv=None)` writes it to standard output.

The `pushswap.libft` sub-package holds small helpers over Python values:
`chars` (ASCII classification and case), `conversion` (`atoi`, `itoa`),
`memory` (operations on byte buffers), `strings` (C-style string functions)
and `output` (writing to file descriptors).

## What it does not do

There is no checker command that reads operations from standard input and
reports whether they sort a list. To verify a sequence, replay it with
`Stacks.apply` and inspect `stacks.a` and `stacks.b`.

## Tests

```
pip install .[test]
pytest
```