# pushswap

Sort a list of integers using two stacks, `a` and `b`, and a fixed set of
moves. Print the moves that sort it, or check whether a given list of moves
really does sort it.

Stack `a` starts with the numbers in the order given, the first number on
top; stack `b` starts empty. The list is sorted when `a` ascends from the top
and `b` is empty.

## The moves

| Move  | Effect                                              |
|-------|-----------------------------------------------------|
| `sa`  | swap the top two elements of `a`                    |
| `sb`  | swap the top two elements of `b`                    |
| `ss`  | `sa` and `sb` together                              |
| `pa`  | move the top of `b` onto `a`                        |
| `pb`  | move the top of `a` onto `b`                        |
| `ra`  | rotate `a` up: the top element goes to the bottom   |
| `rb`  | rotate `b` up                                       |
| `rr`  | `ra` and `rb` together                              |
| `rra` | rotate `a` down: the bottom element goes to the top |
| `rrb` | rotate `b` down                                     |
| `rrr` | `rra` and `rrb` together                            |

A move that a stack is too small for (swapping a stack of one, pushing from
an empty stack) leaves that stack unchanged.

## Installation

```
pip install .
```

## Command line

Print a sequence of moves that sorts the numbers, one move per line:

```
push-swap 3 2 1
```

The numbers can be given as separate arguments or as space-separated words
inside one argument (`push-swap "4 67 3" 87 23`). Each number must fit in a
32-bit signed integer. Duplicates, non-numeric input, arguments that are
empty or blank, and out-of-range values print `Error` on standard error and
exit with status 1. With no arguments, or with a list that is already
sorted, nothing is printed.

Check a sequence of moves read from standard input:

```
push-swap 3 2 1 | pushswap-checker 3 2 1
```

Each input line must be a move name followed by a newline. The checker
prints `OK` if the moves leave `a` sorted and `b` empty, and `KO` otherwise.
An unknown move, or a last line without its newline, prints `Error` on
standard error and exits with status 1. Bad arguments are reported as for
`push-swap`.

## Library

```python
from pushswap.sorting import solve
from pushswap.stacks import Stacks

moves = solve([3, 1, 2])
stacks = Stacks([3, 1, 2])
stacks.run(moves)
assert stacks.is_sorted()
```

- `pushswap.parsing.parse_arguments(args)` turns command-line words into a
  list of integers, raising `InputError` on bad input. The same module has
  `parse_int`, `split_words`, `is_valid_argument` and `has_duplicates`.
- `pushswap.sorting.solve(values)` returns the list of `Move`s that sorts
  `values`; it raises `ValueError` if the values are not distinct.
  `sort_stacks(stacks)` sorts a `Stacks` in place, recording the moves in its
  `history`.
- `pushswap.stacks.Stacks(values, strict=False)` holds the two stacks as
  `a` and `b`. `apply(move)` and `run(moves)` carry out moves given as `Move`
  members or names, and `is_sorted()` checks the result. With `strict=True`,
  a move the stacks are too small for raises `StackError` instead of doing
  nothing.
- `pushswap.stacks.parse_move(text)` turns a move name, optionally ending in
  one newline, into a `Move`, raising `StackError` for an unknown name.
- `pushswap.cli.run_checker(values, lines)` applies the move lines to
  `values` and returns `True` if they sort them, `False` otherwise.

## Tests

```
pip install ".[test]"
pytest
```