"""Command-line entry points: the sorter and the checker."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence
from typing import Optional

from .parsing import InputError, parse_arguments
from .sorting import sort_stacks
from .stacks import StackError, Stacks, parse_move


def _error() -> int:
    sys.stderr.write("Error\n")
    return 1


def run_checker(values: Iterable[int], lines: Iterable[str]) -> bool:
    """Apply the moves in *lines* to *values* and report whether they sort them.

    Each line must be a move name followed by exactly one newline; any
    other line raises :class:`StackError`. A move the stacks are too
    small for does nothing. The result is True when stack *a* ends in
    ascending order and stack *b* is empty.
    """
    stacks = Stacks(values)
    for line in lines:
        if not line.endswith("\n"):
            raise StackError(f"move without newline: {line!r}")
        stacks.apply(parse_move(line))
    return stacks.is_sorted()


def push_swap_main(argv: Optional[Sequence[str]] = None) -> int:
    """Print the moves that sort the integers given as arguments."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        values = parse_arguments(args)
    except InputError:
        return _error()
    if not values:
        return 0
    stacks = Stacks(values)
    sort_stacks(stacks)
    sys.stdout.write("".join(f"{move}\n" for move in stacks.history))
    return 0


def checker_main(argv: Optional[Sequence[str]] = None) -> int:
    """Read moves from standard input and print OK if they sort the arguments."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        values = parse_arguments(args)
    except InputError:
        return _error()
    if not values:
        return 0
    try:
        sorted_ok = run_checker(values, sys.stdin)
    except StackError:
        return _error()
    sys.stdout.write("OK\n" if sorted_ok else "KO\n")
    return 0