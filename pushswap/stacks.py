"""The two stacks and the eleven operations that act on them."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from enum import Enum
from typing import Callable, Deque, Dict, Union


class StackError(ValueError):
    """Raised for an unknown move or a move the stacks cannot take."""


class Move(str, Enum):
    """An operation on stacks *a* and *b*, named as it is printed."""

    SA = "sa"
    SB = "sb"
    SS = "ss"
    PA = "pa"
    PB = "pb"
    RA = "ra"
    RB = "rb"
    RR = "rr"
    RRA = "rra"
    RRB = "rrb"
    RRR = "rrr"

    def __str__(self) -> str:
        return self.value


def parse_move(text: str) -> Move:
    """Return the move named by *text*, which may end in one newline."""
    name = text[:-1] if text.endswith("\n") else text
    try:
        return Move(name)
    except ValueError:
        raise StackError(f"unknown move: {text!r}") from None


def _swap(stack: Deque[int]) -> None:
    if len(stack) > 1:
        first = stack.popleft()
        second = stack.popleft()
        stack.appendleft(first)
        stack.appendleft(second)


def _push(source: Deque[int], target: Deque[int]) -> None:
    if source:
        target.appendleft(source.popleft())


def _rotate(stack: Deque[int]) -> None:
    if len(stack) > 1:
        stack.rotate(-1)


def _reverse_rotate(stack: Deque[int]) -> None:
    if len(stack) > 1:
        stack.rotate(1)


_OPERATIONS: Dict[Move, Callable[["Stacks"], None]] = {
    Move.SA: lambda s: _swap(s.a),
    Move.SB: lambda s: _swap(s.b),
    Move.SS: lambda s: (_swap(s.a), _swap(s.b)) and None,
    Move.PA: lambda s: _push(s.b, s.a),
    Move.PB: lambda s: _push(s.a, s.b),
    Move.RA: lambda s: _rotate(s.a),
    Move.RB: lambda s: _rotate(s.b),
    Move.RR: lambda s: (_rotate(s.a), _rotate(s.b)) and None,
    Move.RRA: lambda s: _reverse_rotate(s.a),
    Move.RRB: lambda s: _reverse_rotate(s.b),
    Move.RRR: lambda s: (_reverse_rotate(s.a), _reverse_rotate(s.b)) and None,
}

# Smallest size each stack needs for a move to be taken in strict mode.
_REQUIREMENTS: Dict[Move, tuple[int, int]] = {
    Move.SA: (2, 0),
    Move.SB: (0, 2),
    Move.SS: (2, 2),
    Move.PA: (0, 1),
    Move.PB: (1, 0),
    Move.RA: (1, 0),
    Move.RB: (0, 1),
    Move.RR: (1, 1),
    Move.RRA: (2, 0),
    Move.RRB: (0, 2),
    Move.RRR: (2, 2),
}


class Stacks:
    """Stack *a* holding the values (top first) and an empty stack *b*.

    In strict mode a move that the stacks are too small for raises
    :class:`StackError` and leaves them unchanged; otherwise such a move
    does nothing. Every applied move is recorded in :attr:`history`.
    """

    def __init__(self, values: Iterable[int] = (), strict: bool = False) -> None:
        self.a: Deque[int] = deque(values)
        self.b: Deque[int] = deque()
        self.strict = strict
        self.history: list[Move] = []

    def __repr__(self) -> str:
        return f"Stacks(a={list(self.a)}, b={list(self.b)}, strict={self.strict})"

    def apply(self, move: Union[Move, str]) -> Move:
        """Perform *move* and return it as a :class:`Move`."""
        if not isinstance(move, Move):
            move = parse_move(move)
        if self.strict:
            need_a, need_b = _REQUIREMENTS[move]
            if len(self.a) < need_a or len(self.b) < need_b:
                raise StackError(
                    f"cannot apply {move}: a has {len(self.a)}, b has {len(self.b)}"
                )
        _OPERATIONS[move](self)
        self.history.append(move)
        return move

    def run(self, moves: Iterable[Union[Move, str]]) -> "Stacks":
        """Apply every move in order and return these stacks."""
        for move in moves:
            self.apply(move)
        return self

    def is_sorted(self) -> bool:
        """True when *a* ascends from the top and *b* is empty."""
        if self.b:
            return False
        values = list(self.a)
        return all(left <= right for left, right in zip(values, values[1:]))