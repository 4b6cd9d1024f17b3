"""Choosing the moves that sort stack *a* with the help of stack *b*."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from collections.abc import Iterable, Sequence
from typing import Callable, Dict, List, Tuple

from .stacks import Move, Stacks

_Picker = Callable[[int, List[int], Dict[int, int]], int]


def is_sorted(values: Iterable[int]) -> bool:
    """True when *values* never decrease from first to last."""
    items = list(values)
    return all(left <= right for left, right in zip(items, items[1:]))


def min_index(values: Iterable[int]) -> int:
    """Index of the first occurrence of the smallest value."""
    items = list(values)
    if not items:
        raise ValueError("min_index() of an empty stack")
    return min(range(len(items)), key=items.__getitem__)


def sort_three(stacks: Stacks) -> None:
    """Sort a stack *a* of two or three values."""
    a = stacks.a
    if len(a) == 3:
        first, second, third = a
        if first > second and first > third:
            stacks.apply(Move.RA)
        elif second > first and second > third:
            stacks.apply(Move.RRA)
    if len(a) >= 2 and a[0] > a[1]:
        stacks.apply(Move.SA)


def sort_four(stacks: Stacks) -> None:
    """Sort a stack *a* of four values by parking its minimum on *b*."""
    index = min_index(stacks.a)
    if index == 3:
        stacks.apply(Move.RRA)
    elif index == 2:
        stacks.run((Move.RRA, Move.RRA))
    elif index == 1:
        stacks.apply(Move.RA)
    stacks.apply(Move.PB)
    sort_three(stacks)
    stacks.apply(Move.PA)


def _distance(index: int, size: int) -> int:
    """Rotations needed to bring *index* to the top, going the short way."""
    return index if index <= size // 2 else size - index


def _cost(position: int, target: int, source_size: int, dest_size: int) -> int:
    to_source = _distance(position, source_size)
    to_dest = _distance(target, dest_size)
    same_direction = (position <= source_size // 2) == (target <= dest_size // 2)
    return max(to_source, to_dest) if same_direction else to_source + to_dest


def _first_index(values: Sequence[int]) -> Dict[int, int]:
    index: Dict[int, int] = {}
    for position, value in enumerate(values):
        index.setdefault(value, position)
    return index


def _closest_below(value: int, ordered: List[int], index: Dict[int, int]) -> int:
    """Index of the largest value below *value*, or of the maximum if none is."""
    cut = bisect_left(ordered, value)
    return index[ordered[cut - 1] if cut else ordered[-1]]


def _closest_above(value: int, ordered: List[int], index: Dict[int, int]) -> int:
    """Index of the smallest value above *value*, or of the minimum if none is."""
    cut = bisect_right(ordered, value)
    return index[ordered[cut] if cut < len(ordered) else ordered[0]]


def _cheapest(
    source: Sequence[int], dest: Sequence[int], pick: _Picker
) -> Tuple[int, int]:
    """Position in *source* of the cheapest value to move, and its target in *dest*."""
    ordered = sorted(dest)
    index = _first_index(dest)
    best: Tuple[int, int, int] | None = None
    for position, value in enumerate(source):
        target = pick(value, ordered, index)
        cost = _cost(position, target, len(source), len(dest))
        if best is None or cost < best[0]:
            best = (cost, position, target)
    assert best is not None
    return best[1], best[2]


def _align(stacks: Stacks, position: int, target: int, *, from_a: bool) -> None:
    """Rotate both stacks so the chosen value and its target are on top."""
    if from_a:
        source, dest = stacks.a, stacks.b
        rotate_src, reverse_src, rotate_dst, reverse_dst = (
            Move.RA, Move.RRA, Move.RB, Move.RRB,
        )
    else:
        source, dest = stacks.b, stacks.a
        rotate_src, reverse_src, rotate_dst, reverse_dst = (
            Move.RB, Move.RRB, Move.RA, Move.RRA,
        )
    size_src, size_dst = len(source), len(dest)
    half_src, half_dst = size_src // 2, size_dst // 2

    if position <= half_src and target <= half_dst:
        while position > 0 and target > 0:
            stacks.apply(Move.RR)
            position -= 1
            target -= 1
    elif position > half_src and target > half_dst:
        while position < size_src and target < size_dst:
            stacks.apply(Move.RRR)
            position += 1
            target += 1

    while 0 < position <= half_src:
        stacks.apply(rotate_src)
        position -= 1
    while half_src < position < size_src:
        stacks.apply(reverse_src)
        position += 1
    while 0 < target <= half_dst:
        stacks.apply(rotate_dst)
        target -= 1
    while half_dst < target < size_dst:
        stacks.apply(reverse_dst)
        target += 1


def _push_to_b(stacks: Stacks) -> None:
    stacks.run((Move.PB, Move.PB))
    while stacks.a and len(stacks.a) != 3:
        position, target = _cheapest(list(stacks.a), list(stacks.b), _closest_below)
        _align(stacks, position, target, from_a=True)
        stacks.apply(Move.PB)
    sort_three(stacks)


def _pull_back_to_a(stacks: Stacks) -> None:
    while stacks.b:
        position, target = _cheapest(list(stacks.b), list(stacks.a), _closest_above)
        _align(stacks, position, target, from_a=False)
        stacks.apply(Move.PA)
    while 0 < min_index(stacks.a) <= len(stacks.a) // 2:
        stacks.apply(Move.RA)
    while min_index(stacks.a) > len(stacks.a) // 2:
        stacks.apply(Move.RRA)


def sort_stacks(stacks: Stacks) -> None:
    """Sort stack *a* in place unless it is already in order."""
    if is_sorted(stacks.a):
        return
    size = len(stacks.a)
    if size in (2, 3):
        sort_three(stacks)
    elif size == 4:
        sort_four(stacks)
    elif size > 4:
        _push_to_b(stacks)
        _pull_back_to_a(stacks)


def solve(values: Iterable[int]) -> List[Move]:
    """Return the moves that sort *values*, given top first, in ascending order."""
    stacks = Stacks(values)
    if len(set(stacks.a)) != len(stacks.a):
        raise ValueError("values must be distinct")
    sort_stacks(stacks)
    return list(stacks.history)