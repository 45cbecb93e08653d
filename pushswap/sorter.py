"""Produce a short sequence of operations that sorts stack ``a``."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from dataclasses import dataclass

from pushswap.parsing import INT_MAX, InputError, parse_numbers, rank_values
from pushswap.stacks import Operation, Stacks, is_sorted


@dataclass(frozen=True)
class _Move:
    """The cheapest element of ``b`` and the element of ``a`` it goes above."""

    value: int
    target: int
    price: int
    reverse: bool
    target_reverse: bool


def _past_middle(position: int, size: int) -> bool:
    """True when reaching ``position`` is done by reverse rotations."""
    return position > size // 2


def _target(a: Sequence[int], value: int) -> int:
    """The smallest element of ``a`` above ``value``, else the smallest of ``a``."""
    best = INT_MAX
    target = None
    for candidate in a:
        if value < candidate < best:
            best = candidate
            target = candidate
    return min(a) if target is None else target


def _cheapest_move(stacks: Stacks) -> _Move:
    a = list(stacks.a)
    b = list(stacks.b)
    positions_a = {value: position for position, value in enumerate(a)}
    best: _Move | None = None
    for position, value in enumerate(b):
        target = _target(a, value)
        target_position = positions_a[target]
        reverse = _past_middle(position, len(b))
        target_reverse = _past_middle(target_position, len(a))
        price = len(b) - position if reverse else position
        price += len(a) - target_position if target_reverse else target_position
        if best is None or price < best.price:
            best = _Move(value, target, price, reverse, target_reverse)
    assert best is not None
    return best


def _rotate_until(stacks: Stacks, name: str, value: int, reverse: bool) -> None:
    if name == "a":
        operation = Operation.RRA if reverse else Operation.RA
    else:
        operation = Operation.RRB if reverse else Operation.RB
    while getattr(stacks, name)[0] != value:
        stacks.apply(operation)


def _move_cheapest(stacks: Stacks) -> None:
    move = _cheapest_move(stacks)
    if move.reverse == move.target_reverse:
        both = Operation.RRR if move.reverse else Operation.RR
        while stacks.a[0] != move.target and stacks.b[0] != move.value:
            stacks.apply(both)
    _rotate_until(stacks, "b", move.value, move.reverse)
    _rotate_until(stacks, "a", move.target, move.target_reverse)
    stacks.apply(Operation.PA)


def sort_three(stacks: Stacks) -> None:
    """Sort a stack ``a`` of three elements with at most two operations."""
    if len(stacks.a) < 2:
        raise ValueError("stack a needs at least two elements")
    biggest = max(stacks.a)
    if stacks.a[0] == biggest:
        stacks.apply(Operation.RA)
    elif stacks.a[1] == biggest:
        stacks.apply(Operation.RRA)
    if stacks.a[0] > stacks.a[1]:
        stacks.apply(Operation.SA)


def turk_sort(stacks: Stacks) -> None:
    """Sort stack ``a`` by moving all but three elements to ``b`` and back."""
    values = list(stacks.a)
    ranks = dict(zip(values, rank_values(values)))
    half = len(values) // 2
    for _ in range(len(values) - 3):
        top = stacks.a[0]
        stacks.apply(Operation.PB)
        if ranks[top] < half:
            stacks.apply(Operation.RB)
    sort_three(stacks)
    while stacks.b:
        _move_cheapest(stacks)
    smallest = min(stacks.a)
    position = list(stacks.a).index(smallest)
    _rotate_until(stacks, "a", smallest, _past_middle(position, len(stacks.a)))


def solve(numbers: Sequence[int]) -> list[Operation]:
    """The operations that sort distinct ``numbers`` placed on stack ``a``."""
    values = list(numbers)
    if len(set(values)) != len(values):
        raise ValueError("numbers must be distinct")
    stacks = Stacks(a=values)
    if not values or is_sorted(values):
        return []
    if len(values) == 2:
        stacks.apply(Operation.SA)
    elif len(values) == 3:
        sort_three(stacks)
    else:
        turk_sort(stacks)
    return list(stacks.history)


def main(argv: Sequence[str] | None = None) -> int:
    """Print the sorting operations for the numbers given as arguments."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args or (len(args) == 1 and args[0] == ""):
        return 1
    try:
        numbers = parse_numbers(args)
    except InputError:
        sys.stderr.write("Error\n")
        return 1
    sys.stdout.write("".join(f"{operation}\n" for operation in solve(numbers)))
    return 0


if __name__ == "__main__":
    sys.exit(main())