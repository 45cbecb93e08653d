"""The two stacks of the puzzle and the eleven operations on them."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from enum import Enum


class Operation(str, Enum):
    """An instruction that rearranges the stacks, named as it is written."""

    PA = "pa"
    PB = "pb"
    SA = "sa"
    SB = "sb"
    SS = "ss"
    RA = "ra"
    RB = "rb"
    RR = "rr"
    RRA = "rra"
    RRB = "rrb"
    RRR = "rrr"

    def __str__(self) -> str:
        return self.value


def _push(dst: deque, src: deque) -> None:
    if src:
        dst.appendleft(src.popleft())


def _swap(stack: deque) -> None:
    if len(stack) > 1:
        first = stack.popleft()
        second = stack.popleft()
        stack.appendleft(first)
        stack.appendleft(second)


def _rotate(stack: deque) -> None:
    if len(stack) > 1:
        stack.rotate(-1)


def _reverse_rotate(stack: deque) -> None:
    if len(stack) > 1:
        stack.rotate(1)


@dataclass
class Stacks:
    """Stacks ``a`` and ``b``; the top of each is its first element.

    Every applied operation is appended to ``history``.
    """

    a: deque = field(default_factory=deque)
    b: deque = field(default_factory=deque)
    history: list = field(default_factory=list)

    def __post_init__(self) -> None:
        self.a = deque(self.a)
        self.b = deque(self.b)
        self.history = list(self.history)

    def apply(self, operation: Operation | str) -> None:
        """Perform one operation; operations that cannot act do nothing."""
        op = Operation(operation)
        if op is Operation.PA:
            _push(self.a, self.b)
        elif op is Operation.PB:
            _push(self.b, self.a)
        elif op is Operation.SA:
            _swap(self.a)
        elif op is Operation.SB:
            _swap(self.b)
        elif op is Operation.SS:
            _swap(self.a)
            _swap(self.b)
        elif op is Operation.RA:
            _rotate(self.a)
        elif op is Operation.RB:
            _rotate(self.b)
        elif op is Operation.RR:
            _rotate(self.a)
            _rotate(self.b)
        elif op is Operation.RRA:
            _reverse_rotate(self.a)
        elif op is Operation.RRB:
            _reverse_rotate(self.b)
        else:
            _reverse_rotate(self.a)
            _reverse_rotate(self.b)
        self.history.append(op)

    def run(self, operations: Iterable[Operation | str]) -> None:
        """Perform a sequence of operations in order."""
        for operation in operations:
            self.apply(operation)


def is_sorted(values: Sequence[int]) -> bool:
    """True when ``values`` is non-empty and in ascending order."""
    items = list(values)
    if not items:
        return False
    return all(left <= right for left, right in zip(items, items[1:]))