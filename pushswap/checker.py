"""Verify that a list of operations read from input sorts the stack."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence

from pushswap.parsing import InputError, parse_numbers
from pushswap.stacks import Operation, Stacks, is_sorted

_COMMANDS = {f"{operation.value}\n": operation for operation in Operation}


def parse_command(line: str) -> Operation:
    """The operation named by one input line, newline included."""
    try:
        return _COMMANDS[line]
    except KeyError:
        raise InputError() from None


def check(numbers: Sequence[int], lines: Iterable[str]) -> bool:
    """True when the lines leave every number on ``a`` in ascending order."""
    values = list(numbers)
    stacks = Stacks(a=values)
    for line in lines:
        stacks.apply(parse_command(line))
    return is_sorted(stacks.a) and len(stacks.a) == len(values)


def _input_lines() -> Iterable[str]:
    raw = getattr(sys.stdin, "buffer", None)
    if raw is None:
        return sys.stdin
    return (line.decode("utf-8", "surrogateescape") for line in raw)


def main(argv: Sequence[str] | None = None) -> int:
    """Read operations from standard input and print OK or KO."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args or (len(args) == 1 and args[0] == ""):
        return 1
    try:
        numbers = parse_numbers(args)
        sorted_ok = check(numbers, _input_lines())
    except InputError:
        sys.stderr.write("Error\n")
        return 1
    sys.stdout.write("OK\n" if sorted_ok else "KO\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())