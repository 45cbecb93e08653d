"""Reading the numbers that make up stack ``a``."""

from __future__ import annotations

from collections.abc import Sequence

INT_MIN = -2147483648
INT_MAX = 2147483647

_DIGITS = "0123456789"


class InputError(ValueError):
    """The arguments do not describe a valid stack."""

    def __init__(self, message: str = "Error") -> None:
        super().__init__(message)


def split_arguments(args: Sequence[str]) -> list[str]:
    """A single argument is split on spaces; several are taken as they are."""
    if len(args) == 1:
        return [word for word in args[0].split(" ") if word]
    return list(args)


def is_valid_number(text: str) -> bool:
    """An optional sign followed by one or more decimal digits."""
    body = text[1:] if text[:1] in ("+", "-") else text
    return bool(body) and all(char in _DIGITS for char in body)


def parse_numbers(args: Sequence[str]) -> list[int]:
    """Turn command-line arguments into distinct 32-bit integers."""
    numbers: list[int] = []
    seen: set[int] = set()
    for token in split_arguments(args):
        if not is_valid_number(token):
            raise InputError()
        number = int(token)
        if not INT_MIN <= number <= INT_MAX:
            raise InputError()
        if number in seen:
            raise InputError()
        seen.add(number)
        numbers.append(number)
    return numbers


def rank_values(values: Sequence[int]) -> list[int]:
    """Replace each value by its position in ascending order, from 0."""
    order = sorted(range(len(values)), key=lambda i: (values[i], i))
    ranks = [0] * len(values)
    for rank, position in enumerate(order):
        ranks[position] = rank
    return ranks