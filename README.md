# pushswap

The puzzle has two stacks, `a` and `b`, and eleven operations. Stack `a` starts out holding distinct integers and stack `b` starts out empty. The goal is to leave `a` sorted in ascending order, smallest value on top, using few operations.

| Operation | Effect |
|-----------|--------|
| `sa`, `sb`, `ss` | swap the top two elements of `a`, of `b`, or of both |
| `pa`, `pb` | move the top of `b` onto `a`, or the top of `a` onto `b` |
| `ra`, `rb`, `rr` | rotate up: the top element goes to the bottom |
| `rra`, `rrb`, `rrr` | rotate down: the bottom element goes to the top |

An operation that cannot act does nothing. For example, `sa` on a stack with fewer than two elements does nothing, and so does `pa` when `b` is empty.

## Installation

```
pip install .
```

## Finding a sequence of operations

You can pass the numbers as separate arguments. You can also pass them as a single argument with the numbers separated by spaces. The first number given is the top of stack `a`.

```
push-swap 3 2 1
push-swap "4 67 3 87 23"
```

The operations are printed one per line. If the input is already sorted, nothing is printed.

Two elements are sorted with `sa`. Three elements take at most two operations. For larger inputs, all but three elements are moved to `b`. The three left on `a` are sorted. Then each element of `b` is moved back in turn, choosing the element that needs the fewest rotations to reach its place. Last, `a` is rotated until its smallest value is on top.

`push-swap` prints `Error` to standard error and exits with status 1 if:

- an argument is not an optional `+` or `-` followed by decimal digits,
- a number is outside the 32-bit signed range,
- a number appears more than once.

If there are no arguments, or only a single empty argument, it exits with status 1 and prints nothing.

## Checking a sequence

`push-swap-checker` takes the same arguments as `push-swap` and rejects bad numbers in the same way. It reads operations from standard input, one per line, and applies them in order. Each line, including the last, must end with a newline. At the end it prints:

- `OK` if `a` holds every number in ascending order and `b` is empty,
- `KO` otherwise.

An unknown operation makes it print `Error` to standard error and exit with status 1.

```
push-swap 5 1 4 2 3 | push-swap-checker 5 1 4 2 3
```

## Using the library

```python
from pushswap.sorter import solve
from pushswap.checker import check

ops = solve([5, 1, 4, 2, 3])
print(check([5, 1, 4, 2, 3], [f"{op}\n" for op in ops]))   # True
```

The two commands are also available as functions that take the argument list and return the exit status:

- `pushswap.sorter.main`
- `pushswap.checker.main`

### `pushswap.stacks`

- `Operation` is an enum of the eleven operations. Its values are their names, such as `"pa"` or `"rrr"`.
- `Stacks` holds the two deques `a` and `b`, with the top of each as its first element.
  - `apply(operation)` performs one operation, given as an `Operation` or its name.
  - `run(operations)` performs a sequence of operations.
  - Every operation performed is recorded in `history`.
- `is_sorted(values)` is true when `values` is non-empty and ascending.

### `pushswap.sorter`

- `solve(numbers)` returns the list of operations. It raises `ValueError` if the numbers are not distinct.
- `sort_three(stacks)` sorts a three-element stack `a` in place.
- `turk_sort(stacks)` sorts a larger stack `a` in place.

### `pushswap.checker`

- `parse_command(line)` maps a line such as `"ra\n"` to its `Operation`. It raises `InputError` for anything else.
- `check(numbers, lines)` applies the lines to the numbers and reports whether they end up sorted.

### `pushswap.parsing`

- `split_arguments(args)` splits a single argument on spaces and keeps several arguments as they are.
- `is_valid_number(text)` checks one string.
- `parse_numbers(args)` turns the arguments into integers. It raises `InputError`, a `ValueError`, on bad input.
- `rank_values(values)` gives each value its position in sorted order, counting from 0.

## Running the tests

```
pip install .[test]
pytest
```