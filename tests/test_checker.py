import io
import random

import pytest

from pushswap.checker import check, main, parse_command
from pushswap.parsing import InputError
from pushswap.sorter import solve
from pushswap.stacks import Operation


@pytest.mark.parametrize("operation", list(Operation))
def test_parse_every_command(operation):
    assert parse_command(f"{operation.value}\n") is operation


@pytest.mark.parametrize("line", ["sa", "xx\n", "SA\n", " sa\n", "sa \n", "\n", "rra\r\n"])
def test_parse_rejects(line):
    with pytest.raises(InputError):
        parse_command(line)


def test_check_swap_sorts():
    assert check([2, 1], ["sa\n"]) is True


def test_check_unsorted_is_ko():
    assert check([2, 1], []) is False


def test_check_missing_elements_is_ko():
    assert check([1, 2, 3], ["pb\n"]) is False


def test_check_push_and_back():
    assert check([1, 2, 3], ["pb\n", "pb\n", "pa\n", "pa\n"]) is True


def test_check_empty_stack_is_ko():
    assert check([], []) is False


def test_check_bad_command_raises():
    with pytest.raises(InputError):
        check([1, 2], ["sa\n", "nope\n"])


def test_check_accepts_solver_output():
    rng = random.Random(7)
    numbers = rng.sample(range(1000), 60)
    lines = [f"{operation}\n" for operation in solve(numbers)]
    assert check(numbers, lines) is True


def test_main_ok(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("ra\nsa\n"))
    assert main(["3 2 1"]) == 0
    assert capsys.readouterr().out == "OK\n"


def test_main_ko(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("ra\n"))
    assert main(["1", "2", "3"]) == 0
    assert capsys.readouterr().out == "KO\n"


def test_main_bad_command(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("sa\nswap\n"))
    assert main(["2", "1"]) == 1
    captured = capsys.readouterr()
    assert captured.err == "Error\n"
    assert captured.out == ""


def test_main_bad_numbers(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    assert main(["1 1"]) == 1
    assert capsys.readouterr().err == "Error\n"


@pytest.mark.parametrize("argv", [[], [""]])
def test_main_without_input(argv, capsys):
    assert main(argv) == 1
    assert capsys.readouterr().out == ""