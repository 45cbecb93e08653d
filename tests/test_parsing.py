import pytest

from pushswap.parsing import (
    InputError,
    is_valid_number,
    parse_numbers,
    rank_values,
    split_arguments,
)


def test_single_argument_is_split_on_spaces():
    assert split_arguments(["3  1 2 "]) == ["3", "1", "2"]


def test_several_arguments_are_kept():
    assert split_arguments(["3", "1 2"]) == ["3", "1 2"]


@pytest.mark.parametrize("text", ["0", "+5", "-12", "007"])
def test_valid_numbers(text):
    assert is_valid_number(text)


@pytest.mark.parametrize("text", ["", "+", "-", "1a", "--1", " 1", "1.5", "+-3"])
def test_invalid_numbers(text):
    assert not is_valid_number(text)


def test_parse_single_string():
    assert parse_numbers(["4 -2 +7"]) == [4, -2, 7]


def test_parse_separate_arguments():
    assert parse_numbers(["4", "-2", "7"]) == [4, -2, 7]


def test_int_limits_accepted():
    assert parse_numbers(["2147483647", "-2147483648"]) == [2147483647, -2147483648]


@pytest.mark.parametrize("text", ["2147483648", "-2147483649"])
def test_out_of_range_rejected(text):
    with pytest.raises(InputError):
        parse_numbers([text, "1"])


def test_duplicates_rejected():
    with pytest.raises(InputError):
        parse_numbers(["1", "2", "1"])


def test_signed_zero_is_duplicate():
    with pytest.raises(InputError):
        parse_numbers(["0 -0"])


def test_space_inside_one_of_several_arguments_rejected():
    with pytest.raises(InputError):
        parse_numbers(["1", "2 3"])


def test_input_error_message():
    with pytest.raises(InputError, match="Error"):
        parse_numbers(["x"])


def test_rank_values_example():
    assert rank_values([30, 10, 20]) == [2, 0, 1]


def test_rank_values_is_permutation_and_preserves_order():
    values = [5, -3, 99, 0, 42]
    ranks = rank_values(values)
    assert sorted(ranks) == list(range(len(values)))
    for i, left in enumerate(values):
        for j, right in enumerate(values):
            assert (left < right) == (ranks[i] < ranks[j])


def test_rank_values_empty():
    assert rank_values([]) == []