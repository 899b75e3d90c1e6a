import pytest

from pushswap.parsing import InputError, check_duplicates, parse_arguments


def test_parse_keeps_reading_order_across_arguments():
    assert parse_arguments(["3 1", "2"]) == [3, 1, 2]


def test_parse_ignores_extra_spaces():
    assert parse_arguments(["  4   -7 ", "9"]) == [4, -7, 9]


def test_parse_accepts_sign_and_limits():
    assert parse_arguments(["+5", "2147483647", "-2147483648"]) == [5, 2147483647, -2147483648]


def test_parse_whitespace_only_gives_nothing():
    assert parse_arguments(["   "]) == []


@pytest.mark.parametrize(
    "args",
    [["0"], ["abc"], ["1a"], ["-"], ["2147483648"], ["-2147483649"], ["1 1"], ["1", "1"], ["5 0 3"]],
)
def test_parse_rejects_bad_input(args):
    with pytest.raises(InputError):
        parse_arguments(args)


def test_input_error_is_value_error_with_default_message():
    err = InputError()
    assert isinstance(err, ValueError)
    assert str(err) == "Error"


def test_check_duplicates_returns_values():
    assert check_duplicates(iter([1, 2, 3])) == [1, 2, 3]


def test_check_duplicates_raises_on_repeat():
    with pytest.raises(InputError):
        check_duplicates([1, 2, 1])