import pytest

from pushswap.cli import build_stack, main, solve
from pushswap.parsing import InputError
from pushswap.stacks import Stacks


def _replay(values, operations):
    stacks = Stacks(values)
    for name in operations:
        getattr(stacks, name)()
    return stacks


def test_build_stack_pushes_on_top():
    assert build_stack(["1 2 3"]) == [3, 2, 1]


def test_build_stack_across_arguments():
    assert build_stack(["4", "-2 9"]) == [9, -2, 4]


def test_build_stack_rejects_duplicates():
    with pytest.raises(InputError):
        build_stack(["1", "2 1"])


@pytest.mark.parametrize(
    "args",
    [["2 1"], ["3 2 1"], ["5", "-1", "8", "0x"][:3], ["42 -17 3 1000 -2147483648 2147483647 6"]],
)
def test_solve_operations_sort_the_values(args):
    values = build_stack(args)
    stacks = _replay(values, solve(args))
    assert list(stacks.a) == sorted(values)
    assert list(stacks.b) == []


def test_solve_whitespace_only_gives_no_operations():
    assert solve(["   "]) == []


def test_solve_invalid_raises():
    with pytest.raises(InputError):
        solve(["1 two 3"])


def test_main_without_arguments(capsys):
    assert main([]) == 1
    assert capsys.readouterr().out == ""


def test_main_with_empty_first_argument(capsys):
    assert main([""]) == 1
    assert capsys.readouterr().out == ""


@pytest.mark.parametrize("args", [["1 1"], ["0"], ["12abc"], ["2147483648"]])
def test_main_reports_error(args, capsys):
    assert main(args) == 1
    assert capsys.readouterr().out == "Error\n"


def test_main_prints_sorting_operations(capsys):
    args = ["2 1 3", "-4"]
    assert main(args) == 0
    lines = capsys.readouterr().out.splitlines()
    assert set(lines) <= {"ra", "pa", "pb"}
    values = build_stack(args)
    stacks = _replay(values, lines)
    assert list(stacks.a) == sorted(values)


def test_main_whitespace_only_prints_nothing(capsys):
    assert main(["   "]) == 0
    assert capsys.readouterr().out == ""