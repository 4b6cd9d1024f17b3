import io
import random

import pytest

from pushswap.cli import checker_main, push_swap_main, run_checker
from pushswap.stacks import StackError


def _moves_for(capsys, args):
    code = push_swap_main(args)
    out = capsys.readouterr().out
    assert code == 0
    return out.splitlines(keepends=True)


def test_run_checker_swap_sorts_two():
    assert run_checker([2, 1], ["sa\n"]) is True


def test_run_checker_no_moves_on_unsorted():
    assert run_checker([2, 1], []) is False


def test_run_checker_nonempty_b_is_ko():
    assert run_checker([1, 2], ["pb\n"]) is False


def test_run_checker_push_and_back():
    assert run_checker([1, 2], ["pb\n", "pa\n"]) is True


def test_run_checker_line_without_newline_raises():
    with pytest.raises(StackError):
        run_checker([2, 1], ["sa"])


@pytest.mark.parametrize("line", ["foo\n", "\n", "sa \n", "SA\n"])
def test_run_checker_unknown_move_raises(line):
    with pytest.raises(StackError):
        run_checker([2, 1], [line])


def test_run_checker_moves_on_small_stacks_do_nothing():
    assert run_checker([1], ["sa\n", "rra\n", "pa\n"]) is True


def test_push_swap_no_arguments(capsys):
    assert push_swap_main([]) == 0
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == ""


def test_push_swap_already_sorted_prints_nothing(capsys):
    assert _moves_for(capsys, ["1 2 3", "4"]) == []


@pytest.mark.parametrize(
    "args",
    [["1 a"], ["1", "1"], ["2147483648"], ["-2147483649"], ["   "], [""], ["1-2"], ["+"]],
)
def test_push_swap_errors(capsys, args):
    assert push_swap_main(args) == 1
    captured = capsys.readouterr()
    assert captured.err == "Error\n"
    assert captured.out == ""


@pytest.mark.parametrize(
    "args",
    [["2 1"], ["3 2 1"], ["4", "3", "1", "2"], ["5 1 4 2 3"], ["-7 12 0 3 -1 8"]],
)
def test_push_swap_output_is_accepted_by_checker(capsys, args):
    lines = _moves_for(capsys, args)
    values = [int(word) for arg in args for word in arg.split()]
    assert lines
    assert run_checker(values, lines) is True


def test_push_swap_hundred_values_round_trip(capsys):
    values = random.Random(7).sample(range(-500, 500), 100)
    lines = _moves_for(capsys, [" ".join(map(str, values))])
    assert run_checker(values, lines) is True


def test_checker_ok(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("sa\n"))
    assert checker_main(["2", "1"]) == 0
    assert capsys.readouterr().out == "OK\n"


def test_checker_ko(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("ra\n"))
    assert checker_main(["2 1 3"]) == 0
    assert capsys.readouterr().out == "KO\n"


def test_checker_bad_move(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("sa\nxx\n"))
    assert checker_main(["2", "1"]) == 1
    captured = capsys.readouterr()
    assert captured.err == "Error\n"
    assert captured.out == ""


def test_checker_last_line_without_newline(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("sa"))
    assert checker_main(["2", "1"]) == 1
    assert capsys.readouterr().err == "Error\n"


def test_checker_invalid_arguments(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    assert checker_main(["3", "3"]) == 1
    assert capsys.readouterr().err == "Error\n"


def test_checker_no_arguments(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("sa\n"))
    assert checker_main([]) == 0
    assert capsys.readouterr().out == ""


def test_checker_uses_push_swap_output(monkeypatch, capsys):
    args = ["9 -3 4 0 7 1"]
    lines = _moves_for(capsys, args)
    monkeypatch.setattr("sys.stdin", io.StringIO("".join(lines)))
    assert checker_main(args) == 0
    assert capsys.readouterr().out == "OK\n"