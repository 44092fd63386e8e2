import random

import pytest

from pushswap.cli import main, run
from pushswap.stacks import Stacks


def _play(values, output):
    stacks = Stacks(values)
    for operation in output.splitlines():
        stacks.apply(operation)
    return list(stacks.a), list(stacks.b)


@pytest.mark.parametrize("args", [[], ["1", "1"], ["abc"], ["2147483648"]])
def test_run_reports_error(args):
    assert run(args) == "error\n"


def test_run_sorted_prints_nothing():
    assert run(["1", "2", "3"]) == ""


def test_run_two_values():
    assert run(["2", "1"]) == "ra\n"


def test_run_sorts_many_values():
    rng = random.Random(5)
    values = rng.sample(range(-500, 500), 40)
    output = run([" ".join(str(v) for v in values)])
    a, b = _play(values, output)
    assert a == sorted(values)
    assert b == []


def test_main_writes_output(capsys):
    assert main(["3", "1", "2"]) == 0
    assert capsys.readouterr().out == "ra\n"


def test_main_error(capsys):
    assert main(["1", "x"]) == 0
    assert capsys.readouterr().out == "error\n"