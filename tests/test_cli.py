import pytest

from pushswap.cli import main

OPERATIONS = {"sa", "sb", "ss", "pa", "pb", "ra", "rb", "rr", "rra", "rrb", "rrr"}


def test_main_sorts_and_reports(capsys):
    args = ["42", "-7", "13", "0", "99", "5", "-20", "8"]
    assert main(args) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[-1].startswith("il faut ")
    assert lines[-1].endswith(" fois d'oeperations")
    printed = [int(line) for line in lines[-1 - len(args) : -1]]
    assert printed == sorted(int(a) for a in args)
    assert set(lines[: -1 - len(args)]) <= OPERATIONS


def test_main_count_matches_output(capsys):
    args = [str(v) for v in (5, 3, 9, 1, 7, 2, 8, 6, 4, 0)]
    main(args)
    lines = capsys.readouterr().out.splitlines()
    ops = lines[: -1 - len(args)]
    counted = sum(1 for op in ops if op not in ("rb", "rrb"))
    assert lines[-1] == f"il faut {counted} fois d'oeperations"


def test_main_no_arguments(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == "il faut 0 fois d'oeperations"


def test_main_duplicate(capsys):
    assert main(["1", "2", "1"]) == 0
    assert (
        capsys.readouterr().out
        == "Error:duplicated detected" + "il faut 0 fois d'oeperations"
    )


def test_main_invalid_integer(capsys):
    main(["1", "99999999999"])
    out = capsys.readouterr().out
    assert out.startswith("Error: invalid integer")
    assert out.endswith("il faut 0 fois d'oeperations")


@pytest.mark.parametrize("args", [["2", "1"], ["3", "1", "2", "4"]])
def test_main_too_few_for_chunks(capsys, args):
    assert main(args) == 1
    assert capsys.readouterr().out.splitlines()[-1].startswith("Error:")