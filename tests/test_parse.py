import pytest

from pushswap.operations import Node
from pushswap.parse import (
    ParseError,
    assign_indexes,
    has_duplicate,
    is_valid_int,
    parse_int,
    parse_list,
)


def test_parse_int_leading_blanks_and_sign():
    assert parse_int(" \t-42abc") == -42
    assert parse_int("+7") == 7


def test_parse_int_without_digits_is_zero():
    assert parse_int("abc") == 0
    assert parse_int("") == 0
    assert parse_int("-") == 0


def test_parse_int_stops_at_non_digit():
    assert parse_int("12 34") == 12


@pytest.mark.parametrize(
    "text, expected",
    [
        ("2147483647", True),
        ("2147483648", False),
        ("-2147483648", True),
        ("-2147483649", False),
    ],
)
def test_is_valid_int_limits(text, expected):
    assert is_valid_int(text) is expected


def test_has_duplicate():
    assert has_duplicate([Node(1), Node(2), Node(1)]) is True
    assert has_duplicate([Node(1), Node(2), Node(3)]) is False
    assert has_duplicate([]) is False


def test_assign_indexes_ranks_values():
    stack = [Node(30), Node(10), Node(20)]
    assign_indexes(stack)
    assert [n.index for n in stack] == [2, 0, 1]


def test_assign_indexes_is_permutation():
    stack = [Node(v) for v in (5, -3, 100, 0, 42, 7)]
    assign_indexes(stack)
    assert sorted(n.index for n in stack) == list(range(len(stack)))
    by_index = sorted(stack, key=lambda n: n.index)
    assert [n.value for n in by_index] == sorted(n.value for n in stack)


def test_parse_list_keeps_order():
    stack = parse_list(["3", "-1", "2"])
    assert [n.value for n in stack] == [3, -1, 2]
    assert [n.index for n in stack] == [2, 0, 1]


def test_parse_list_empty():
    assert parse_list([]) == []


def test_parse_list_rejects_out_of_range():
    with pytest.raises(ParseError, match="invalid integer"):
        parse_list(["1", "2147483648"])


def test_parse_list_rejects_duplicates():
    with pytest.raises(ParseError, match="duplicated detected"):
        parse_list(["4", "5", "4"])