"""Turning command-line arguments into an indexed stack."""

from __future__ import annotations

from typing import Iterable, List, Sequence

from pushswap.operations import Node

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1


class ParseError(ValueError):
    """Raised when the arguments do not describe a valid stack."""


def parse_int(text: str) -> int:
    """Read a leading integer: blanks and tabs, an optional sign, digits.

    Parsing stops at the first character that is not a digit; no digits give 0.
    """
    stripped = text.lstrip(" \t")
    sign = 1
    if stripped[:1] in ("+", "-"):
        if stripped[0] == "-":
            sign = -1
        stripped = stripped[1:]
    digits = []
    for ch in stripped:
        if ch not in "0123456789":
            break
        digits.append(ch)
    return sign * int("".join(digits)) if digits else 0


def is_valid_int(text: str) -> bool:
    """True if the leading integer of ``text`` fits in a signed 32-bit int."""
    return INT_MIN <= parse_int(text) <= INT_MAX


def has_duplicate(nodes: Iterable[Node]) -> bool:
    """True if two nodes share a value."""
    seen = set()
    for node in nodes:
        if node.value in seen:
            return True
        seen.add(node.value)
    return False


def assign_indexes(nodes: Sequence[Node]) -> None:
    """Give every node its rank: the number of values smaller than its own."""
    ordered = sorted({node.value for node in nodes})
    rank = {value: position for position, value in enumerate(ordered)}
    for node in nodes:
        node.index = rank[node.value]


def parse_list(args: Iterable[str]) -> List[Node]:
    """Build the initial stack from the arguments, top first."""
    result = []
    for arg in args:
        if not is_valid_int(arg):
            raise ParseError("Error: invalid integer")
        result.append(Node(parse_int(arg)))
    if has_duplicate(result):
        raise ParseError("Error:duplicated detected")
    assign_indexes(result)
    return result