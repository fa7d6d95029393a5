"""Binary representation of 32-bit integers."""

from __future__ import annotations

_BITS = 32
_MASK = (1 << _BITS) - 1


def decimal_to_binary_str(n: int) -> str:
    """Two's-complement bits of a 32-bit int without leading zeros; "0" for 0."""
    if not -(2 ** (_BITS - 1)) <= n < 2 ** (_BITS - 1):
        raise ValueError(f"{n} does not fit in a 32-bit int")
    return format(n & _MASK, "b")