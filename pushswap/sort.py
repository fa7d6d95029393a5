"""Chunked sorting of stack a using stack b."""

from __future__ import annotations

from typing import Sequence

from pushswap.operations import Node, Stacks, rotate


def is_sorted_asc(nodes: Sequence[Node]) -> bool:
    """True if indexes never decrease from top to bottom."""
    return all(x.index <= y.index for x, y in zip(nodes, nodes[1:]))


def is_sorted_desc(nodes: Sequence[Node]) -> bool:
    """True if indexes never increase from top to bottom."""
    return all(x.index >= y.index for x, y in zip(nodes, nodes[1:]))


def get_max_index(nodes: Sequence[Node]) -> int:
    """Largest index in the stack, 0 for an empty stack."""
    return max((n.index for n in nodes), default=0)


def count_max_bits(nodes: Sequence[Node]) -> int:
    """Number of bits needed to write the largest index."""
    max_index = get_max_index(nodes)
    if max_index < 0:
        raise ValueError("stack has no assigned indexes")
    return max_index.bit_length()


def bring_max_to_top(stacks: Stacks, max_index: int) -> int:
    """Rotate b the shorter way until ``max_index`` is on top.

    Returns the number of rotations performed.
    """
    size = len(stacks.b)
    pos = next(
        (i for i, node in enumerate(stacks.b) if node.index == max_index), size
    )
    if pos < size // 2:
        for _ in range(pos):
            stacks.rb()
        return pos
    for _ in range(size - pos):
        stacks.rrb()
    return size - pos


def sort(stacks: Stacks) -> int:
    """Sort a by pushing chunks of indexes to b and pulling the maximum back.

    Returns the number of actions counted by the chunking and refilling
    passes; the rotations made while bringing the maximum of b to its top
    are not included.
    """
    list_size = len(stacks.a)
    chunk_size = list_size // 5
    if chunk_size == 0 and list_size > 1:
        raise ValueError("chunked sort needs at least 5 elements")
    current_chunk = 1
    limit = chunk_size * current_chunk
    count_in_b = 0
    actions = 0

    while stacks.a:
        if stacks.a[0].index <= limit:
            stacks.pb()
            count_in_b += 1
            actions += 1
            if stacks.b[0].index < limit - chunk_size // 2:
                actions += 1
                rotate(stacks.b)
                stacks.out.write("ra\n")
        else:
            stacks.ra()
            actions += 1
        if count_in_b == limit:
            current_chunk += 1
        limit = chunk_size * current_chunk

    while stacks.b:
        bring_max_to_top(stacks, get_max_index(stacks.b))
        stacks.pa()
        actions += 1
    return actions