"""Stack nodes and the elementary push_swap operations."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Iterable, List, Optional, TextIO


@dataclass
class Node:
    """One element of a stack: its value and its rank among all values."""

    value: int
    index: int = -1


def swap(stack: list) -> None:
    """Exchange the two top elements; no effect with fewer than two."""
    if len(stack) >= 2:
        stack[0], stack[1] = stack[1], stack[0]


def rotate(stack: list) -> None:
    """Move the top element to the bottom."""
    if len(stack) >= 2:
        stack.append(stack.pop(0))


def reverse_rotate(stack: list) -> None:
    """Move the bottom element to the top."""
    if len(stack) >= 2:
        stack.insert(0, stack.pop())


class Stacks:
    """The two stacks a and b; each named operation is written to ``out``.

    Index 0 of each list is the top of the stack.
    """

    def __init__(
        self,
        a: Optional[Iterable[Node]] = None,
        b: Optional[Iterable[Node]] = None,
        out: Optional[TextIO] = None,
    ) -> None:
        self.a: List[Node] = list(a) if a is not None else []
        self.b: List[Node] = list(b) if b is not None else []
        self.out: TextIO = out if out is not None else sys.stdout

    def _emit(self, name: str) -> None:
        self.out.write(name + "\n")

    def sa(self) -> None:
        swap(self.a)
        self._emit("sa")

    def sb(self) -> None:
        swap(self.b)
        self._emit("sb")

    def ss(self) -> None:
        swap(self.a)
        swap(self.b)
        self._emit("ss")

    def pa(self) -> None:
        """Move the top of b onto a; silent when b is empty."""
        if not self.b:
            return
        self.a.insert(0, self.b.pop(0))
        self._emit("pa")

    def pb(self) -> None:
        """Move the top of a onto b; silent when a is empty."""
        if not self.a:
            return
        self.b.insert(0, self.a.pop(0))
        self._emit("pb")

    def ra(self) -> None:
        rotate(self.a)
        self._emit("ra")

    def rb(self) -> None:
        rotate(self.b)
        self._emit("rb")

    def rr(self) -> None:
        rotate(self.a)
        rotate(self.b)
        self._emit("rr")

    def rra(self) -> None:
        reverse_rotate(self.a)
        self._emit("rra")

    def rrb(self) -> None:
        reverse_rotate(self.b)
        self._emit("rrb")

    def rrr(self) -> None:
        reverse_rotate(self.a)
        reverse_rotate(self.b)
        self._emit("rrr")