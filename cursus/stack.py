"""Two-stack machine with the push_swap instruction set."""

from __future__ import annotations

import sys
from collections import deque
from dataclasses import dataclass
from itertools import pairwise
from typing import Iterable, TextIO


class PushSwapError(ValueError):
    """Raised for any invalid input; its message is always ``Error``."""

    def __init__(self, message: str = "Error") -> None:
        super().__init__(message)


@dataclass(slots=True)
class Node:
    """One element of a stack together with its sorting bookkeeping."""

    value: int
    index: int = 0
    pos: int = -1
    target_pos: int = -1
    cost_a: int = -1
    cost_b: int = -1


def _swap(stack: deque[Node]) -> None:
    if len(stack) < 2:
        return
    first, second = stack[0], stack[1]
    first.value, second.value = second.value, first.value
    first.index, second.index = second.index, first.index


def _push(source: deque[Node], target: deque[Node]) -> None:
    if source:
        target.appendleft(source.popleft())


def _rotate(stack: deque[Node]) -> None:
    if len(stack) > 1:
        stack.rotate(-1)


def _reverse_rotate(stack: deque[Node]) -> None:
    if len(stack) > 1:
        stack.rotate(1)


class PushSwap:
    """Stacks ``a`` and ``b``; every instruction is written to ``out``.

    The top of each stack is the left end of its deque.
    """

    def __init__(self, values: Iterable[int | Node], out: TextIO | None = None) -> None:
        self.a: deque[Node] = deque(
            v if isinstance(v, Node) else Node(v) for v in values
        )
        self.b: deque[Node] = deque()
        self.out = sys.stdout if out is None else out

    def _emit(self, name: str) -> None:
        self.out.write(f"{name}\n")

    def sa(self) -> None:
        _swap(self.a)
        self._emit("sa")

    def sb(self) -> None:
        _swap(self.b)
        self._emit("sb")

    def ss(self) -> None:
        _swap(self.a)
        _swap(self.b)
        self._emit("ss")

    def pa(self) -> None:
        _push(self.b, self.a)
        self._emit("pa")

    def pb(self) -> None:
        _push(self.a, self.b)
        self._emit("pb")

    def ra(self) -> None:
        _rotate(self.a)
        self._emit("ra")

    def rb(self) -> None:
        _rotate(self.b)
        self._emit("rb")

    def rr(self) -> None:
        _rotate(self.a)
        _rotate(self.b)
        self._emit("rr")

    def rra(self) -> None:
        _reverse_rotate(self.a)
        self._emit("rra")

    def rrb(self) -> None:
        _reverse_rotate(self.b)
        self._emit("rrb")

    def rrr(self) -> None:
        _reverse_rotate(self.a)
        _reverse_rotate(self.b)
        self._emit("rrr")


def is_sorted(stack: Iterable[Node]) -> bool:
    """True when values never decrease from top to bottom."""
    return all(upper.value <= lower.value for upper, lower in pairwise(stack))


def format_stack(stack: Iterable[Node]) -> str:
    """Values from top to bottom, separated by single spaces."""
    return " ".join(str(node.value) for node in stack)