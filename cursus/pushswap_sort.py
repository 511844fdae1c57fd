"""Cost-driven sorting strategy for the push_swap stacks."""

from __future__ import annotations

from collections import deque
from typing import Iterable

from cursus.stack import Node, PushSwap, is_sorted


def _update_positions(stack: Iterable[Node]) -> None:
    for position, node in enumerate(stack):
        node.pos = position


def _find_target(a: Iterable[Node], index: int) -> int:
    """Position in ``a`` of the next larger index, or of the smallest one."""
    nodes = list(a)
    if not nodes:
        return 0
    above = [node for node in nodes if node.index > index]
    chosen = min(above or nodes, key=lambda node: node.index)
    return chosen.pos


def update_targets(ps: PushSwap) -> None:
    """Refresh positions and give every node of ``b`` its landing spot in ``a``."""
    _update_positions(ps.a)
    _update_positions(ps.b)
    for node in ps.b:
        node.target_pos = _find_target(ps.a, node.index)


def _signed_cost(position: int, size: int) -> int:
    """Rotations to bring ``position`` to the top; negative means reverse."""
    if position > size // 2:
        return -(size - position)
    return position


def compute_costs(ps: PushSwap) -> None:
    """Work out the rotations of each stack needed to insert every ``b`` node."""
    size_a = len(ps.a)
    size_b = len(ps.b)
    for node in ps.b:
        node.cost_b = _signed_cost(node.pos, size_b)
        node.cost_a = _signed_cost(node.target_pos, size_a)


def apply_moves(ps: PushSwap, cost_a: int, cost_b: int) -> None:
    """Rotate both stacks by the given costs, sharing moves, then push to ``a``."""
    if cost_a < 0 and cost_b < 0:
        while cost_a < 0 and cost_b < 0:
            cost_a += 1
            cost_b += 1
            ps.rrr()
    elif cost_a > 0 and cost_b > 0:
        while cost_a > 0 and cost_b > 0:
            cost_a -= 1
            cost_b -= 1
            ps.rr()
    while cost_a:
        if cost_a > 0:
            ps.ra()
            cost_a -= 1
        else:
            ps.rra()
            cost_a += 1
    while cost_b:
        if cost_b > 0:
            ps.rb()
            cost_b -= 1
        else:
            ps.rrb()
            cost_b += 1
    ps.pa()


def move_cheapest(ps: PushSwap) -> None:
    """Insert the ``b`` node whose total rotation count is smallest."""
    if not ps.b:
        return
    cheapest = min(ps.b, key=lambda node: abs(node.cost_a) + abs(node.cost_b))
    apply_moves(ps, cheapest.cost_a, cheapest.cost_b)


def lowest_position(stack: deque[Node]) -> int:
    """Position of the node with the smallest index (refreshing positions)."""
    _update_positions(stack)
    lowest = min(stack, key=lambda node: node.index)
    return lowest.pos


def _highest_index(stack: Iterable[Node]) -> int:
    return max(node.index for node in stack)


def sort_three(ps: PushSwap) -> None:
    """Sort a three-element stack ``a`` in at most two instructions."""
    if is_sorted(ps.a):
        return
    highest = _highest_index(ps.a)
    if ps.a[0].index == highest:
        ps.ra()
    elif ps.a[1].index == highest:
        ps.rra()
    if ps.a[0].index > ps.a[1].index:
        ps.sa()


def _push_phase(ps: PushSwap) -> None:
    size = len(ps.a)
    pushed = 0
    steps = 0
    while size > 6 and steps < size and pushed < size // 2:
        if ps.a[0].index <= size // 2:
            ps.pb()
            pushed += 1
        else:
            ps.ra()
        steps += 1
    while size - pushed > 3:
        ps.pb()
        pushed += 1


def _shift_phase(ps: PushSwap) -> None:
    size = len(ps.a)
    lowest = lowest_position(ps.a)
    if lowest > size // 2:
        for _ in range(size - lowest):
            ps.rra()
    else:
        for _ in range(lowest):
            ps.ra()


def sort_stacks(ps: PushSwap) -> None:
    """Sort ``a`` (more than three elements) using ``b`` as scratch space."""
    _push_phase(ps)
    sort_three(ps)
    while ps.b:
        update_targets(ps)
        compute_costs(ps)
        move_cheapest(ps)
    if not is_sorted(ps.a):
        _shift_phase(ps)