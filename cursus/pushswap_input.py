"""Argument parsing, validation and ranking for push_swap."""

from __future__ import annotations

import re
from typing import Iterable, Sequence

from cursus.stack import Node, PushSwapError

INT_MIN = -2147483648
INT_MAX = 2147483647

_SPACE = "\t\n\v\f\r "
_WORD = re.compile(r"[^\t\n\v\f\r ]+")


def atol(text: str) -> int:
    """Read an optionally signed decimal prefix after leading whitespace."""
    rest = text.lstrip(_SPACE)
    sign = 1
    if rest[:1] in ("+", "-"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits = re.match(r"[0-9]*", rest).group()
    return sign * int(digits) if digits else 0


def split_words(text: str) -> list[str]:
    """Split on ASCII whitespace, dropping empty pieces."""
    return _WORD.findall(text)


def _is_number(arg: str) -> bool:
    rest = arg.lstrip(_SPACE)
    if rest[:1] in ("+", "-"):
        rest = rest[1:]
    return rest.lstrip("0123456789") == ""


def _is_zero(arg: str) -> bool:
    rest = arg[1:] if arg[:1] in ("+", "-") else arg
    return rest.lstrip("0") == ""


def _same_number(first: str, second: str) -> bool:
    return first.removeprefix("+") == second.removeprefix("+")


def _has_duplicate(args: Sequence[str]) -> bool:
    return any(
        _same_number(first, second)
        for i, first in enumerate(args)
        for second in args[i + 1 :]
    )


def validate(args: Sequence[str]) -> bool:
    """True when every argument is numeric, none repeats and at most one is zero."""
    if _has_duplicate(args):
        return False
    zeros = 0
    for arg in args:
        if not _is_number(arg):
            return False
        zeros += _is_zero(arg)
        if zeros > 1:
            return False
    return True


def parse_values(args: Iterable[str]) -> list[int]:
    """Convert arguments to ints, rejecting values outside the 32-bit range."""
    result = []
    for arg in args:
        number = atol(arg)
        if number > INT_MAX or number < INT_MIN:
            raise PushSwapError()
        result.append(number)
    return result


def assign_indices(stack: Iterable[Node]) -> None:
    """Give every node its 1-based rank by value.

    The smallest 32-bit value always ranks 1; among equal values the one
    nearer the top ranks higher.
    """
    nodes = list(stack)
    for node in nodes:
        node.index = 0
    rest = []
    for position, node in enumerate(nodes):
        if node.value == INT_MIN:
            node.index = 1
        else:
            rest.append((node.value, -position, node))
    rest.sort(key=lambda item: (item[0], item[1]), reverse=True)
    for rank, (_, _, node) in zip(range(len(nodes), 0, -1), rest):
        node.index = rank