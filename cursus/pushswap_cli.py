"""Command-line entry point that prints the push_swap instructions."""

from __future__ import annotations

import io
import sys
from typing import Sequence

from cursus.pushswap_input import assign_indices, parse_values, split_words, validate
from cursus.pushswap_sort import sort_stacks, sort_three
from cursus.stack import PushSwap, PushSwapError, is_sorted


def _sort(ps: PushSwap) -> None:
    size = len(ps.a)
    already = is_sorted(ps.a)
    if size == 2 and not already:
        ps.sa()
    elif size == 3:
        sort_three(ps)
    elif not already:
        sort_stacks(ps)


def solve(args: Sequence[str]) -> list[str]:
    """Instructions that sort the numbers given as command-line arguments.

    A single argument is split on whitespace. Raises PushSwapError on bad input.
    """
    if not args:
        return []
    words = split_words(args[0]) if len(args) == 1 else list(args)
    if not validate(words):
        raise PushSwapError()
    out = io.StringIO()
    ps = PushSwap(parse_values(words), out)
    assign_indices(ps.a)
    _sort(ps)
    return out.getvalue().splitlines()


def main(argv: Sequence[str] | None = None) -> int:
    """Print the sorting instructions; print ``Error`` and return 1 on bad input."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        return 0
    try:
        instructions = solve(args)
    except PushSwapError as exc:
        sys.stdout.write(f"{exc}\n")
        return 1
    for name in instructions:
        sys.stdout.write(f"{name}\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())