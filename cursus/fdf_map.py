"""Reading and validating FdF height maps."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass, field
from typing import Union

PathLike = Union[str, "os.PathLike[str]"]

_SPACE = "\t\n\v\f\r "
_DIGITS = re.compile(r"[0-9]*")


class MapError(ValueError):
    """Raised when a map file cannot be read or is malformed."""


@dataclass(frozen=True, slots=True)
class Point:
    """A grid or screen point; ``z`` is the height."""

    x: int
    y: int
    z: int = 0


@dataclass(slots=True)
class HeightMap:
    """A rectangular grid of points, stored row by row."""

    width: int
    height: int
    points: list[list[Point]] = field(default_factory=list)


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value >= (1 << 31) else value


def atoi(text: str) -> int:
    """Read an optionally signed decimal prefix, wrapping like a 32-bit int."""
    rest = text.lstrip(_SPACE)
    sign = 1
    if rest[:1] == "+":
        rest = rest[1:]
    elif rest[:1] == "-":
        sign = -1
        rest = rest[1:]
    digits = _DIGITS.match(rest).group()
    magnitude = int(digits) if digits else 0
    return _to_int32(_to_int32(magnitude) * sign)


def _is_digit(char: str) -> bool:
    return len(char) == 1 and "0" <= char <= "9"


def _valid_input(line: str) -> bool:
    body = line[:-1] if line.endswith("\n") else line
    for i, char in enumerate(body):
        if char in "+-":
            if not _is_digit(line[i + 1 : i + 2]):
                return False
            if i and line[i - 1] != " ":
                return False
        elif not _is_digit(char) and char != " ":
            return False
    return True


def _words(line: str) -> list[str]:
    return [word for word in line.split(" ") if word]


def count_numbers(line: str) -> int:
    """Number of space-separated entries on a map line.

    Raises MapError for characters other than digits, spaces and signs
    placed directly before a digit, and for lines with no entries.
    """
    if not _valid_input(line):
        raise MapError(f"invalid map line: {line!r}")
    count = len(_words(line))
    if not count:
        raise MapError("empty map line")
    return count


def _read_lines(path: PathLike) -> list[str]:
    try:
        with open(path, "rb") as handle:
            return [raw.decode("latin-1") for raw in handle]
    except OSError as exc:
        raise MapError(f"cannot read map {os.fspath(path)!r}") from exc


def _width_of(lines: list[str]) -> int:
    if not lines:
        raise MapError("empty map")
    widths = {count_numbers(line) for line in lines}
    if len(widths) != 1:
        raise MapError("map rows have different widths")
    return widths.pop()


def map_width(path: PathLike) -> int:
    """Common number of entries per line; raises MapError if rows disagree."""
    return _width_of(_read_lines(path))


def map_height(path: PathLike) -> int:
    """Number of lines in the map file, never less than one."""
    return max(1, len(_read_lines(path)))


def load_map(path: PathLike) -> HeightMap:
    """Parse a map file into a HeightMap; raises MapError when it is invalid."""
    lines = _read_lines(path)
    width = _width_of(lines)
    points = [
        [Point(x, y, atoi(word)) for x, word in enumerate(_words(line))]
        for y, line in enumerate(lines)
    ]
    return HeightMap(width=width, height=len(lines), points=points)