from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from ..utils.logging import get_logger
from .text import is_indented, list_marker


DEFAULT_WIDTH = 72

# ASCII only; a non-breaking space is part of its word
WHITESPACE = " \t\n\r\f\v"


class Direction(Enum):
    LEFT = -1
    RIGHT = 1


@dataclass(frozen=True)
class BreakResult:
    fitted: str
    leftover: str


def find_break(line: str, width: int, direction: Direction, floor: int = 0) -> int:
    """Scan from column `width` for whitespace, one step at a time.

    Returns the index of the whitespace found. A leftward scan that runs
    past `floor` returns -1; a rightward scan that runs off the end
    returns len(line). Characters before `floor` are never break points.
    """
    index = width if direction is Direction.LEFT else max(width, floor)
    offset = direction.value
    while floor <= index < len(line) and line[index] not in WHITESPACE:
        index += offset
    if index < floor:
        return -1
    return index


def _leading_whitespace(line: str) -> int:
    return len(line) - len(line.lstrip(WHITESPACE))


def break_line(line: str, width: int = DEFAULT_WIDTH, floor: Optional[int] = None) -> BreakResult:
    if len(line) <= width:
        return BreakResult(fitted=line, leftover="")

    if floor is None:
        floor = _leading_whitespace(line)
    index = find_break(line, width, Direction.LEFT, floor)
    if index == -1:
        index = find_break(line, width, Direction.RIGHT, floor)

    if index >= len(line):
        get_logger(__name__).debug(f"Unbreakable segment of {len(line)} columns exceeds width={width}")
        return BreakResult(fitted=line, leftover="")
    return BreakResult(fitted=line[: index + 1].rstrip(WHITESPACE), leftover=line[index + 1 :])


def _read_indentation(line: str) -> str:
    marker = list_marker(line)
    return " " * len(marker) if marker else ""


def wrap_line(line: str, width: int = DEFAULT_WIDTH, indentation: Optional[str] = None) -> List[str]:
    """Greedily wrap one logical line into physical lines.

    Continuation lines are prefixed with `indentation`; when it is not
    given, the prefix is the width of the line's own list marker.
    """
    if is_indented(line):
        return [line]

    lines: List[str] = []
    prefix: Optional[str] = None
    remaining = line
    while True:
        previous = remaining
        result = break_line((prefix or "") + remaining, width)
        lines.append(result.fitted.rstrip(WHITESPACE))
        if prefix is None:
            prefix = indentation if indentation is not None else _read_indentation(line)
        remaining = result.leftover.lstrip(WHITESPACE)
        if not remaining or remaining == previous:
            break
    return lines
