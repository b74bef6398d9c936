from __future__ import annotations

import re
from typing import List

from .line import DEFAULT_WIDTH, wrap_line
from .text import is_indented, is_list_item, list_marker


_spaces_re = re.compile(r" {2,}")


def combine_list_item_lines(lines: List[str]) -> List[str]:
    """Fold continuation lines onto the list item they belong to."""
    combined: List[str] = []
    for line in lines:
        if is_list_item(line) or not combined:
            combined.append(line)
        else:
            combined[-1] += _spaces_re.sub(" ", " " + line)
    return combined


def combine_paragraph_into_one_line(paragraph: str) -> str:
    return paragraph.replace("\n", " ")


def format_paragraph(paragraph: str, width: int = DEFAULT_WIDTH) -> List[str]:
    # Pre-formatted blocks (code samples etc.) are never reflowed
    if is_indented(paragraph):
        return paragraph.split("\n")

    if is_list_item(paragraph):
        out: List[str] = []
        for item in combine_list_item_lines(paragraph.split("\n")):
            marker = list_marker(item) or ""
            out.extend(wrap_line(item, width, indentation=" " * len(marker)))
        return out

    return wrap_line(combine_paragraph_into_one_line(paragraph), width, indentation="")
