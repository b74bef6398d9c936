from __future__ import annotations

import re
from typing import List

from ..utils.logging import get_logger
from .line import DEFAULT_WIDTH
from .paragraph import format_paragraph


_paragraph_break_re = re.compile(r"\n{2,}")


def split_paragraphs(document: str) -> List[str]:
    return [p for p in _paragraph_break_re.split(document) if p]


def wrap(document: str, width: int = DEFAULT_WIDTH) -> str:
    """Word-wrap `document` to `width` columns, one blank line between paragraphs."""
    paragraphs = split_paragraphs(document)
    get_logger(__name__).debug(f"Wrapping {len(paragraphs)} paragraph(s) at width={width}")
    return "\n\n".join("\n".join(format_paragraph(p, width)) for p in paragraphs)


word_wrap = wrap
