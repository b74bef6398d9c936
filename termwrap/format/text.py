from __future__ import annotations

import re
from typing import Optional


LIST_ITEM_RE = re.compile(r"\A((?:[a-z0-9]+[).]|\*) )")
_indented_re = re.compile(r"\A +")


def is_indented(text: str) -> bool:
    return bool(_indented_re.match(text))


def list_marker(text: str) -> Optional[str]:
    """Return the leading list marker (trailing space included), if any."""
    m = LIST_ITEM_RE.match(text)
    return m.group(1) if m else None


def is_list_item(text: str) -> bool:
    return list_marker(text) is not None
