from __future__ import annotations

import re
from typing import Iterable

_INVALID_TITLE_CHARS = re.compile(r"[\[\]:*?/\\]")
DEFAULT_TITLE = "Routes"


def safe_sheet_title(base: str) -> str:
    title = _INVALID_TITLE_CHARS.sub("_", base or "").strip()
    return title or DEFAULT_TITLE


def unique_name(base: str, existing: Iterable[str]) -> str:
    """Return `base`, or `base (2)`, `base (3)`, ... whichever is first unused.

    `existing` must reflect the host's state at call time; nothing is cached.
    """

    taken = set(existing)
    name = base
    counter = 1
    while name in taken:
        counter += 1
        name = f"{base} ({counter})"
    return name
