from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class CellEdit:
    """A user edit reported by the spreadsheet host (1-based row/column)."""

    sheet: str
    row: int
    column: int
    value: Any = None
