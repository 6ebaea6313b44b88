from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence

from src.domain.exceptions import MissingEndpoint

MIN_STOPS = 2
MAX_STOPS = 4


def _cell_text(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()


@dataclass(frozen=True, slots=True)
class StopRequest:
    """Ordered stop names: origin, optional waypoints, destination."""

    names: tuple[str, ...]

    def __post_init__(self) -> None:
        if not (MIN_STOPS <= len(self.names) <= MAX_STOPS):
            raise ValueError(
                f"Expected {MIN_STOPS}-{MAX_STOPS} stop names, got {len(self.names)}"
            )
        if not self.names[0] or not self.names[-1]:
            raise MissingEndpoint()

    @staticmethod
    def from_cells(values: Sequence[Any]) -> "StopRequest":
        return StopRequest(names=tuple(_cell_text(v) for v in values))

    @property
    def origin(self) -> str:
        return self.names[0]

    @property
    def destination(self) -> str:
        return self.names[-1]

    def filled(self) -> list[tuple[int, str]]:
        """Non-empty entries with their 1-based input index."""
        return [(i, name) for i, name in enumerate(self.names, start=1) if name]
