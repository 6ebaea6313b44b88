from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class Segment:
    boarding_station: str
    line: str
    alighting_station: str


@dataclass(frozen=True, slots=True)
class Itinerary:
    """One candidate course returned by a route search.

    Price is the one-way total fare in yen (0 when the API gives no summary).
    """

    price: int = 0
    segments: tuple[Segment, ...] = field(default_factory=tuple)


@dataclass(frozen=True, slots=True)
class FormattedBlock:
    """Rendered itinerary, positioned by the caller."""

    title: str
    price_label: str
    column_header: tuple[str, str, str]
    rows: tuple[tuple[str, str, str], ...] = ()

    WIDTH = 3

    def to_grid(self) -> list[list[str]]:
        # Row 3 is intentionally left blank between the price and the table.
        grid: list[list[str]] = [
            [self.title, "", ""],
            [self.price_label, "", ""],
            ["", "", ""],
            list(self.column_header),
        ]
        grid.extend(list(row) for row in self.rows)
        return grid
