from __future__ import annotations

from src.domain.models import FormattedBlock, Itinerary

COLUMN_HEADER: tuple[str, str, str] = ("Boarding", "Line", "Alighting")


def route_title(route_index: int) -> str:
    return f"Route {route_index + 1}"


def price_label(price: int) -> str:
    return f"Total: {price:,} yen"


def format_itinerary(itinerary: Itinerary, route_index: int) -> FormattedBlock:
    """Render one itinerary as a 3-column block (title, price, header, rows)."""

    rows = tuple(
        (seg.boarding_station, seg.line, seg.alighting_station)
        for seg in itinerary.segments
    )
    return FormattedBlock(
        title=route_title(route_index),
        price_label=price_label(itinerary.price),
        column_header=COLUMN_HEADER,
        rows=rows,
    )
