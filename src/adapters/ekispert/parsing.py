from __future__ import annotations

import logging
from typing import Any, Mapping

from src.domain.algorithms import as_sequence
from src.domain.exceptions import MalformedResponse
from src.domain.models import Itinerary, Segment, Station

logger = logging.getLogger(__name__)

FARE_SUMMARY = "FareSummary"


def result_set(body: Any) -> Mapping[str, Any]:
    if not isinstance(body, Mapping):
        raise MalformedResponse("Response body is not a JSON object")
    rs = body.get("ResultSet")
    if not isinstance(rs, Mapping):
        raise MalformedResponse("Response body has no ResultSet")
    return rs


def _text(record: Any, key: str) -> str:
    if not isinstance(record, Mapping):
        raise MalformedResponse(f"Expected an object holding {key!r}")
    value = record.get(key)
    if value is None or (isinstance(value, str) and not value.strip()):
        raise MalformedResponse(f"Missing {key!r}")
    return str(value).strip()


def parse_station(point: Any) -> Station:
    station = point.get("Station") if isinstance(point, Mapping) else None
    return Station(name=_text(station, "Name"), code=_text(station, "code"))


def parse_stations(body: Any) -> tuple[Station, ...]:
    stations: list[Station] = []
    for point in as_sequence(result_set(body).get("Point")):
        try:
            stations.append(parse_station(point))
        except MalformedResponse as exc:
            logger.warning("Skipping malformed station point: %s", exc)
    return tuple(stations)


def parse_price(prices: Any) -> int:
    """One-way total fare from the Price collection; 0 when no summary is given."""

    summary = next(
        (
            p
            for p in as_sequence(prices)
            if isinstance(p, Mapping) and p.get("kind") == FARE_SUMMARY
        ),
        None,
    )
    if summary is None:
        return 0
    oneway = summary.get("Oneway")
    if oneway in (None, ""):
        return 0
    try:
        return int(float(oneway))
    except (TypeError, ValueError) as exc:
        raise MalformedResponse(f"Invalid Oneway fare: {oneway!r}") from exc


def _point_name(point: Any) -> str:
    if isinstance(point, Mapping) and isinstance(point.get("Station"), Mapping):
        return _text(point["Station"], "Name")
    # Non-station points (e.g. walking destinations) only carry a name.
    return _text(point, "Name")


def parse_segments(route: Any) -> list[Segment]:
    if not isinstance(route, Mapping):
        raise MalformedResponse("Route is not an object")
    points = as_sequence(route.get("Point"))
    lines = as_sequence(route.get("Line"))
    if len(points) != len(lines) + 1:
        raise MalformedResponse(
            f"Route has {len(points)} points for {len(lines)} lines"
        )

    names = [_point_name(p) for p in points]
    return [
        Segment(
            boarding_station=names[i],
            line=_text(line, "Name"),
            alighting_station=names[i + 1],
        )
        for i, line in enumerate(lines)
    ]


def parse_course(course: Any) -> Itinerary:
    if not isinstance(course, Mapping):
        raise MalformedResponse("Course is not an object")
    segments: list[Segment] = []
    for route in as_sequence(course.get("Route")):
        segments.extend(parse_segments(route))
    return Itinerary(price=parse_price(course.get("Price")), segments=tuple(segments))


def parse_courses(body: Any) -> tuple[Itinerary, ...]:
    itineraries: list[Itinerary] = []
    for idx, course in enumerate(as_sequence(result_set(body).get("Course"))):
        try:
            itineraries.append(parse_course(course))
        except MalformedResponse as exc:
            logger.warning("Skipping malformed course #%d: %s", idx + 1, exc)
    return tuple(itineraries)
