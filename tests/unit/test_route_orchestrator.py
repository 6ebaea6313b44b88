from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

import pytest
from openpyxl import Workbook

from src.adapters.persistence import SheetStationCache
from src.adapters.spreadsheet import OpenpyxlSpreadsheetHost
from src.app.services.input_layout import InputLayout
from src.app.services.route_orchestrator import RouteOrchestrator
from src.app.services.station_resolver import StationResolver
from src.domain.exceptions import AmbiguousStation, MissingEndpoint, StationNotFound
from src.domain.models import Itinerary, Segment, Station


@dataclass(slots=True)
class FakeStationSearch:
    results: dict[str, tuple[Station, ...]]

    def search_stations(self, name: str) -> tuple[Station, ...]:
        return self.results.get(name, ())


@dataclass(slots=True)
class FakeRouteSearch:
    itineraries: tuple[Itinerary, ...]
    calls: list[list[str]] = field(default_factory=list)

    def search_routes(self, station_codes: Sequence[str]) -> tuple[Itinerary, ...]:
        self.calls.append(list(station_codes))
        return self.itineraries


STATIONS = {
    "Tokyo": (Station(name="Tokyo", code="22205"),),
    "Kanda": (Station(name="Kanda", code="22206"),),
    "Shinjuku": (Station(name="Shinjuku", code="22207"),),
    "Shin": (
        Station(name="Shinjuku", code="22207"),
        Station(name="Shin-Okubo", code="22208"),
    ),
}


def _itinerary(price: int, *stops_and_lines: str) -> Itinerary:
    stops = stops_and_lines[::2]
    lines = stops_and_lines[1::2]
    return Itinerary(
        price=price,
        segments=tuple(
            Segment(boarding_station=a, line=line, alighting_station=b)
            for a, line, b in zip(stops, lines, stops[1:])
        ),
    )


ITINERARIES = (
    _itinerary(210, "Tokyo", "JR Chuo Line (Rapid)", "Shinjuku"),
    _itinerary(
        200, "Tokyo", "JR Yamanote Line", "Kanda", "JR Chuo Line (Rapid)", "Shinjuku"
    ),
)


def _setup(
    itineraries: tuple[Itinerary, ...] = ITINERARIES,
) -> tuple[RouteOrchestrator, OpenpyxlSpreadsheetHost, FakeRouteSearch]:
    layout = InputLayout()
    host = OpenpyxlSpreadsheetHost(workbook=Workbook())
    host.ensure_sheets([layout.input_sheet, layout.data_sheet])
    routes = FakeRouteSearch(itineraries=itineraries)
    resolver = StationResolver(
        station_search=FakeStationSearch(STATIONS),
        cache=SheetStationCache(host=host, layout=layout),
    )
    orchestrator = RouteOrchestrator(
        host=host, resolver=resolver, route_search=routes, layout=layout
    )
    return orchestrator, host, routes


def _fill_input(host: OpenpyxlSpreadsheetHost, names: list[str | None]) -> None:
    host.write_range("Route Input", 1, 2, [[n] for n in names])


def test_end_to_end_blocks_side_by_side() -> None:
    orchestrator, host, routes = _setup()
    _fill_input(host, ["Tokyo", "", "", "Shinjuku"])

    result = orchestrator.run_from_input()

    assert routes.calls == [["22205", "22207"]]
    assert result.sheet_name == "Tokyo to Shinjuku"
    assert result.sheet_name in host.sheet_names()
    assert len(result.blocks) == 2

    sheet = result.sheet_name
    # Block 1 at column A, block 2 at column E (offset 4).
    assert host.read_cell(sheet, 1, 1) == "Route 1"
    assert host.read_cell(sheet, 2, 1) == "Total: 210 yen"
    assert host.read_range(sheet, 4, 1, 2, 3) == [
        ["Boarding", "Line", "Alighting"],
        ["Tokyo", "JR Chuo Line (Rapid)", "Shinjuku"],
    ]
    assert host.read_cell(sheet, 1, 5) == "Route 2"
    assert host.read_cell(sheet, 2, 5) == "Total: 200 yen"
    assert host.read_range(sheet, 5, 5, 2, 3) == [
        ["Tokyo", "JR Yamanote Line", "Kanda"],
        ["Kanda", "JR Chuo Line (Rapid)", "Shinjuku"],
    ]
    # Spacer column stays empty.
    assert all(v is None for (v,) in host.read_range(sheet, 1, 4, 6, 1))


def test_waypoints_are_passed_in_input_order() -> None:
    orchestrator, _, routes = _setup()

    orchestrator.run(["Tokyo", "", "Kanda", "Shinjuku"])

    assert routes.calls == [["22205", "22206", "22207"]]


def test_second_run_gets_unique_sheet_name() -> None:
    orchestrator, host, _ = _setup()

    first = orchestrator.run(["Tokyo", None, None, "Shinjuku"])
    second = orchestrator.run(["Tokyo", None, None, "Shinjuku"])
    third = orchestrator.run(["Tokyo", "Shinjuku"])

    assert [first.sheet_name, second.sheet_name, third.sheet_name] == [
        "Tokyo to Shinjuku",
        "Tokyo to Shinjuku (2)",
        "Tokyo to Shinjuku (3)",
    ]
    assert len(set(host.sheet_names())) == len(host.sheet_names())


def test_no_route_still_creates_output_sheet() -> None:
    orchestrator, host, _ = _setup(itineraries=())

    result = orchestrator.run(["Tokyo", "", "", "Shinjuku"])

    assert result.blocks == ()
    assert result.sheet_name in host.sheet_names()


def test_missing_origin_aborts_without_output() -> None:
    orchestrator, host, routes = _setup()
    before = host.sheet_names()

    with pytest.raises(MissingEndpoint):
        orchestrator.run(["", "", "", "Shinjuku"])

    assert host.sheet_names() == before
    assert routes.calls == []


def test_unresolvable_station_aborts_without_output() -> None:
    orchestrator, host, routes = _setup()
    before = host.sheet_names()

    with pytest.raises(StationNotFound) as excinfo:
        orchestrator.run(["Tokyo", "Atlantis", "", "Shinjuku"])

    assert excinfo.value.index == 2
    assert excinfo.value.name == "Atlantis"
    assert host.sheet_names() == before
    assert routes.calls == []


def test_resolved_stations_are_cached_per_slot() -> None:
    orchestrator, host, _ = _setup()

    orchestrator.run(["Tokyo", "", "", "Shinjuku"])

    # Origin -> columns A/B, destination -> columns G/H of the data sheet.
    assert host.read_range("Station Data", 2, 1, 1, 2) == [["Tokyo", "22205"]]
    assert host.read_range("Station Data", 2, 7, 1, 2) == [["Shinjuku", "22207"]]


def test_two_stop_run_caches_destination_in_last_slot() -> None:
    orchestrator, host, _ = _setup()
    host.write_range("Station Data", 2, 3, [["Kanda", "22206"]])

    orchestrator.run(["Tokyo", "Shinjuku"])

    # Waypoint 1 (columns C/D) is not touched by a run without waypoints.
    assert host.read_range("Station Data", 2, 3, 1, 2) == [["Kanda", "22206"]]
    assert host.read_range("Station Data", 2, 7, 1, 2) == [["Shinjuku", "22207"]]


def test_unknown_destination_of_two_stop_run_leaves_waypoint_slot() -> None:
    orchestrator, host, _ = _setup()
    host.write_range("Station Data", 2, 3, [["Kanda", "22206"]])
    host.set_constrained_choice("Route Input", 2, 2, "Station Data", 2, 3, 1)

    with pytest.raises(StationNotFound):
        orchestrator.run(["Tokyo", "Atlantis"])

    assert host.read_range("Station Data", 2, 3, 1, 2) == [["Kanda", "22206"]]
    assert host.constrained_choices("Route Input", 2, 2) == ["Kanda"]


def test_ambiguous_station_leaves_candidates_as_dropdown() -> None:
    orchestrator, host, routes = _setup()
    _fill_input(host, ["Tokyo", None, None, "Shin"])

    with pytest.raises(AmbiguousStation) as excinfo:
        orchestrator.run_from_input()

    assert excinfo.value.index == 4
    assert routes.calls == []
    assert host.read_range("Station Data", 2, 7, 2, 2) == [
        ["Shinjuku", "22207"],
        ["Shin-Okubo", "22208"],
    ]
    assert host.constrained_choices("Route Input", 4, 2) == ["Shinjuku", "Shin-Okubo"]
