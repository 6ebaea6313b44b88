from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Sequence

from src.app.ports.output import IRouteSearch, ISpreadsheetHost
from src.domain.algorithms import format_itinerary, safe_sheet_title, unique_name
from src.domain.models import FormattedBlock, Station, StopRequest

from .input_layout import InputLayout
from .station_resolver import StationResolver

logger = logging.getLogger(__name__)

# 3 data columns + 1 spacer per itinerary block.
BLOCK_STRIDE = FormattedBlock.WIDTH + 1


@dataclass(frozen=True, slots=True)
class RouteRunResult:
    sheet_name: str
    stations: tuple[Station, ...]
    blocks: tuple[FormattedBlock, ...] = ()
    prices: tuple[int, ...] = ()


@dataclass(slots=True)
class RouteOrchestrator:
    """Use case behind the "search routes" command."""

    host: ISpreadsheetHost
    resolver: StationResolver
    route_search: IRouteSearch
    layout: InputLayout = field(default_factory=InputLayout)

    def read_stop_names(self) -> list[Any]:
        layout = self.layout
        rows = self.host.read_range(
            layout.input_sheet, layout.first_row, layout.input_column, layout.slots, 1
        )
        return [r[0] if r else None for r in rows]

    def run_from_input(self) -> RouteRunResult:
        return self.run(self.read_stop_names())

    def run(self, stop_names: Sequence[Any]) -> RouteRunResult:
        request = StopRequest.from_cells(stop_names)

        # Resolve everything before touching the output so failures leave no sheet.
        count = len(request.names)
        stations: list[Station] = []
        for index, name in request.filled():
            slot = self.layout.slot_for_stop(index, count)
            stations.append(self.resolver.resolve(name, slot=slot, index=index))

        itineraries = self.route_search.search_routes([s.code for s in stations])

        base = safe_sheet_title(f"{stations[0].name} to {stations[-1].name}")
        sheet_name = unique_name(base, self.host.sheet_names())
        self.host.create_sheet(sheet_name)

        blocks: list[FormattedBlock] = []
        for idx, itinerary in enumerate(itineraries):
            block = format_itinerary(itinerary, idx)
            column = 1 + idx * BLOCK_STRIDE
            self.host.write_range(sheet_name, 1, column, block.to_grid())
            blocks.append(block)

        logger.info(
            "Wrote %d route(s) for %r to %r (%d stop(s)) to sheet %r",
            len(blocks),
            request.origin,
            request.destination,
            len(stations),
            sheet_name,
        )
        return RouteRunResult(
            sheet_name=sheet_name,
            stations=tuple(stations),
            blocks=tuple(blocks),
            prices=tuple(it.price for it in itineraries),
        )
