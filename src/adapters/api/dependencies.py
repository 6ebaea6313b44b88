from __future__ import annotations

import os
from typing import Any, Iterator

from fastapi import Depends

from src.adapters.ekispert import HttpEkispertClient
from src.adapters.persistence import SheetStationCache
from src.adapters.spreadsheet import OpenpyxlSpreadsheetHost
from src.app.ports.output import ISpreadsheetHost
from src.app.services.candidate_refresh_service import CandidateRefreshService
from src.app.services.input_layout import InputLayout
from src.app.services.route_orchestrator import RouteOrchestrator
from src.app.services.station_resolver import StationResolver
from src.domain.exceptions import RouteSearchError


def get_input_layout() -> InputLayout:
    overrides: dict[str, Any] = {}
    # Allow renaming the sheets without changing code.
    if os.getenv("EKIROUTE_INPUT_SHEET"):
        overrides["input_sheet"] = os.environ["EKIROUTE_INPUT_SHEET"]
    if os.getenv("EKIROUTE_DATA_SHEET"):
        overrides["data_sheet"] = os.environ["EKIROUTE_DATA_SHEET"]
    return InputLayout(**overrides)


def get_ekispert_client() -> HttpEkispertClient:
    return HttpEkispertClient()


def get_spreadsheet_host(
    layout: InputLayout = Depends(get_input_layout),
) -> Iterator[ISpreadsheetHost]:
    """Open the workbook for one request and save it afterwards.

    A `RouteSearchError` aborts a run before any output sheet exists, but the
    candidates it cached (and their dropdowns) are kept for the user to pick
    from. Any other failure leaves the file untouched.
    """

    path = os.getenv("WORKBOOK_PATH") or "data/ekiroute.xlsx"
    host: OpenpyxlSpreadsheetHost = OpenpyxlSpreadsheetHost.open(
        path, ensure_sheets=(layout.input_sheet, layout.data_sheet)
    )
    try:
        yield host
    except RouteSearchError:
        host.save()
        raise
    host.save()


def _station_resolver(
    host: ISpreadsheetHost, layout: InputLayout, client: HttpEkispertClient
) -> StationResolver:
    cache = SheetStationCache(host=host, layout=layout)
    return StationResolver(station_search=client, cache=cache)


def get_route_orchestrator(
    host: ISpreadsheetHost = Depends(get_spreadsheet_host),
    layout: InputLayout = Depends(get_input_layout),
    client: HttpEkispertClient = Depends(get_ekispert_client),
) -> RouteOrchestrator:
    return RouteOrchestrator(
        host=host,
        resolver=_station_resolver(host, layout, client),
        route_search=client,
        layout=layout,
    )


def get_candidate_refresh_service(
    host: ISpreadsheetHost = Depends(get_spreadsheet_host),
    layout: InputLayout = Depends(get_input_layout),
    client: HttpEkispertClient = Depends(get_ekispert_client),
) -> CandidateRefreshService:
    resolver = _station_resolver(host, layout, client)
    service = CandidateRefreshService(
        host=host, resolver=resolver, cache=resolver.cache, layout=layout
    )
    service.register()
    return service
