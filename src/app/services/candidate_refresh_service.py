from __future__ import annotations

import logging
from dataclasses import dataclass, field

from src.app.ports.output import ISpreadsheetHost, IStationCache
from src.domain.models import CellEdit, Station

from .input_layout import InputLayout
from .station_resolver import StationResolver

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class CandidateRefreshService:
    """Refreshes cached candidates when an input cell changes.

    The cache owns the slot's dropdown, so refreshing or clearing the cache
    also refreshes or clears the choices offered on the edited cell.
    """

    host: ISpreadsheetHost
    resolver: StationResolver
    cache: IStationCache
    layout: InputLayout = field(default_factory=InputLayout)

    def register(self) -> None:
        self.host.subscribe_cell_changed(self.on_cell_changed)

    def on_cell_changed(self, edit: CellEdit) -> tuple[Station, ...] | None:
        if edit.sheet != self.layout.input_sheet:
            return None
        slot = self.layout.slot_for(edit.row, edit.column)
        if slot is None:
            return None

        value = "" if edit.value is None else str(edit.value).strip()
        logger.debug("Input edit: row=%s value=%r", edit.row, value)

        if not value:
            self.cache.clear(slot)
            return ()
        return self.resolver.candidates(value, slot)
