from __future__ import annotations

import logging
from dataclasses import dataclass

from src.app.ports.output import IStationCache, IStationSearch
from src.domain.exceptions import AmbiguousStation, StationNotFound
from src.domain.models import Station

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class StationResolver:
    """Maps free-text station names to stations.

    The local cache is consulted first; on a miss the remote search runs and
    its candidates are cached for the input slot they came from.
    """

    station_search: IStationSearch
    cache: IStationCache

    def candidates(self, name: str, slot: int | None = None) -> tuple[Station, ...]:
        stations = self.station_search.search_stations(name)
        if slot is not None:
            self.cache.replace(slot, stations)
        return stations

    def resolve(
        self, name: str, *, slot: int | None = None, index: int | None = None
    ) -> Station:
        name = (name or "").strip()
        if not name:
            raise ValueError("Station name must not be empty")

        cached = self.cache.find(name)
        if cached is not None:
            return cached

        logger.info("Station %r not cached; searching remotely", name)
        found = self.candidates(name, slot)
        if not found:
            raise StationNotFound(name, index)

        exact = [s for s in found if s.name == name]
        if exact:
            return exact[0]
        if len(found) == 1:
            return found[0]
        raise AmbiguousStation(name, found, index)
