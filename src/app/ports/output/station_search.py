from __future__ import annotations

from abc import ABC, abstractmethod

from src.domain.models import Station


class IStationSearch(ABC):
    """Port for the remote partial-match station search."""

    @abstractmethod
    def search_stations(self, name: str) -> tuple[Station, ...]:
        """Return candidates for `name`; empty when nothing (or the call) fails."""
