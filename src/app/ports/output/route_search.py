from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence

from src.domain.models import Itinerary


class IRouteSearch(ABC):
    """Port for the remote route search over 2-4 ordered station codes."""

    @abstractmethod
    def search_routes(self, station_codes: Sequence[str]) -> tuple[Itinerary, ...]:
        """Return itineraries in API order; empty means no route (or a failed call)."""
