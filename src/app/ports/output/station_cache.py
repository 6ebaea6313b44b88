from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence

from src.domain.models import Station


class IStationCache(ABC):
    """Port for the local name -> code lookup table, one column pair per slot."""

    @abstractmethod
    def find(self, name: str) -> Station | None:
        """Exact name match first, then a cached name containing `name`."""

    @abstractmethod
    def replace(self, slot: int, stations: Sequence[Station]) -> None:
        """Overwrite the cached candidates of an input slot (0-based).

        The slot's input cell offers the new candidates as its choices.
        """

    @abstractmethod
    def clear(self, slot: int) -> None:
        raise NotImplementedError
