from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Station:
    """A station as known to the routing API.

    `code` is opaque: it is only round-tripped into route searches.
    """

    name: str
    code: str
