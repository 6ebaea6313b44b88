from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

if TYPE_CHECKING:
    from src.domain.models.station import Station


class RouteSearchError(Exception):
    """Base exception for failures that abort a route search run.

    `message` is meant to be shown to the user as-is.
    """

    code = "ROUTE_SEARCH_ERROR"

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class MissingEndpoint(RouteSearchError):
    """Raised when the origin or destination input is empty."""

    code = "MISSING_ENDPOINT"

    def __init__(
        self, message: str = "Origin and destination stations are required"
    ) -> None:
        super().__init__(message)


class StationNotFound(RouteSearchError):
    """Raised when a station name resolves to no candidates."""

    code = "STATION_NOT_FOUND"

    def __init__(self, name: str, index: int | None = None) -> None:
        self.name = name
        self.index = index
        if index is None:
            message = f"No station found for {name!r}"
        else:
            message = f"No station found for row {index} ({name})"
        super().__init__(message)


class AmbiguousStation(RouteSearchError):
    """Raised when a name matches several stations and none exactly.

    The candidates have been cached for the input slot; the user picks one.
    """

    code = "AMBIGUOUS_STATION"

    def __init__(
        self, name: str, candidates: Sequence["Station"], index: int | None = None
    ) -> None:
        self.name = name
        self.index = index
        self.candidates = tuple(candidates)
        names = ", ".join(c.name for c in self.candidates)
        where = f"row {index} ({name})" if index is not None else repr(name)
        super().__init__(f"Several stations match {where}; choose one of: {names}")


class MalformedResponse(Exception):
    """Raised when an API record does not have the expected shape."""


class RemoteCallFailed(Exception):
    """Raised when a remote API call does not produce a usable body."""

    def __init__(self, url: str, reason: str) -> None:
        self.url = url
        self.reason = reason
        super().__init__(f"{url}: {reason}")
