from .route_search import (
    AmbiguousStation,
    MalformedResponse,
    MissingEndpoint,
    RemoteCallFailed,
    RouteSearchError,
    StationNotFound,
)

__all__ = [
    "AmbiguousStation",
    "MalformedResponse",
    "MissingEndpoint",
    "RemoteCallFailed",
    "RouteSearchError",
    "StationNotFound",
]
