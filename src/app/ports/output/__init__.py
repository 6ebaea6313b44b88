from .route_search import IRouteSearch
from .spreadsheet_host import CellChangedHandler, ISpreadsheetHost
from .station_cache import IStationCache
from .station_search import IStationSearch

__all__ = [
    "CellChangedHandler",
    "IRouteSearch",
    "ISpreadsheetHost",
    "IStationCache",
    "IStationSearch",
]
