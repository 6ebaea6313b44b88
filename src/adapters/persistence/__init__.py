from .sheet_station_cache import SheetStationCache

__all__ = [
    "SheetStationCache",
]
