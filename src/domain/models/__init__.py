from .host import CellEdit
from .itinerary import FormattedBlock, Itinerary, Segment
from .station import Station
from .stop_request import StopRequest

__all__ = [
    "CellEdit",
    "FormattedBlock",
    "Itinerary",
    "Segment",
    "Station",
    "StopRequest",
]
