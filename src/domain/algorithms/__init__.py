from .itinerary_format import COLUMN_HEADER, format_itinerary, price_label, route_title
from .json_shape import as_sequence
from .sheet_naming import safe_sheet_title, unique_name

__all__ = [
    "COLUMN_HEADER",
    "as_sequence",
    "format_itinerary",
    "price_label",
    "route_title",
    "safe_sheet_title",
    "unique_name",
]
