"""Itinerary transformation pipeline.

raw itineraries -> sort_itineraries -> paginate -> renderer, with the
visibility map consulted only by the renderer.
"""

from .formatting import format_duration, format_place, format_stops, format_timestamp
from .paginator import DEFAULT_PAGE_SIZE, paginate
from .sorter import DEFAULT_MISSING_PLACEMENT, sort_itineraries
from .timestamps import parse_timestamp, to_instant
from .visibility import DEFAULT_VISIBILITY, from_visible, toggle

__all__ = [
    "sort_itineraries",
    "DEFAULT_MISSING_PLACEMENT",
    "paginate",
    "DEFAULT_PAGE_SIZE",
    "toggle",
    "from_visible",
    "DEFAULT_VISIBILITY",
    "format_duration",
    "format_stops",
    "format_timestamp",
    "format_place",
    "parse_timestamp",
    "to_instant",
]
