"""Flight results: sortable, paginated, column-filterable itinerary lists.

The pipeline turns a raw itinerary collection into the ordered page to
show next. The Gradio app in ``apps/`` is one rendering front-end for it.
"""

from .domain import Column, Itinerary, Leg, Page, SortKey, ViewState, VisibilityMap
from .pipeline import format_duration, paginate, sort_itineraries, toggle

__all__ = [
    "Column",
    "Itinerary",
    "Leg",
    "Page",
    "SortKey",
    "ViewState",
    "VisibilityMap",
    "format_duration",
    "paginate",
    "sort_itineraries",
    "toggle",
]
