"""Domain layer - Core business models and errors.

This module contains immutable domain models and typed errors
used throughout the application. No external dependencies.
"""

from .errors import (
    ConfigurationError,
    FlightResultsError,
    InvalidArgumentError,
    SourceError,
)
from .models import (
    MISSING,
    Carrier,
    Column,
    FieldValue,
    Itinerary,
    Leg,
    Missing,
    Page,
    Place,
    Present,
    Price,
    SortKey,
    ViewState,
    VisibilityMap,
    present_or_missing,
)

__all__ = [
    # Models
    "Carrier",
    "Place",
    "Price",
    "Leg",
    "Itinerary",
    "SortKey",
    "Column",
    "VisibilityMap",
    "Page",
    "ViewState",
    # Present / Missing
    "Present",
    "Missing",
    "MISSING",
    "FieldValue",
    "present_or_missing",
    # Errors
    "FlightResultsError",
    "InvalidArgumentError",
    "SourceError",
    "ConfigurationError",
]
